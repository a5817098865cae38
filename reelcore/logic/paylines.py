"""Payline geometry for an arbitrary reels x rows grid.

Each payline is an ordered tuple of (reel, row) cells. Lines are generated in
a fixed order, so the first N lines are always the same N lines for a given
grid size; ``active_payline_count`` selects that prefix.
"""
from reelcore.logic.models import Payline


PAYLINE_COLORS = (
    "#ff4757", "#3742fa", "#2ed573", "#ffa502",
    "#ff6b81", "#5352ed", "#7bed9f", "#ff9ff3",
    "#70a1ff", "#dda0dd", "#98d8c8", "#f7b731",
)

# Lines shorter than this are never generated
MIN_LINE_LENGTH = 3


def payline_color(index: int) -> str:
    return PAYLINE_COLORS[index % len(PAYLINE_COLORS)]


def _template_lines(rows: int) -> list[tuple[str, str, str, list[int]]]:
    """Five-reel templates as (id, name, kind, row per reel)."""
    bottom = rows - 1
    mid = rows // 2
    return [
        ("zigzag", "Zigzag", "zigzag", [0, bottom, 0, bottom, 0]),
        ("rev_zigzag", "Rev-Zigzag", "rev-zigzag", [bottom, 0, bottom, 0, bottom]),
        ("m_shape", "M-Shape", "m-shape", [0, bottom, 0, bottom, 0]),
        ("w_shape", "W-Shape", "w-shape", [bottom, 0, bottom, 0, bottom]),
        ("arrow_up", "Arrow ↑", "arrow-up", [bottom, mid, 0, mid, bottom]),
        ("arrow_down", "Arrow ↓", "arrow-down", [0, mid, bottom, mid, 0]),
        ("m_shape_mid", "M-Shape Mid", "m-shape-mid", [bottom, 0, 1, 0, bottom]),
    ]


def _late_template_lines(rows: int) -> list[tuple[str, str, str, list[int]]]:
    bottom = rows - 1
    mid = rows // 2
    return [
        ("step_up", "Step Up", "step-up", [bottom, bottom, mid, 0, 0]),
        ("step_down", "Step Down", "step-down", [0, 0, mid, bottom, bottom]),
        ("crown_up", "Crown ↑", "crown-up", [mid, 0, mid, 0, mid]),
        ("crown_down", "Crown ↓", "crown-down", [mid, bottom, mid, bottom, mid]),
        ("wave_smooth", "Wave ~", "wave", [mid, 0, mid, bottom, mid]),
        ("wave_reverse", "Wave Rev ~", "wave-reverse", [mid, bottom, mid, 0, mid]),
        ("l_left", "L-Left", "l-left", [0, 0, 0, mid, bottom]),
        ("l_right", "L-Right", "l-right", [bottom, mid, bottom, bottom, bottom]),
        ("bridge", "Bridge", "bridge", [0, 0, mid, bottom, bottom]),
        ("inv_bridge", "Inv-Bridge", "inv-bridge", [bottom, bottom, mid, 0, 0]),
        ("peak", "Peak", "peak", [mid, 0, 0, 0, mid]),
        ("valley", "Valley", "valley", [mid, bottom, bottom, bottom, mid]),
    ]


def _v_rows(reels: int, rows: int) -> list[int]:
    mid_reel = reels // 2
    line = [min(i, rows - 1) for i in range(mid_reel + 1)]
    for i in range(mid_reel + 1, reels):
        line.append((rows - 1) - (i - (mid_reel + 1)) - 1)
    return line


def _inverted_v_rows(reels: int, rows: int) -> list[int]:
    mid_reel = reels // 2
    line = [max(0, (rows - 1) - i) for i in range(mid_reel + 1)]
    for i in range(mid_reel + 1, reels):
        line.append((i - (mid_reel + 1)) + 1)
    return line


def generate_paylines(reels: int, rows: int) -> list[Payline]:
    """
    All paylines for a grid, in evaluation order.

    Pure: the same (reels, rows) always gives the same list. Shapes that
    happen to coincide on small grids are kept as separate lines.
    """
    lines: list[Payline] = []

    def add(line_id: str, name: str, kind: str, row_per_reel: list[int]) -> None:
        cells = tuple(
            (reel, min(max(row, 0), rows - 1))
            for reel, row in enumerate(row_per_reel[:reels])
        )
        if len(cells) < MIN_LINE_LENGTH:
            return
        lines.append(Payline(
            id=line_id,
            name=name,
            kind=kind,
            positions=cells,
            color=payline_color(len(lines)),
        ))

    for row in range(rows):
        add(f"horizontal_{row}", f"Line {row + 1}", "horizontal", [row] * reels)

    if rows >= 3 and reels >= 3:
        length = min(reels, rows)
        add("diagonal_tlbr", "Diagonal ↘", "diagonal", list(range(length)))
        add(
            "diagonal_trbl",
            "Diagonal ↙",
            "diagonal",
            [rows - 1 - i for i in range(length)],
        )

    big_grid = rows >= 3 and reels >= 5
    if big_grid:
        add("v_shape", "V-Line", "v-shape", _v_rows(reels, rows))
        add("inv_v_shape", "Inv-V Line", "inv-v-shape", _inverted_v_rows(reels, rows))
        for line_id, name, kind, pattern in _template_lines(rows):
            add(line_id, name, kind, pattern)

    if rows >= 2 and reels >= 3:
        add("square_wave", "Square Wave", "square-wave", [i % 2 for i in range(reels)])
        add(
            "inv_square_wave",
            "Inv Square Wave",
            "inv-square-wave",
            [(i + 1) % 2 for i in range(reels)],
        )

    if big_grid:
        for line_id, name, kind, pattern in _late_template_lines(rows):
            add(line_id, name, kind, pattern)

    return lines
