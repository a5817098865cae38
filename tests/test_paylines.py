"""Payline geometry tests."""
import pytest

from reelcore.logic.paylines import PAYLINE_COLORS, generate_paylines


EXPECTED_5X3_IDS = [
    "horizontal_0", "horizontal_1", "horizontal_2",
    "diagonal_tlbr", "diagonal_trbl",
    "v_shape", "inv_v_shape",
    "zigzag", "rev_zigzag",
    "m_shape", "w_shape", "arrow_up", "arrow_down",
    "m_shape_mid",
    "square_wave", "inv_square_wave",
    "step_up", "step_down",
    "crown_up", "crown_down",
    "wave_smooth", "wave_reverse",
    "l_left", "l_right",
    "bridge", "inv_bridge", "peak", "valley",
]


def rows_of(payline) -> list[int]:
    return [row for _, row in payline.positions]


class TestFiveByThree:
    """The default grid."""

    def test_line_count_and_order(self):
        """5x3 yields 28 lines in a fixed order."""
        paylines = generate_paylines(5, 3)
        assert len(paylines) == 28
        assert [p.id for p in paylines] == EXPECTED_5X3_IDS

    def test_shapes(self):
        """Row patterns of the named shapes."""
        by_id = {p.id: p for p in generate_paylines(5, 3)}
        assert rows_of(by_id["horizontal_1"]) == [1, 1, 1, 1, 1]
        assert rows_of(by_id["diagonal_tlbr"]) == [0, 1, 2]
        assert rows_of(by_id["diagonal_trbl"]) == [2, 1, 0]
        assert rows_of(by_id["v_shape"]) == [0, 1, 2, 1, 0]
        assert rows_of(by_id["inv_v_shape"]) == [2, 1, 0, 1, 2]
        assert rows_of(by_id["arrow_up"]) == [2, 1, 0, 1, 2]
        assert rows_of(by_id["m_shape_mid"]) == [2, 0, 1, 0, 2]
        assert rows_of(by_id["square_wave"]) == [0, 1, 0, 1, 0]
        assert rows_of(by_id["inv_square_wave"]) == [1, 0, 1, 0, 1]
        assert rows_of(by_id["l_right"]) == [2, 1, 2, 2, 2]
        assert rows_of(by_id["valley"]) == [1, 2, 2, 2, 1]

    def test_names(self):
        """Display names of the basic lines."""
        by_id = {p.id: p for p in generate_paylines(5, 3)}
        assert by_id["horizontal_0"].name == "Line 1"
        assert by_id["diagonal_tlbr"].name == "Diagonal ↘"
        assert by_id["v_shape"].name == "V-Line"

    def test_colors_cycle_by_index(self):
        """Colours cycle through the palette."""
        paylines = generate_paylines(5, 3)
        for index, payline in enumerate(paylines):
            assert payline.color == PAYLINE_COLORS[index % 12]

    def test_reels_run_left_to_right(self):
        """Cells are ordered by reel from 0."""
        for payline in generate_paylines(5, 3):
            reels = [reel for reel, _ in payline.positions]
            assert reels == list(range(len(reels)))


class TestOtherGrids:
    """Shape availability depends on grid size."""

    @pytest.mark.parametrize(
        "reels,rows,expected",
        [
            (5, 1, 1),
            (3, 2, 4),
            (3, 3, 7),
            (4, 3, 7),
            (6, 4, 29),
        ],
    )
    def test_line_counts(self, reels: int, rows: int, expected: int):
        """Line count per grid size."""
        assert len(generate_paylines(reels, rows)) == expected

    @pytest.mark.parametrize("reels,rows", [(3, 1), (3, 3), (5, 3), (6, 4), (8, 6)])
    def test_cells_stay_in_grid(self, reels: int, rows: int):
        """Every cell is inside the grid."""
        for payline in generate_paylines(reels, rows):
            assert 3 <= len(payline.positions) <= reels
            for reel, row in payline.positions:
                assert 0 <= reel < reels
                assert 0 <= row < rows

    def test_diagonal_length_is_shorter_side(self):
        """Diagonals are as long as the shorter side."""
        by_id = {p.id: p for p in generate_paylines(6, 4)}
        assert rows_of(by_id["diagonal_tlbr"]) == [0, 1, 2, 3]
        assert rows_of(by_id["diagonal_trbl"]) == [3, 2, 1, 0]

    def test_templates_cover_at_most_five_reels(self):
        """Templates stop at five reels; generated lines span all."""
        by_id = {p.id: p for p in generate_paylines(6, 4)}
        assert len(by_id["horizontal_0"].positions) == 6
        assert len(by_id["zigzag"].positions) == 5
        assert len(by_id["square_wave"].positions) == 6

    def test_reproducible(self):
        """Same grid, same lines."""
        assert generate_paylines(5, 3) == generate_paylines(5, 3)
