"""Projection of reel strips and stop positions onto the visible grid."""
import logging
import math
from typing import Sequence

from reelcore.logic.probability import ProbabilityModel
from reelcore.logic.rng import RNGBase


logger = logging.getLogger(__name__)


def strip_index(position: float, row: int, length: int) -> int:
    """
    Strip index shown in ``row`` when the reel rests at ``position``.

    Stopped-reel rendering, the reel-stop scatter cue and the grid all go
    through here, so what is drawn is what gets evaluated.
    """
    if length <= 0:
        return 0
    if position is None or (isinstance(position, float) and math.isnan(position)):
        position = 0
    return (math.floor(position) + row) % length


class GridProjector:
    """Derives the rows x reels grid of symbol ids from strips and positions."""

    def __init__(self, model: ProbabilityModel, rng: RNGBase):
        self.model = model
        self.rng = rng

    def project(
        self,
        strips: Sequence[Sequence[str]],
        positions: Sequence[float],
        rows: int,
    ) -> list[list[str]]:
        """
        Return ``grid[row][reel]``.

        A missing or unknown slot is replaced by a fresh draw in the returned
        grid only. The strip itself is never rewritten.
        """
        reels = len(positions)
        grid: list[list[str]] = [[""] * reels for _ in range(rows)]
        for reel in range(reels):
            strip = strips[reel] if reel < len(strips) else ()
            column = self.visible_symbols(strip, positions[reel], rows, reel)
            for row, symbol_id in enumerate(column):
                grid[row][reel] = symbol_id
        return grid

    def visible_symbols(
        self,
        strip: Sequence[str],
        position: float,
        rows: int,
        reel: int = 0,
    ) -> list[str]:
        """
        Symbol ids shown top to bottom by one stopped reel.

        Uses the same substitution as ``project``; callers that need the
        column to match an already projected grid must read it from that grid.
        """
        return [self._symbol_at(strip, position, row, reel) for row in range(rows)]

    def _symbol_at(self, strip: Sequence[str], position: float, row: int, reel: int) -> str:
        index = strip_index(position, row, len(strip))
        symbol_id = strip[index] if strip else None
        if symbol_id and symbol_id in self.model.catalog:
            return symbol_id

        substitute = self.model.sample(self.rng)
        logger.warning(
            "Missing symbol at reel %d, strip index %d (found %r); "
            "showing %s for this spin only",
            reel,
            index,
            symbol_id,
            substitute,
        )
        return substitute
