"""Reel strip generation with horizontal influence between adjacent reels."""
import logging

from reelcore.config import settings
from reelcore.logic.probability import ProbabilityModel
from reelcore.logic.rng import RNGBase


logger = logging.getLogger(__name__)

# Match chance at the win-rate extremes
MATCH_CHANCE_MIN = 0.0001
MATCH_CHANCE_MAX = 0.9999
MATCH_CHANCE_LOWER_CLAMP = 0.001
MATCH_CHANCE_UPPER_CLAMP = 0.98

# Wild upgrade of a matched symbol
WILD_UPGRADE_MIN_WIN_RATE = 0.01
WILD_UPGRADE_BASE = 0.1
WILD_UPGRADE_SLOPE = 1.9
FORCED_WILD_OFFSET = 0.1
FORCED_WILD_SCALE = 2.5


def match_chance(win_rate_normalized: float) -> float:
    """Chance that a position copies the previous reel's symbol."""
    if win_rate_normalized <= 0.005:
        return MATCH_CHANCE_MIN
    if win_rate_normalized >= 0.995:
        return MATCH_CHANCE_MAX
    chance = win_rate_normalized ** 2 * 0.8 + 0.1 * win_rate_normalized
    return min(max(chance, MATCH_CHANCE_LOWER_CLAMP), MATCH_CHANCE_UPPER_CLAMP)


class ReelStripGenerator:
    """
    Builds one strip per reel from a ProbabilityModel.

    Reel 0 is always a run of independent draws. In physical mode every later
    reel leans on its left neighbour, which is where the win-rate knob gets
    most of its effect. In randomize mode every reel is independent.
    """

    def __init__(
        self,
        model: ProbabilityModel,
        rng: RNGBase,
        strip_length: int = settings.reel_strip_length,
        min_length: int = settings.min_reel_strip_length,
    ):
        self.model = model
        self.rng = rng
        # Shorter strips show visible repetition while spinning
        self.strip_length = max(strip_length, min_length)

    def generate(self, reels: int, randomize: bool = False) -> list[tuple[str, ...]]:
        """Build ``reels`` strips of ``strip_length`` symbol ids."""
        strips: list[tuple[str, ...]] = []
        for reel_index in range(reels):
            if reel_index == 0 or randomize:
                strip = self._independent_strip()
            else:
                strip = self._influenced_strip(strips[reel_index - 1])
            strips.append(strip)

        logger.debug(
            "Generated %d strips of length %d (randomize=%s, win_rate=%s)",
            reels,
            self.strip_length,
            randomize,
            self.model.win_rate,
        )
        return strips

    def _independent_strip(self) -> tuple[str, ...]:
        return tuple(self.model.sample(self.rng) for _ in range(self.strip_length))

    def _influenced_strip(self, prev_strip: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(
            self._influenced_symbol(prev_strip[i % len(prev_strip)])
            for i in range(self.strip_length)
        )

    def _influenced_symbol(self, prev_id: str) -> str:
        """
        Sample one position given the symbol to its left.

        Only regular symbols propagate; wilds and scatters to the left fall
        through to an independent draw.
        """
        catalog = self.model.catalog
        wr = self.model.win_rate / 100.0
        prev = catalog.get(prev_id)
        wild = catalog.wild

        if wr <= 0 or prev is None or not prev.is_regular:
            return self.model.sample(self.rng)

        force_wild = False
        if wr >= 0.995:
            forced = (self.model.wild_rarity + FORCED_WILD_OFFSET) * FORCED_WILD_SCALE
            force_wild = self.rng.random() < forced

        if self.rng.random() >= match_chance(wr):
            return self.model.sample(self.rng)

        if wild is None:
            return prev_id
        if force_wild:
            return wild.id
        if wr > WILD_UPGRADE_MIN_WIN_RATE:
            upgrade = self.model.wild_rarity * (WILD_UPGRADE_BASE + wr * WILD_UPGRADE_SLOPE)
            if self.rng.random() < upgrade:
                return wild.id
        return prev_id
