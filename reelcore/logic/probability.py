"""Symbol probability model under the win-rate knob."""
import logging

from reelcore.errors import ErrorCode, GameError
from reelcore.logic.catalog import SymbolCatalog
from reelcore.logic.models import Symbol
from reelcore.logic.rng import RNGBase


logger = logging.getLogger(__name__)

# Win-rate extremes use explicit multipliers instead of the linear blend
WIN_RATE_FLOOR = 0.005
WIN_RATE_CEILING = 0.995

WILD_MULTIPLIER_MIN = 0.001
WILD_MULTIPLIER_MAX = 3.0
WILD_BLEND_BASE = 0.05
WILD_BLEND_SLOPE = 2.45

SCATTER_MULTIPLIER_MIN = 0.001
SCATTER_MULTIPLIER_MAX = 3.5
SCATTER_BLEND_BASE = 0.05
SCATTER_BLEND_SLOPE = 2.95

# Regular symbols move by at most 15% at the extremes
REGULAR_HIGH_BAND = 0.7
REGULAR_LOW_BAND = 0.3
REGULAR_ADJUST_SLOPE = 0.5


def wild_multiplier(win_rate_normalized: float) -> float:
    if win_rate_normalized <= WIN_RATE_FLOOR:
        return WILD_MULTIPLIER_MIN
    if win_rate_normalized >= WIN_RATE_CEILING:
        return WILD_MULTIPLIER_MAX
    return WILD_BLEND_BASE + win_rate_normalized * WILD_BLEND_SLOPE


def scatter_multiplier(win_rate_normalized: float) -> float:
    if win_rate_normalized <= WIN_RATE_FLOOR:
        return SCATTER_MULTIPLIER_MIN
    if win_rate_normalized >= WIN_RATE_CEILING:
        return SCATTER_MULTIPLIER_MAX
    return SCATTER_BLEND_BASE + win_rate_normalized * SCATTER_BLEND_SLOPE


def regular_adjustment(win_rate_normalized: float) -> float:
    """Factor applied to regular symbols, inverse to the win rate."""
    if win_rate_normalized > REGULAR_HIGH_BAND:
        return 1.0 - (win_rate_normalized - REGULAR_HIGH_BAND) * REGULAR_ADJUST_SLOPE
    if win_rate_normalized < REGULAR_LOW_BAND:
        return 1.0 + (REGULAR_LOW_BAND - win_rate_normalized) * REGULAR_ADJUST_SLOPE
    return 1.0


def compute_distribution(
    catalog: SymbolCatalog,
    win_rate: float,
    wild_rarity: float,
    scatter_rarity: float,
) -> dict[str, float]:
    """
    Effective per-symbol probabilities, normalized to sum to 1.0.

    Wild and scatter start from their rarity settings and are scaled by the
    win rate; regular symbols get a mild inverse adjustment. When nothing is
    selectable the distribution falls back to uniform over paying regular
    symbols, then uniform over every symbol.

    Raises:
        GameError: EMPTY_CATALOG if the catalog has no symbols.
    """
    if len(catalog) == 0:
        raise GameError(ErrorCode.EMPTY_CATALOG, "Symbol catalog is empty.")

    wr = min(max(win_rate, 0.0), 100.0) / 100.0
    adjusted: dict[str, float] = {}
    for symbol in catalog.symbols:
        if symbol.is_wild:
            probability = wild_rarity * wild_multiplier(wr)
        elif symbol.is_scatter:
            probability = scatter_rarity * scatter_multiplier(wr)
        else:
            probability = symbol.base_probability * regular_adjustment(wr)
        adjusted[symbol.id] = max(0.0, probability)

    total = sum(adjusted.values())
    if total <= 0:
        return _uniform_fallback(catalog)

    return {symbol_id: p / total for symbol_id, p in adjusted.items()}


def _uniform_fallback(catalog: SymbolCatalog) -> dict[str, float]:
    targets = [s for s in catalog.regular_symbols if s.payout_value > 0]
    if not targets:
        targets = list(catalog.symbols)
    logger.warning(
        "Total symbol probability is zero for theme %s; "
        "falling back to uniform over %d symbols",
        catalog.theme_id,
        len(targets),
    )
    target_ids = {s.id for s in targets}
    share = 1.0 / len(targets)
    return {s.id: (share if s.id in target_ids else 0.0) for s in catalog.symbols}


class ProbabilityModel:
    """
    Weighted symbol sampler for one catalog and one set of knobs.

    The distribution is recomputed whenever a knob changes, never per draw.
    """

    def __init__(
        self,
        catalog: SymbolCatalog,
        win_rate: float = 50,
        wild_rarity: float = 0.05,
        scatter_rarity: float = 0.03,
    ):
        self.catalog = catalog
        self.win_rate = win_rate
        self.wild_rarity = wild_rarity
        self.scatter_rarity = scatter_rarity
        self._distribution: dict[str, float] = {}
        self._cumulative: list[tuple[str, float]] = []
        self._recompute()

    def configure(
        self,
        *,
        catalog: SymbolCatalog | None = None,
        win_rate: float | None = None,
        wild_rarity: float | None = None,
        scatter_rarity: float | None = None,
    ) -> None:
        """Update any knob and recompute the distribution."""
        if catalog is not None:
            self.catalog = catalog
        if win_rate is not None:
            self.win_rate = win_rate
        if wild_rarity is not None:
            self.wild_rarity = wild_rarity
        if scatter_rarity is not None:
            self.scatter_rarity = scatter_rarity
        self._recompute()

    def _recompute(self) -> None:
        self._distribution = compute_distribution(
            self.catalog, self.win_rate, self.wild_rarity, self.scatter_rarity
        )
        cumulative = 0.0
        self._cumulative = []
        for symbol in self.catalog.symbols:
            cumulative += self._distribution[symbol.id]
            self._cumulative.append((symbol.id, cumulative))

    @property
    def probabilities(self) -> dict[str, float]:
        """Symbol id -> effective probability (copy)."""
        return dict(self._distribution)

    def sample(self, rng: RNGBase) -> str:
        """Draw one symbol id by walking the cumulative distribution."""
        u = rng.random()
        last_selectable = None
        for symbol_id, cumulative in self._cumulative:
            if self._distribution[symbol_id] <= 0:
                continue
            last_selectable = symbol_id
            if u <= cumulative:
                return symbol_id
        # Rounding left the cumulative total just under u
        return last_selectable

    def sample_symbol(self, rng: RNGBase) -> Symbol:
        """Draw one catalog entry."""
        return self.catalog.get(self.sample(rng))
