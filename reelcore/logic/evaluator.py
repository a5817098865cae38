"""Payline and scatter win evaluation."""
import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from reelcore.config import settings
from reelcore.logic.catalog import SymbolCatalog
from reelcore.logic.models import Evaluation, LineWin, Payline, Symbol


logger = logging.getLogger(__name__)

# Run length -> line multiplier; runs of six or more use LONG_RUN_MULTIPLIER
RUN_MULTIPLIERS = {4: 3, 5: 5}
LONG_RUN_MULTIPLIER = 8
WILD_LINE_BONUS = 1.5


def round_currency(amount: float, places: int = 2) -> float:
    """Round half up to ``places`` decimals (no banker's rounding on cents)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(amount)).quantize(quantum, rounding=ROUND_HALF_UP))


def run_multiplier(count: int, wilds_used: int) -> float:
    if count >= 6:
        multiplier = LONG_RUN_MULTIPLIER
    else:
        multiplier = RUN_MULTIPLIERS.get(count, 1)
    if wilds_used > 0:
        return multiplier * WILD_LINE_BONUS
    return float(multiplier)


class WinEvaluator:
    """
    Evaluates a stopped grid against the active paylines.

    Stateless apart from the rules it is built with; ``evaluate`` is a pure
    function of its arguments, so evaluating the same grid twice gives the
    same result.
    """

    def __init__(
        self,
        catalog: SymbolCatalog,
        scatter_threshold: int = settings.scatter_threshold,
        base_free_spins: int = settings.base_free_spins,
        scatter_pay_min_count: int = settings.scatter_pay_min_count,
        currency_unit: float = settings.currency_unit,
    ):
        self.catalog = catalog
        self.scatter_threshold = scatter_threshold
        self.base_free_spins = base_free_spins
        self.scatter_pay_min_count = scatter_pay_min_count
        self.currency_unit = currency_unit

    def evaluate(
        self,
        grid: Sequence[Sequence[str]],
        paylines: Sequence[Payline],
        active_payline_count: int,
        min_win_length: int,
        bet_amount: float,
        free_spin_multiplier: float = 1.0,
        is_in_free_spins: bool = False,
    ) -> Evaluation:
        """
        Evaluate one grid.

        Args:
            grid: ``grid[row][reel]`` symbol ids
            paylines: All paylines; only the first ``active_payline_count`` count
            active_payline_count: Lines staked this spin
            min_win_length: Shortest run that pays
            bet_amount: Stake per line
            free_spin_multiplier: Applied to every payout when in free spins
            is_in_free_spins: Whether the spin being evaluated was a free spin

        Returns:
            Evaluation with scatter and line wins aggregated.
        """
        result = Evaluation()
        multiplier = free_spin_multiplier if is_in_free_spins else 1.0

        # Scatter pass
        result.scatter_count = self.count_scatters(grid)
        if result.scatter_count >= self.scatter_pay_min_count:
            payout = round_currency(result.scatter_count * bet_amount * active_payline_count)
            if is_in_free_spins and payout > 0:
                payout = round_currency(payout * multiplier)
            result.scatter_payout = payout
        result.free_spins_awarded = self.free_spins_for(result.scatter_count)

        # Payline pass
        line_total = 0.0
        for index, payline in enumerate(paylines[:active_payline_count]):
            line_win = self.evaluate_line(
                grid, payline, index, min_win_length, bet_amount,
            )
            if line_win is None:
                continue
            if is_in_free_spins:
                line_win.payout = round_currency(line_win.payout * multiplier)
            result.line_wins.append(line_win)
            result.winning_paylines.append(payline)
            result.wilds_used += line_win.wilds_used
            line_total += line_win.payout

        result.total_win = round_currency(result.scatter_payout + line_total)
        return result

    def count_scatters(self, grid: Sequence[Sequence[str]]) -> int:
        scatter = self.catalog.scatter
        if scatter is None:
            return 0
        return sum(1 for row in grid for symbol_id in row if symbol_id == scatter.id)

    def free_spins_for(self, scatter_count: int) -> int:
        """Free spins awarded for ``scatter_count`` scatters (0 below threshold)."""
        if scatter_count < self.scatter_threshold:
            return 0
        extra = scatter_count - self.scatter_threshold
        return int(self.base_free_spins + extra * (self.base_free_spins / 2))

    def evaluate_line(
        self,
        grid: Sequence[Sequence[str]],
        payline: Payline,
        payline_index: int,
        min_win_length: int,
        bet_amount: float,
    ) -> LineWin | None:
        """Left-anchored run on one payline, before any free-spin multiplier."""
        symbols = self._line_symbols(grid, payline)
        if symbols is None or len(symbols) < min_win_length:
            return None
        if symbols[0].is_scatter:
            return None

        target = self._target_symbol(symbols)
        if target is None or target.payout_value <= 0:
            return None

        count = 0
        wilds_used = 0
        for symbol in symbols:
            if symbol.is_wild:
                wilds_used += 1
            elif symbol.id != target.id:
                break
            count += 1

        if count < min_win_length:
            return None

        raw = target.payout_value * run_multiplier(count, wilds_used) * bet_amount
        payout = max(self.currency_unit, round_currency(raw))
        return LineWin(
            payline_index=payline_index,
            payline_id=payline.id,
            symbol_id=target.id,
            count=count,
            wilds_used=wilds_used,
            payout=payout,
            positions=payline.positions[:count],
        )

    def _line_symbols(
        self, grid: Sequence[Sequence[str]], payline: Payline
    ) -> list[Symbol] | None:
        symbols: list[Symbol] = []
        for reel, row in payline.positions:
            symbol = None
            if 0 <= row < len(grid) and 0 <= reel < len(grid[row]):
                symbol = self.catalog.get(grid[row][reel])
            if symbol is None:
                logger.warning(
                    "Payline %s has no symbol at reel %d, row %d; line pays 0",
                    payline.id,
                    reel,
                    row,
                )
                return None
            symbols.append(symbol)
        return symbols

    def _target_symbol(self, symbols: list[Symbol]) -> Symbol | None:
        first = symbols[0]
        if not first.is_wild:
            return first
        for symbol in symbols:
            if symbol.is_regular:
                return symbol
        return self.catalog.highest_paying_regular()
