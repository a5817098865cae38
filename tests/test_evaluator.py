"""Win evaluation tests: left-anchored runs, wilds, scatters, rounding."""
import logging

import pytest

from reelcore.logic.catalog import SymbolCatalog
from reelcore.logic.evaluator import WinEvaluator, round_currency, run_multiplier
from reelcore.logic.models import Payline
from reelcore.logic.paylines import generate_paylines


SINGLE_ROW = generate_paylines(5, 1)


@pytest.fixture
def evaluator(classic_catalog: SymbolCatalog) -> WinEvaluator:
    return WinEvaluator(classic_catalog, scatter_threshold=3, base_free_spins=10)


def evaluate_row(evaluator: WinEvaluator, row: list[str], **kwargs):
    params = {
        "active_payline_count": 1,
        "min_win_length": 3,
        "bet_amount": 1.0,
    }
    params.update(kwargs)
    return evaluator.evaluate([row], SINGLE_ROW, **params)


class TestPayoutScenarios:
    """Reference scenarios on a single-row grid, bet 1."""

    def test_three_cherries(self, evaluator: WinEvaluator):
        """Three cherries pay value times bet."""
        result = evaluate_row(evaluator, ["cherry", "cherry", "cherry", "lemon", "lemon"])
        assert result.total_win == 5.0
        assert result.wilds_used == 0
        assert len(result.line_wins) == 1
        win = result.line_wins[0]
        assert win.symbol_id == "cherry"
        assert win.count == 3
        assert win.positions == ((0, 0), (1, 0), (2, 0))
        assert result.winning_paylines == [SINGLE_ROW[0]]

    def test_leading_wild(self, evaluator: WinEvaluator):
        """A leading wild takes the next symbol and adds the wild bonus."""
        result = evaluate_row(evaluator, ["wild", "cherry", "cherry", "lemon", "lemon"])
        assert result.total_win == 7.5
        assert result.wilds_used == 1
        assert result.line_wins[0].count == 3
        assert result.line_wins[0].symbol_id == "cherry"

    def test_four_scatters_award_fifteen_free_spins(self, evaluator: WinEvaluator):
        """Four scatters pay and award fifteen free spins."""
        result = evaluate_row(evaluator, ["scatter", "scatter", "scatter", "scatter", "cherry"])
        assert result.scatter_count == 4
        assert result.free_spins_awarded == 15
        assert result.scatter_payout == 4.0
        assert result.line_wins == []
        assert result.total_win == 4.0


class TestLineRules:
    """Run detection on one payline."""

    def test_run_must_start_at_first_reel(self, evaluator: WinEvaluator):
        """Runs not touching reel 0 never pay."""
        result = evaluate_row(evaluator, ["lemon", "cherry", "cherry", "cherry", "cherry"])
        assert result.total_win == 0
        assert result.line_wins == []

    def test_run_breaks_on_mismatch(self, evaluator: WinEvaluator):
        """A mismatch ends the run."""
        result = evaluate_row(evaluator, ["cherry", "cherry", "lemon", "cherry", "cherry"])
        assert result.line_wins == []

    def test_leftmost_scatter_never_wins(self, evaluator: WinEvaluator):
        """Lines starting with a scatter never pay."""
        result = evaluate_row(evaluator, ["scatter", "cherry", "cherry", "cherry", "cherry"])
        assert result.line_wins == []
        assert result.scatter_count == 1
        assert result.scatter_payout == 0

    def test_scatter_breaks_wild_run(self, evaluator: WinEvaluator):
        """Scatters do not substitute."""
        result = evaluate_row(evaluator, ["wild", "scatter", "cherry", "cherry", "cherry"])
        assert result.line_wins == []

    def test_all_wilds_pay_as_highest_regular(self, evaluator: WinEvaluator):
        """An all-wild line pays as the top regular symbol."""
        result = evaluate_row(evaluator, ["wild"] * 5)
        win = result.line_wins[0]
        assert win.symbol_id == "star"
        assert win.count == 5
        assert win.wilds_used == 5
        assert win.payout == 200 * 5 * 1.5

    def test_wild_in_the_middle_extends_run(self, evaluator: WinEvaluator):
        """A wild inside the run extends it."""
        result = evaluate_row(evaluator, ["bell", "wild", "bell", "bell", "lemon"])
        win = result.line_wins[0]
        assert win.count == 4
        assert win.wilds_used == 1
        assert win.payout == 50 * 3 * 1.5

    @pytest.mark.parametrize(
        "row,expected",
        [
            (["cherry", "cherry", "cherry", "cherry", "lemon"], 15.0),
            (["cherry"] * 5, 25.0),
        ],
    )
    def test_run_length_multipliers(self, evaluator: WinEvaluator, row, expected):
        """Longer runs use the run multiplier table."""
        assert evaluate_row(evaluator, row).total_win == expected

    def test_min_win_length_two(self, evaluator: WinEvaluator):
        """Two-symbol runs pay when allowed."""
        result = evaluate_row(
            evaluator, ["lemon", "lemon", "cherry", "orange", "bell"], min_win_length=2
        )
        assert result.total_win == 10.0

    def test_min_win_length_longer_than_line(self, evaluator: WinEvaluator):
        """No line pays when the minimum exceeds its length."""
        result = evaluate_row(evaluator, ["cherry"] * 5, min_win_length=6)
        assert result.line_wins == []

    def test_tiny_bet_pays_at_least_one_cent(self, evaluator: WinEvaluator):
        """Winning lines pay at least one currency unit."""
        result = evaluate_row(
            evaluator, ["cherry", "cherry", "cherry", "lemon", "lemon"], bet_amount=0.0005
        )
        assert result.line_wins[0].payout == 0.01

    def test_invalid_position_pays_nothing(self, evaluator: WinEvaluator, caplog):
        """Off-grid positions void the line and log a warning."""
        broken = Payline(
            id="broken",
            name="Broken",
            kind="test",
            positions=((0, 0), (1, 5), (2, 0)),
            color="#ffffff",
        )
        with caplog.at_level(logging.WARNING, logger="reelcore.logic.evaluator"):
            result = evaluator.evaluate(
                [["cherry"] * 5], [broken], 1, 3, 1.0,
            )
        assert result.line_wins == []
        assert "Payline broken has no symbol" in caplog.text

    def test_only_active_paylines_are_evaluated(self, evaluator: WinEvaluator):
        """Lines past the active count are ignored."""
        paylines = generate_paylines(5, 3)
        grid = [
            ["lemon", "orange", "grapes", "bell", "star"],
            ["cherry", "cherry", "cherry", "lemon", "lemon"],
            ["bell", "star", "grapes", "orange", "lemon"],
        ]
        one_line = evaluator.evaluate(grid, paylines, 1, 3, 1.0)
        two_lines = evaluator.evaluate(grid, paylines, 2, 3, 1.0)
        assert one_line.total_win == 0
        assert two_lines.total_win == 5.0
        assert two_lines.line_wins[0].payline_index == 1


class TestScatters:
    """Position-independent scatter pays and free-spin awards."""

    def test_two_scatters_pay_without_free_spins(self, evaluator: WinEvaluator):
        """Two scatters pay but award nothing."""
        paylines = generate_paylines(5, 3)
        grid = [
            ["scatter", "lemon", "orange", "grapes", "bell"],
            ["lemon", "orange", "grapes", "bell", "star"],
            ["orange", "grapes", "bell", "star", "scatter"],
        ]
        result = evaluator.evaluate(grid, paylines, 28, 3, 0.02)
        assert result.scatter_count == 2
        assert result.scatter_payout == round_currency(2 * 0.02 * 28)
        assert result.free_spins_awarded == 0

    @pytest.mark.parametrize("count,expected", [(0, 0), (2, 0), (3, 10), (4, 15), (5, 20), (6, 25)])
    def test_free_spin_awards(self, evaluator: WinEvaluator, count: int, expected: int):
        """Awards grow by half the base per extra scatter."""
        assert evaluator.free_spins_for(count) == expected


class TestFreeSpinMultiplier:
    """Payouts inside a free-spin session."""

    def test_line_payout_is_multiplied(self, evaluator: WinEvaluator):
        """Line wins get the session multiplier."""
        result = evaluate_row(
            evaluator,
            ["cherry", "cherry", "cherry", "lemon", "lemon"],
            free_spin_multiplier=1.25,
            is_in_free_spins=True,
        )
        assert result.total_win == 6.25

    def test_scatter_payout_is_multiplied(self, evaluator: WinEvaluator):
        """Scatter pays get the session multiplier."""
        result = evaluate_row(
            evaluator,
            ["scatter", "scatter", "scatter", "scatter", "cherry"],
            free_spin_multiplier=1.25,
            is_in_free_spins=True,
        )
        assert result.scatter_payout == 5.0

    def test_multiplier_ignored_outside_free_spins(self, evaluator: WinEvaluator):
        """Paid spins ignore the multiplier."""
        result = evaluate_row(
            evaluator,
            ["cherry", "cherry", "cherry", "lemon", "lemon"],
            free_spin_multiplier=1.25,
            is_in_free_spins=False,
        )
        assert result.total_win == 5.0


class TestPurity:
    """Evaluation has no side effects."""

    def test_idempotent(self, evaluator: WinEvaluator):
        """Same grid, same evaluation."""
        paylines = generate_paylines(5, 3)
        grid = [
            ["wild", "bell", "bell", "bell", "star"],
            ["bell", "wild", "bell", "scatter", "lemon"],
            ["scatter", "bell", "wild", "orange", "scatter"],
        ]
        first = evaluator.evaluate(grid, paylines, 28, 3, 0.5)
        second = evaluator.evaluate(grid, paylines, 28, 3, 0.5)
        assert first == second
        assert first.total_win > 0


class TestHelpers:
    """Rounding and multipliers."""

    @pytest.mark.parametrize(
        "amount,expected",
        [(0.125, 0.13), (2.675, 2.68), (7.5, 7.5), (0.004, 0.0), (1.005, 1.01)],
    )
    def test_round_half_up(self, amount: float, expected: float):
        """Halves round away from zero."""
        assert round_currency(amount) == expected

    def test_run_multiplier_table(self):
        """Multipliers by run length, with wild bonus."""
        assert run_multiplier(3, 0) == 1
        assert run_multiplier(4, 0) == 3
        assert run_multiplier(5, 0) == 5
        assert run_multiplier(6, 0) == 8
        assert run_multiplier(7, 0) == 8
        assert run_multiplier(3, 2) == 1.5
