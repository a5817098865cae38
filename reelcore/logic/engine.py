"""Slot machine game instance: spin lifecycle, wallet, free spins and controls."""
import logging

from reelcore.config import Settings, settings as default_settings
from reelcore.config_hash import get_config_hash
from reelcore.errors import ErrorCode
from reelcore.logic.animation import ReelAnimationController
from reelcore.logic.catalog import SymbolCatalog
from reelcore.logic.evaluator import WinEvaluator, round_currency
from reelcore.logic.grid import GridProjector
from reelcore.logic.models import (
    GameState,
    Payline,
    ReelState,
    SpinResult,
    SpinStart,
    WinTier,
)
from reelcore.logic.paylines import generate_paylines
from reelcore.logic.probability import ProbabilityModel
from reelcore.logic.rng import DefaultRNG, RNGBase
from reelcore.logic.strips import ReelStripGenerator
from reelcore.telemetry import (
    FreeSpinsAwardedEvent,
    ReelStoppedEvent,
    SpinCompleteEvent,
    SpinRejectedEvent,
    TelemetryService,
)
from reelcore.validators import (
    validate_amount,
    validate_grid,
    validate_min_win_length,
    validate_rarity_percent,
    validate_spin_speed,
    validate_theme,
    validate_win_rate,
)


logger = logging.getLogger(__name__)

# Tolerance for float drift when stepping the bet in increments
BET_EPSILON = 1e-9


def classify_win(total_win: float, total_bet: float, config: Settings = default_settings) -> WinTier:
    """Win tier from the absolute win and its ratio to the total stake."""
    if total_win <= 0:
        return WinTier.NONE
    ratio = total_win / total_bet if total_bet > 0 else 0.0
    if total_win >= config.mega_win_min_amount and ratio >= config.mega_win_min_ratio:
        return WinTier.MEGA
    if total_win >= config.big_win_min_amount and ratio >= config.big_win_min_ratio:
        return WinTier.BIG
    return WinTier.SMALL


class SlotMachine:
    """
    One player's slot machine session.

    Implements:
    - Spin requests with balance checks and free-spin consumption
    - Clock-driven reel animation via ``tick(now_ms)``
    - Grid projection and win settlement once every reel has stopped
    - Free-spin sessions with automatic follow-up spins
    - Player controls, all refused while a spin is in progress

    The caller owns the clock. Nothing here sleeps or schedules timers; a
    pending transition is a timestamp that the next ``tick`` compares
    against.
    """

    def __init__(
        self,
        rng: RNGBase | None = None,
        telemetry: TelemetryService | None = None,
        config: Settings = default_settings,
    ):
        self.config = config
        self.rng = rng or DefaultRNG()
        self.telemetry = telemetry or TelemetryService()

        validate_theme(config.default_theme)
        self._paylines = generate_paylines(config.reels, config.rows)
        self.state = GameState.from_settings(config, len(self._paylines))

        self.catalog = SymbolCatalog.from_theme(
            self.state.theme_id, self.state.wild_rarity, self.state.scatter_rarity
        )
        self.model = ProbabilityModel(
            self.catalog,
            win_rate=self.state.win_rate,
            wild_rarity=self.state.wild_rarity,
            scatter_rarity=self.state.scatter_rarity,
        )
        self.evaluator = WinEvaluator(
            self.catalog,
            scatter_threshold=config.scatter_threshold,
            base_free_spins=config.base_free_spins,
            scatter_pay_min_count=config.scatter_pay_min_count,
            currency_unit=config.currency_unit,
        )
        self.projector = GridProjector(self.model, self.rng)
        self.strip_generator = ReelStripGenerator(
            self.model,
            self.rng,
            config.reel_strip_length,
            min_length=config.min_reel_strip_length,
        )
        self.animation = ReelAnimationController(
            self.state.reels,
            self.strip_generator.strip_length,
            config.row_height(self.state.rows),
            config=config,
        )

        self.strips: list[tuple[str, ...]] = []
        self._grid: list[list[str]] = []
        self.now_ms = 0.0
        self.auto_spin_at_ms: float | None = None
        self.last_result: SpinResult | None = None
        self._spin_was_free = False
        self._spin_total_bet = 0.0

        self._initialize_reels()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def is_spinning(self) -> bool:
        return self.state.is_spinning

    @property
    def balance(self) -> float:
        return self.state.bet.balance

    @property
    def total_bet(self) -> float:
        return self.state.bet.total_bet

    @property
    def paylines(self) -> list[Payline]:
        return list(self._paylines)

    @property
    def active_paylines(self) -> list[Payline]:
        return self._paylines[: self.state.bet.active_payline_count]

    @property
    def grid(self) -> list[list[str]]:
        return [list(row) for row in self._grid]

    @property
    def probabilities(self) -> dict[str, float]:
        return self.model.probabilities

    @property
    def reel_states(self) -> list[ReelState]:
        return [reel.model_copy() for reel in self.animation.reels]

    @property
    def strip_length(self) -> int:
        return self.strip_generator.strip_length

    def visible_symbols(self, reel: int) -> list[str]:
        """
        Symbol ids a stopped reel shows, top to bottom.

        Read from the grid, so a substituted slot shows the same symbol that
        gets evaluated.
        """
        return [row[reel] for row in self._grid]

    def _settle_reel(self, reel: int) -> list[str]:
        """Fix the grid column of a reel that just stopped."""
        position = self.animation.reels[reel].position
        column = self.projector.visible_symbols(
            self.strips[reel], position, self.state.rows, reel
        )
        for row, symbol_id in enumerate(column):
            self._grid[row][reel] = symbol_id
        return column

    # ------------------------------------------------------------------
    # Spin lifecycle
    # ------------------------------------------------------------------

    def spin(self, now_ms: float | None = None) -> SpinStart:
        """
        Request a spin at clock time ``now_ms``.

        A free spin is consumed when a session has spins left; otherwise the
        total bet is deducted. Rejected requests change nothing.
        """
        if now_ms is not None:
            self.now_ms = now_ms

        bet = self.state.bet
        free_spins = self.state.free_spins

        if self.state.is_spinning:
            return self._reject(ErrorCode.ROUND_IN_PROGRESS, bet.total_bet)

        was_free_spin = free_spins.is_active and free_spins.remaining > 0
        if was_free_spin:
            free_spins.consume()
            charged = 0.0
        else:
            if bet.balance < bet.total_bet:
                return self._reject(ErrorCode.INSUFFICIENT_FUNDS, bet.total_bet)
            charged = bet.total_bet
            bet.balance = round_currency(bet.balance - charged)

        self.state.is_spinning = True
        self.auto_spin_at_ms = None
        self._spin_was_free = was_free_spin
        self._spin_total_bet = charged

        if self.state.randomize_reels:
            self._regenerate_strips()

        self.animation.start(self.now_ms, self.state.spin_speed, self.rng)
        logger.debug(
            "Spin started at %.1fms (free=%s, charged=%.2f, balance=%.2f)",
            self.now_ms,
            was_free_spin,
            charged,
            bet.balance,
        )
        return SpinStart(
            accepted=True,
            total_bet=charged,
            was_free_spin=was_free_spin,
            free_spin_index=free_spins.current_index if was_free_spin else 0,
        )

    def tick(self, now_ms: float) -> SpinResult | None:
        """
        Advance the machine to clock time ``now_ms`` by one frame.

        Returns the SpinResult on the frame the last reel stops, else None.
        A pending free spin starts on the first tick at or after its time.
        """
        self.now_ms = now_ms

        if not self.state.is_spinning:
            if self.auto_spin_at_ms is not None and now_ms >= self.auto_spin_at_ms:
                self.auto_spin_at_ms = None
                self.spin(now_ms)
            return None

        for reel_index in self.animation.advance(now_ms):
            symbols = self._settle_reel(reel_index)
            scatter = self.catalog.scatter
            self.telemetry.emit_reel_stopped(ReelStoppedEvent(
                reel_index=reel_index,
                position=self.animation.reels[reel_index].position,
                scatter_visible=scatter is not None and scatter.id in symbols,
            ))

        if self.animation.all_stopped:
            return self._complete_spin()
        return None

    def run_until_complete(self, max_ticks: int | None = None) -> SpinResult | None:
        """
        Tick at ``frame_ms`` until the current spin completes.

        Returns None when no spin is in progress.

        Raises:
            RuntimeError: if the reels are still moving after ``max_ticks``.
        """
        if not self.state.is_spinning:
            return None
        max_ticks = max_ticks or self.config.max_ticks_per_spin
        for _ in range(max_ticks):
            result = self.tick(self.now_ms + self.config.frame_ms)
            if result is not None:
                return result
        raise RuntimeError(f"Spin did not complete within {max_ticks} ticks")

    def run_until_idle(self) -> list[SpinResult]:
        """
        Finish the current spin and every automatic free spin after it.

        The clock jumps straight to each scheduled free spin.
        """
        results: list[SpinResult] = []
        while self.state.is_spinning or self.auto_spin_at_ms is not None:
            if not self.state.is_spinning:
                self.tick(self.auto_spin_at_ms)
                continue
            result = self.run_until_complete()
            if result is not None:
                results.append(result)
        return results

    def _reject(self, reason: ErrorCode, total_bet: float) -> SpinStart:
        logger.debug("Spin rejected: %s", reason.value)
        self.telemetry.emit_spin_rejected(SpinRejectedEvent(
            reason=reason.value,
            balance=self.state.bet.balance,
            total_bet=total_bet,
        ))
        return SpinStart(accepted=False, reason=reason, total_bet=total_bet)

    def _complete_spin(self) -> SpinResult:
        bet = self.state.bet
        free_spins = self.state.free_spins
        positions = self.animation.positions

        # Every column was fixed as its reel stopped
        evaluation = self.evaluator.evaluate(
            self._grid,
            self._paylines,
            bet.active_payline_count,
            self.state.min_win_length,
            bet.bet_amount,
            free_spin_multiplier=free_spins.multiplier,
            is_in_free_spins=self._spin_was_free,
        )
        bet.balance = round_currency(bet.balance + evaluation.total_win)

        is_retrigger = False
        if evaluation.free_spins_awarded > 0:
            is_retrigger = free_spins.is_active
            free_spins.award(evaluation.free_spins_awarded)
            self.telemetry.emit_free_spins_awarded(FreeSpinsAwardedEvent(
                count=evaluation.free_spins_awarded,
                scatter_count=evaluation.scatter_count,
                is_retrigger=is_retrigger,
                remaining=free_spins.remaining,
                total_awarded=free_spins.total_awarded,
            ))

        self.state.is_spinning = False
        free_spins_total = free_spins.total_awarded
        if free_spins.is_active:
            if free_spins.remaining > 0:
                self.auto_spin_at_ms = self.now_ms + self.config.free_spin_autoplay_delay_ms
            else:
                logger.info(
                    "Free spins finished after %d spins", free_spins.current_index
                )
                free_spins.reset()

        result = SpinResult(
            total_win=evaluation.total_win,
            line_wins=evaluation.line_wins,
            winning_paylines=evaluation.winning_paylines,
            scatter_count=evaluation.scatter_count,
            scatter_payout=evaluation.scatter_payout,
            free_spins_awarded=evaluation.free_spins_awarded,
            wilds_used=evaluation.wilds_used,
            grid=self.grid,
            positions=positions,
            total_bet=self._spin_total_bet,
            was_free_spin=self._spin_was_free,
            is_retrigger=is_retrigger,
            free_spins_remaining=free_spins.remaining,
            free_spins_total=free_spins_total,
            balance=bet.balance,
            win_tier=classify_win(evaluation.total_win, bet.total_bet, self.config),
        )
        self.last_result = result

        self.telemetry.emit_spin_complete(SpinCompleteEvent(
            total_win=result.total_win,
            winning_lines=[payline.id for payline in result.winning_paylines],
            scatter_count=result.scatter_count,
            free_spins_awarded=result.free_spins_awarded,
            wilds_used=result.wilds_used,
            balance=result.balance,
            was_free_spin=result.was_free_spin,
            free_spins_remaining=result.free_spins_remaining,
            win_tier=result.win_tier.value,
            config_hash=get_config_hash(self.state, self.config),
            grid=result.grid,
        ))
        return result

    # ------------------------------------------------------------------
    # Reels, strips and catalog
    # ------------------------------------------------------------------

    def _initialize_reels(self) -> None:
        """Random stop positions, fresh strips, fresh grid."""
        length = self.strip_generator.strip_length
        positions = [self.rng.randint(0, length - 1) for _ in range(self.state.reels)]
        self.animation.resize(
            self.state.reels,
            length,
            positions,
            row_height=self.config.row_height(self.state.rows),
        )
        self._regenerate_strips()
        self._refresh_grid()

    def _regenerate_strips(self) -> None:
        self.strips = self.strip_generator.generate(
            self.state.reels, randomize=self.state.randomize_reels
        )

    def _refresh_grid(self) -> None:
        self._grid = self.projector.project(
            self.strips, self.animation.positions, self.state.rows
        )

    def _rebuild_catalog(self) -> None:
        """New catalog for the current theme and rarities, shared by every component."""
        self.catalog = SymbolCatalog.from_theme(
            self.state.theme_id, self.state.wild_rarity, self.state.scatter_rarity
        )
        self.evaluator.catalog = self.catalog
        self.model.configure(
            catalog=self.catalog,
            wild_rarity=self.state.wild_rarity,
            scatter_rarity=self.state.scatter_rarity,
        )

    # ------------------------------------------------------------------
    # Player controls (refused while spinning)
    # ------------------------------------------------------------------

    def change_bet(self, delta: int) -> bool:
        """Step the line bet by ``delta`` increments; out-of-range steps are ignored."""
        if self.state.is_spinning:
            return False
        bet = self.state.bet
        new_bet = bet.bet_amount + delta * bet.bet_increment
        if not bet.min_bet - BET_EPSILON <= new_bet <= bet.max_bet + BET_EPSILON:
            return False
        bet.bet_amount = round_currency(new_bet)
        return True

    def change_paylines(self, delta: int) -> bool:
        """Step the active payline count; out-of-range steps are ignored."""
        if self.state.is_spinning:
            return False
        new_count = self.state.bet.active_payline_count + delta
        if not 1 <= new_count <= len(self._paylines):
            return False
        self.state.bet.active_payline_count = new_count
        return True

    def change_win_rate(self, value: int) -> bool:
        if self.state.is_spinning:
            return False
        self.state.win_rate = validate_win_rate(value)
        self.model.configure(win_rate=self.state.win_rate)
        self._regenerate_strips()
        self._refresh_grid()
        return True

    def change_wild_rarity(self, percent: float) -> bool:
        """Wild rarity given in percent; stored as a fraction."""
        if self.state.is_spinning:
            return False
        self.state.wild_rarity = validate_rarity_percent("Wild rarity", percent)
        self._rebuild_catalog()
        self._regenerate_strips()
        self._refresh_grid()
        return True

    def change_scatter_rarity(self, percent: float) -> bool:
        """Scatter rarity given in percent; stored as a fraction."""
        if self.state.is_spinning:
            return False
        self.state.scatter_rarity = validate_rarity_percent("Scatter rarity", percent)
        self._rebuild_catalog()
        self._regenerate_strips()
        self._refresh_grid()
        return True

    def change_min_win_length(self, value: int) -> bool:
        if self.state.is_spinning:
            return False
        self.state.min_win_length = validate_min_win_length(value, self.state.reels)
        return True

    def change_spin_speed(self, value: int) -> bool:
        """Negative speeds spin the reels upward."""
        if self.state.is_spinning:
            return False
        self.state.spin_speed = validate_spin_speed(
            value, self.config.spin_speed_min, self.config.spin_speed_max
        )
        return True

    def set_theme(self, theme_id: str) -> bool:
        """Swap the symbol set; wild and scatter rarity carry over."""
        if self.state.is_spinning:
            return False
        self.state.theme_id = validate_theme(theme_id)
        self._rebuild_catalog()
        self._regenerate_strips()
        self._refresh_grid()
        return True

    def toggle_randomize_reels(self) -> bool:
        if self.state.is_spinning:
            return False
        self.state.randomize_reels = not self.state.randomize_reels
        self._regenerate_strips()
        self._refresh_grid()
        return True

    def reconfigure(self, reels: int, rows: int) -> bool:
        """Resize the grid. Every payline becomes active."""
        if self.state.is_spinning:
            return False
        reels, rows = validate_grid(
            reels, rows, self.config.max_reels, self.config.max_rows
        )
        self.state.reels = reels
        self.state.rows = rows
        self.state.min_win_length = min(self.state.min_win_length, reels)
        self._paylines = generate_paylines(reels, rows)
        self.state.bet.active_payline_count = len(self._paylines)
        self._initialize_reels()
        logger.info(
            "Grid reconfigured to %dx%d (%d paylines)", reels, rows, len(self._paylines)
        )
        return True

    def reset(self) -> bool:
        """Back to the starting wallet, bet and win rate; free spins cleared."""
        if self.state.is_spinning:
            return False
        bet = self.state.bet
        bet.balance = self.config.starting_balance
        bet.bet_amount = self.config.reset_bet_amount
        bet.active_payline_count = len(self._paylines)
        self.state.win_rate = self.config.reset_win_rate
        self.state.free_spins.reset()
        self.auto_spin_at_ms = None
        self.model.configure(win_rate=self.state.win_rate)
        self._regenerate_strips()
        self._refresh_grid()
        return True

    def add_balance(self, amount: float) -> bool:
        if self.state.is_spinning:
            return False
        amount = validate_amount(amount)
        self.state.bet.balance = round_currency(self.state.bet.balance + amount)
        return True
