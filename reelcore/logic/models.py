"""Game state models: catalog entries, reels, paylines, wallet and results."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from reelcore.config import Settings
from reelcore.errors import ErrorCode


class SymbolKind(str, Enum):
    """Symbol variant. Wild and scatter carry no line payout of their own."""
    REGULAR = "regular"
    WILD = "wild"
    SCATTER = "scatter"


class Symbol(BaseModel):
    """Immutable catalog entry. Strips and grids reference it by ``id``."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_token: str
    payout_value: float = 0.0
    base_probability: float = 0.0
    color: str = "#ffffff"
    kind: SymbolKind = SymbolKind.REGULAR

    @property
    def is_wild(self) -> bool:
        return self.kind == SymbolKind.WILD

    @property
    def is_scatter(self) -> bool:
        return self.kind == SymbolKind.SCATTER

    @property
    def is_regular(self) -> bool:
        return self.kind == SymbolKind.REGULAR


class ReelPhase(str, Enum):
    """Per-reel animation phase, always visited in this order."""
    SPINNING = "spinning"
    EASING = "easing"
    SETTLING = "settling"
    STOPPED = "stopped"


class ReelState(BaseModel):
    """
    Animation state of one reel.

    ``position`` is the strip index shown in row 0. ``offset`` is sub-row
    progress in animation units; it is 0 whenever the reel is stopped and may
    be negative only while settling.
    """
    position: int = 0
    offset: float = 0.0
    phase: ReelPhase = ReelPhase.STOPPED
    target_position: int = 0
    speed: float = 0.0
    easing_factor: float = 1.0
    settle_speed: float = 0.06
    ease_at_ms: float | None = None


class Payline(BaseModel):
    """An ordered set of (reel, row) cells evaluated together."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    kind: str
    positions: tuple[tuple[int, int], ...]
    color: str


class BetState(BaseModel):
    """Wallet and stake. Only changed by explicit player actions."""
    balance: float
    bet_amount: float
    min_bet: float
    max_bet: float
    bet_increment: float
    active_payline_count: int

    @property
    def total_bet(self) -> float:
        return round(self.bet_amount * self.active_payline_count, 2)


class FreeSpinSession(BaseModel):
    """
    Free-spin bonus session.

    Tracks:
    - remaining spins (decremented when a free spin starts)
    - total spins awarded in this session, including re-triggers
    - index of the current free spin (1-based once play starts)
    - payout multiplier applied to wins inside the session
    """
    is_active: bool = False
    remaining: int = 0
    total_awarded: int = 0
    current_index: int = 0
    multiplier: float = 1.25

    def award(self, count: int) -> None:
        """Enter the session or extend it on a re-trigger."""
        if not self.is_active:
            self.current_index = 0
            self.total_awarded = 0
        self.is_active = True
        self.remaining += count
        self.total_awarded += count

    def consume(self) -> None:
        """Start one free spin."""
        self.remaining -= 1
        self.current_index += 1

    def reset(self) -> None:
        """Destroy the session (multiplier is configuration, so it survives)."""
        self.is_active = False
        self.remaining = 0
        self.total_awarded = 0
        self.current_index = 0


class GameState(BaseModel):
    """Everything a player can change, plus the spin guard."""
    bet: BetState
    free_spins: FreeSpinSession = Field(default_factory=FreeSpinSession)
    win_rate: int = 50
    wild_rarity: float = 0.05
    scatter_rarity: float = 0.03
    min_win_length: int = 3
    theme_id: str = "classic"
    reels: int = 5
    rows: int = 3
    spin_speed: int = 16
    randomize_reels: bool = False
    is_spinning: bool = False

    @classmethod
    def from_settings(cls, settings: Settings, payline_count: int) -> "GameState":
        """Fresh session state from configuration defaults."""
        return cls(
            bet=BetState(
                balance=settings.starting_balance,
                bet_amount=settings.bet_amount,
                min_bet=settings.min_bet,
                max_bet=settings.max_bet,
                bet_increment=settings.bet_increment,
                active_payline_count=payline_count,
            ),
            free_spins=FreeSpinSession(multiplier=settings.free_spin_multiplier),
            win_rate=settings.win_rate,
            wild_rarity=settings.wild_rarity,
            scatter_rarity=settings.scatter_rarity,
            min_win_length=settings.min_win_length,
            theme_id=settings.default_theme,
            reels=settings.reels,
            rows=settings.rows,
            spin_speed=settings.spin_speed,
            randomize_reels=settings.randomize_reels_on_spin,
        )


class LineWin(BaseModel):
    """A winning payline: the run always starts at reel 0."""
    payline_index: int
    payline_id: str
    symbol_id: str
    count: int
    wilds_used: int
    payout: float
    positions: tuple[tuple[int, int], ...]


class Evaluation(BaseModel):
    """Pure result of evaluating one grid."""
    total_win: float = 0.0
    line_wins: list[LineWin] = Field(default_factory=list)
    winning_paylines: list[Payline] = Field(default_factory=list)
    scatter_count: int = 0
    scatter_payout: float = 0.0
    free_spins_awarded: int = 0
    wilds_used: int = 0


class WinTier(str, Enum):
    """Win tier used for messaging."""
    NONE = "none"
    SMALL = "small"
    BIG = "big"
    MEGA = "mega"


class SpinStart(BaseModel):
    """Answer to a spin request. Rejected spins change nothing."""
    accepted: bool
    reason: ErrorCode | None = None
    total_bet: float = 0.0
    was_free_spin: bool = False
    free_spin_index: int = 0


class SpinResult(Evaluation):
    """Completed spin: evaluation plus the session state it produced."""
    grid: list[list[str]] = Field(default_factory=list)
    positions: list[int] = Field(default_factory=list)
    total_bet: float = 0.0
    was_free_spin: bool = False
    is_retrigger: bool = False
    free_spins_remaining: int = 0
    free_spins_total: int = 0
    balance: float = 0.0
    win_tier: WinTier = WinTier.NONE
