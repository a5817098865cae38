"""Validators for player-supplied settings."""
from reelcore.config import settings
from reelcore.errors import ErrorCode, GameError
from reelcore.logic.themes import THEMES


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise GameError(ErrorCode.INVALID_SETTING, f"{name} must be a number, got {value!r}.")
    if isinstance(value, float) and not value.is_integer():
        raise GameError(ErrorCode.INVALID_SETTING, f"{name} must be a whole number, got {value}.")
    return int(value)


def _require_number(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise GameError(ErrorCode.INVALID_SETTING, f"{name} must be a number, got {value!r}.")
    if value != value:  # NaN
        raise GameError(ErrorCode.INVALID_SETTING, f"{name} must not be NaN.")
    return float(value)


def _require_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise GameError(
            ErrorCode.INVALID_SETTING,
            f"{name} {value} out of range. Allowed: {low}..{high}",
        )


def validate_win_rate(value: object) -> int:
    """Win rate in percent, 0..100."""
    win_rate = _require_int("Win rate", value)
    _require_range("Win rate", win_rate, 0, 100)
    return win_rate


def validate_rarity_percent(name: str, value: object) -> float:
    """
    Rarity given in percent (0..100).

    Returns the stored fraction (0.0..1.0).
    """
    percent = _require_number(name, value)
    _require_range(name, percent, 0, 100)
    return percent / 100.0


def validate_min_win_length(value: object, reels: int) -> int:
    """Shortest paying run: at least 2, at most the reel count."""
    length = _require_int("Min win length", value)
    _require_range("Min win length", length, 2, max(2, reels))
    return length


def validate_grid(
    reels: object,
    rows: object,
    max_reels: int = settings.max_reels,
    max_rows: int = settings.max_rows,
) -> tuple[int, int]:
    reel_count = _require_int("Reels", reels)
    row_count = _require_int("Rows", rows)
    _require_range("Reels", reel_count, 3, max_reels)
    _require_range("Rows", row_count, 1, max_rows)
    return reel_count, row_count


def validate_spin_speed(
    value: object,
    low: int = settings.spin_speed_min,
    high: int = settings.spin_speed_max,
) -> int:
    """Spin speed; negative values spin the reels upward."""
    speed = _require_int("Spin speed", value)
    _require_range("Spin speed", speed, low, high)
    return speed


def validate_theme(theme_id: str) -> str:
    if theme_id not in THEMES:
        raise GameError(
            ErrorCode.UNKNOWN_THEME,
            f"Unknown theme {theme_id!r}. Available: {sorted(THEMES)}",
        )
    return theme_id


def validate_amount(value: object) -> float:
    """Positive currency amount for wallet top-ups."""
    amount = _require_number("Amount", value)
    if amount <= 0:
        raise GameError(ErrorCode.INVALID_SETTING, f"Amount must be positive, got {amount}.")
    return amount
