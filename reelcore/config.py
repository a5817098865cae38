"""Machine configuration: built-in defaults overridable from the environment."""
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Slot machine settings. Override any field with a REELCORE_* variable."""

    model_config = ConfigDict(env_prefix="REELCORE_")

    # Grid
    reels: int = 5
    rows: int = 3
    reel_strip_length: int = 32
    min_reel_strip_length: int = 32
    max_reels: int = 8
    max_rows: int = 6

    # Wallet and bet
    starting_balance: float = 100.00
    bet_amount: float = 0.02
    min_bet: float = 0.02
    max_bet: float = 5.00
    bet_increment: float = 0.02
    reset_bet_amount: float = 1.00
    currency_unit: float = 0.01

    # Outcome tuning
    win_rate: int = 50
    reset_win_rate: int = 50
    min_win_length: int = 3
    wild_rarity: float = 0.05
    scatter_rarity: float = 0.03
    default_theme: str = "classic"
    randomize_reels_on_spin: bool = False

    # Scatter / free spins
    scatter_pay_min_count: int = 2
    scatter_threshold: int = 3
    base_free_spins: int = 10
    free_spin_multiplier: float = 1.25
    free_spin_autoplay_delay_ms: float = 2500.0

    # Win tiers (total win and ratio to total bet)
    big_win_min_amount: float = 50.0
    big_win_min_ratio: float = 25.0
    mega_win_min_amount: float = 100.0
    mega_win_min_ratio: float = 50.0

    # Reel animation
    spin_speed: int = 16
    spin_speed_min: int = -40
    spin_speed_max: int = 40
    spin_speed_jitter: float = 5.0
    viewport_height: float = 400.0
    row_spacing: float = 2.0
    ease_start_base_ms: float = 1500.0
    ease_start_stagger_ms: float = 300.0
    ease_start_jitter_ms: float = 200.0
    easing_decay: float = 0.97
    easing_stop_threshold: float = 0.15
    settle_speed_factor: float = 0.06
    snap_threshold: float = 0.5
    frame_ms: float = 1000.0 / 60.0
    max_ticks_per_spin: int = 10000

    def row_height(self, rows: int) -> float:
        """Height of one symbol row in animation units for a grid of ``rows``."""
        return (self.viewport_height - (rows - 1) * self.row_spacing) / rows


settings = Settings()
