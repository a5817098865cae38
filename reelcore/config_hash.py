"""Config hash of the active machine configuration.

Shared by:
- scripts/audit_sim.py (CSV summary)
- SlotMachine (spin_complete event)

Both must hash the same snapshot, so the snapshot is built here only.
"""
import hashlib
import json

from reelcore.config import Settings, settings as default_settings
from reelcore.logic.models import GameState


def get_config_hash(state: GameState, config: Settings = default_settings) -> str:
    """
    Hash of every setting that changes outcomes.

    ``config`` is the Settings the machine was built with; its payout rules
    are hashed alongside the player-adjustable state.

    Returns 16-char hex hash of the config snapshot. Wallet balance and the
    spin guard are excluded; they change every spin without changing odds.
    """
    config_snapshot = {
        "theme_id": state.theme_id,
        "reels": state.reels,
        "rows": state.rows,
        "win_rate": state.win_rate,
        "wild_rarity": state.wild_rarity,
        "scatter_rarity": state.scatter_rarity,
        "min_win_length": state.min_win_length,
        "randomize_reels": state.randomize_reels,
        "active_paylines": state.bet.active_payline_count,
        "bet_amount": state.bet.bet_amount,
        "free_spin_multiplier": state.free_spins.multiplier,
        "reel_strip_length": max(config.reel_strip_length, config.min_reel_strip_length),
        "scatter_threshold": config.scatter_threshold,
        "base_free_spins": config.base_free_spins,
        "scatter_pay_min_count": config.scatter_pay_min_count,
        "currency_unit": config.currency_unit,
    }
    canonical = json.dumps(config_snapshot, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()[:16]
