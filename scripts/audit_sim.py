#!/usr/bin/env python3
"""
Headless session simulation.

Plays seeded rounds through the full spin lifecycle (animation clock
included) and writes a one-row CSV summary. A round is one paid spin plus
every free spin it triggers.

Usage:
    python -m scripts.audit_sim --rounds 10000 --seed AUDIT_2025 --out out/audit_wr50.csv
    python -m scripts.audit_sim --rounds 10000 --seed AUDIT_2025 --win-rate 90 --theme gems --out out/audit_wr90.csv
    python -m scripts.audit_sim --rounds 5000 --seed AUDIT_2025 --randomize --out out/audit_random.csv
"""
import argparse
import csv
import hashlib
import subprocess
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from reelcore.config import Settings
from reelcore.config_hash import get_config_hash
from reelcore.logic.engine import SlotMachine
from reelcore.logic.models import WinTier
from reelcore.logic.rng import SeededRNG
from reelcore.logic.themes import THEMES
from reelcore.telemetry import CallbackSink, TelemetryService


# Wallet large enough that no simulated round is ever refused
SIMULATION_BALANCE = 1_000_000_000.0


@dataclass
class SimulationStats:
    """Statistics accumulated during simulation."""
    total_wagered: float = 0.0
    total_won: float = 0.0
    rounds: int = 0
    spins: int = 0
    free_spins_played: int = 0
    wins: int = 0
    bonus_entries: int = 0
    retriggers: int = 0
    scatter_pays: int = 0
    big_wins: int = 0
    mega_wins: int = 0
    wilds_used: int = 0
    win_x_values: list[float] = field(default_factory=list)
    max_win_x_observed: float = 0.0
    config_hash: str = ""


def get_git_commit() -> str:
    """Get current git commit hash (short)."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            cwd=Path(__file__).parent.parent,
            timeout=5,
        )
        if result.returncode == 0:
            return result.stdout.strip()
    except (subprocess.TimeoutExpired, FileNotFoundError):
        pass
    return "unknown"


def get_timestamp_iso() -> str:
    """Get ISO 8601 UTC timestamp."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def check_cached_result(output_path: str, config_hash: str, rounds: int, seed: str) -> bool:
    """
    Check if valid cached result exists.

    Returns True if cache is valid (same config_hash, rounds, seed).
    """
    path = Path(output_path)
    if not path.exists():
        return False

    try:
        with open(path, "r") as f:
            reader = csv.DictReader(f)
            row = next(reader, None)
            if row is None:
                return False
            if row.get("config_hash") != config_hash:
                return False
            if int(row.get("rounds", 0)) != rounds:
                return False
            if row.get("seed") != seed:
                return False
            return True
    except (OSError, csv.Error, ValueError):
        return False


def seed_to_int(seed_str: str) -> int:
    """Convert string seed to integer deterministically."""
    return int(hashlib.sha256(seed_str.encode()).hexdigest(), 16) % (2**31)


def build_machine(
    seed_str: str,
    win_rate: int = 50,
    theme: str = "classic",
    randomize: bool = False,
    bet_amount: float = 1.0,
) -> SlotMachine:
    """Seeded machine with a silent sink and an effectively bottomless wallet."""
    config = Settings(
        win_rate=win_rate,
        default_theme=theme,
        randomize_reels_on_spin=randomize,
        bet_amount=bet_amount,
        starting_balance=SIMULATION_BALANCE,
    )
    return SlotMachine(
        rng=SeededRNG(seed=seed_to_int(seed_str)),
        telemetry=TelemetryService(CallbackSink()),
        config=config,
    )


def run_simulation(
    rounds: int,
    seed_str: str,
    win_rate: int = 50,
    theme: str = "classic",
    randomize: bool = False,
    bet_amount: float = 1.0,
    verbose: bool = False,
) -> SimulationStats:
    """
    Run headless simulation.

    Args:
        rounds: Number of paid rounds to simulate
        seed_str: Seed string for reproducibility
        win_rate: Win-rate knob (0..100)
        theme: Theme id
        randomize: Rebuild strips before every spin
        bet_amount: Line bet
        verbose: Print progress

    Returns:
        SimulationStats with aggregated results
    """
    machine = build_machine(seed_str, win_rate, theme, randomize, bet_amount)
    stats = SimulationStats(config_hash=get_config_hash(machine.state, machine.config))
    progress_interval = max(1, rounds // 100)

    for round_count in range(rounds):
        if verbose and round_count % progress_interval == 0:
            pct = (round_count / rounds) * 100
            print(f"\rProgress: {pct:.1f}%", end="", flush=True)

        start = machine.spin(machine.now_ms)
        if not start.accepted:
            raise RuntimeError(f"Simulated spin rejected: {start.reason}")

        stake = machine.total_bet
        round_win = 0.0
        for result in machine.run_until_idle():
            stats.spins += 1
            stats.total_wagered += result.total_bet
            stats.total_won += result.total_win
            stats.wilds_used += result.wilds_used
            round_win += result.total_win
            if result.was_free_spin:
                stats.free_spins_played += 1
            if result.scatter_payout > 0:
                stats.scatter_pays += 1
            if result.free_spins_awarded > 0:
                if result.is_retrigger:
                    stats.retriggers += 1
                else:
                    stats.bonus_entries += 1
            if result.win_tier == WinTier.BIG:
                stats.big_wins += 1
            elif result.win_tier == WinTier.MEGA:
                stats.mega_wins += 1

        stats.rounds += 1
        if round_win > 0:
            stats.wins += 1
        win_x = round_win / stake if stake > 0 else 0.0
        stats.win_x_values.append(win_x)
        stats.max_win_x_observed = max(stats.max_win_x_observed, win_x)

    if verbose:
        print("\rProgress: 100.0%")

    return stats


def calculate_percentile(values: list[float], percentile: float) -> float:
    """Calculate percentile from sorted list."""
    if not values:
        return 0.0
    sorted_vals = sorted(values)
    idx = int(len(sorted_vals) * percentile / 100)
    idx = min(idx, len(sorted_vals) - 1)
    return sorted_vals[idx]


def build_row(
    rounds: int,
    seed_str: str,
    win_rate: int,
    theme: str,
    randomize: bool,
    stats: SimulationStats,
) -> dict[str, object]:
    """Summary row; column order is timestamp, git_commit, config_hash first."""
    rtp = (stats.total_won / stats.total_wagered * 100) if stats.total_wagered > 0 else 0
    hit_freq = (stats.wins / stats.rounds * 100) if stats.rounds > 0 else 0
    bonus_entry_rate = (stats.bonus_entries / stats.rounds * 100) if stats.rounds > 0 else 0
    avg_free_spins = (stats.free_spins_played / stats.bonus_entries) if stats.bonus_entries > 0 else 0

    return {
        "timestamp": get_timestamp_iso(),
        "git_commit": get_git_commit(),
        "config_hash": stats.config_hash,
        "rounds": rounds,
        "seed": seed_str,
        "win_rate": win_rate,
        "theme": theme,
        "randomize": randomize,
        "spins": stats.spins,
        "free_spins_played": stats.free_spins_played,
        "total_wagered": f"{stats.total_wagered:.2f}",
        "total_won": f"{stats.total_won:.2f}",
        "rtp": f"{rtp:.4f}",
        "hit_freq": f"{hit_freq:.4f}",
        "bonus_entry_rate": f"{bonus_entry_rate:.4f}",
        "retriggers": stats.retriggers,
        "avg_free_spins_per_bonus": f"{avg_free_spins:.2f}",
        "big_wins": stats.big_wins,
        "mega_wins": stats.mega_wins,
        "p95_win_x": f"{calculate_percentile(stats.win_x_values, 95):.2f}",
        "p99_win_x": f"{calculate_percentile(stats.win_x_values, 99):.2f}",
        "max_win_x": f"{stats.max_win_x_observed:.2f}",
    }


def generate_csv(row: dict[str, object], output_path: str) -> None:
    """Write the summary row with a header."""
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(row.keys()))
        writer.writeheader()
        writer.writerow(row)

    print(f"CSV written to: {output_path}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Headless slot machine simulation")
    parser.add_argument(
        "--rounds",
        type=int,
        required=True,
        help="Number of paid rounds to simulate",
    )
    parser.add_argument(
        "--seed",
        type=str,
        required=True,
        help="Seed string for reproducibility",
    )
    parser.add_argument(
        "--win-rate",
        type=int,
        default=50,
        help="Win-rate knob, 0..100 (default 50)",
    )
    parser.add_argument(
        "--theme",
        choices=sorted(THEMES),
        default="classic",
        help="Symbol theme",
    )
    parser.add_argument(
        "--bet",
        type=float,
        default=1.0,
        help="Line bet (default 1.00)",
    )
    parser.add_argument(
        "--randomize",
        action="store_true",
        help="Rebuild every strip before each spin",
    )
    parser.add_argument(
        "--out",
        type=str,
        required=True,
        help="Output CSV path",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show progress",
    )
    parser.add_argument(
        "--skip-if-cached",
        action="store_true",
        help="Skip simulation if valid cached result exists",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    if not 0 <= args.win_rate <= 100:
        print(f"--win-rate must be within 0..100, got {args.win_rate}")
        return 2

    machine = build_machine(args.seed, args.win_rate, args.theme, args.randomize, args.bet)
    config_hash = get_config_hash(machine.state, machine.config)
    print(
        f"Running simulation: rounds={args.rounds}, seed={args.seed}, "
        f"win_rate={args.win_rate}, theme={args.theme}, randomize={args.randomize}"
    )
    print(f"Config hash: {config_hash}")

    if args.skip_if_cached:
        if check_cached_result(args.out, config_hash, args.rounds, args.seed):
            print(f"Using cached result: {args.out}")
            print("(Skipping simulation - cache valid for config_hash, rounds, seed)")
            return 0

    stats = run_simulation(
        rounds=args.rounds,
        seed_str=args.seed,
        win_rate=args.win_rate,
        theme=args.theme,
        randomize=args.randomize,
        bet_amount=args.bet,
        verbose=args.verbose,
    )
    row = build_row(args.rounds, args.seed, args.win_rate, args.theme, args.randomize, stats)
    generate_csv(row, args.out)

    print("\nSummary:")
    print(f"  Rounds: {stats.rounds} ({stats.spins} spins, {stats.free_spins_played} free)")
    print(f"  Total wagered: {stats.total_wagered:.2f}")
    print(f"  Total won: {stats.total_won:.2f}")
    print(f"  RTP: {row['rtp']}%")
    print(f"  Hit frequency: {row['hit_freq']}%")
    print(f"  Bonus entries: {stats.bonus_entries} ({row['bonus_entry_rate']}%)")
    print(f"  Max win_x observed: {stats.max_win_x_observed:.2f}x")
    return 0


if __name__ == "__main__":
    sys.exit(main())
