"""Reel strip generation tests."""
import pytest

from conftest import ScriptedRNG
from reelcore.logic.catalog import SymbolCatalog
from reelcore.logic.probability import ProbabilityModel
from reelcore.logic.rng import SeededRNG
from reelcore.logic.strips import ReelStripGenerator, match_chance


def make_generator(catalog: SymbolCatalog, win_rate: int = 50, rng=None, length: int = 32):
    model = ProbabilityModel(catalog, win_rate=win_rate, wild_rarity=0.05, scatter_rarity=0.03)
    return ReelStripGenerator(model, rng or SeededRNG(seed=99), strip_length=length)


class TestMatchChance:
    """Chance of copying the left neighbour."""

    def test_extremes(self):
        """Match chance at the win-rate extremes."""
        assert match_chance(0.0) == 0.0001
        assert match_chance(0.005) == 0.0001
        assert match_chance(0.995) == 0.9999
        assert match_chance(1.0) == 0.9999

    def test_curve(self):
        """Match chance follows the quadratic curve."""
        assert match_chance(0.5) == pytest.approx(0.25 * 0.8 + 0.05)
        assert match_chance(0.02) == pytest.approx(0.0004 * 0.8 + 0.002)

    def test_lower_clamp(self):
        """Match chance never drops below the clamp."""
        assert match_chance(0.006) == 0.001


class TestStripShape:
    """Strip count, length and contents."""

    def test_short_configured_length_is_extended(self, classic_catalog: SymbolCatalog):
        """Short strips are extended to the minimum."""
        generator = make_generator(classic_catalog, length=10)
        assert generator.strip_length == 32

    def test_longer_length_is_kept(self, classic_catalog: SymbolCatalog):
        """Longer strips keep their length."""
        generator = make_generator(classic_catalog, length=40)
        strips = generator.generate(5)
        assert [len(s) for s in strips] == [40] * 5

    def test_every_id_is_in_catalog(self, classic_catalog: SymbolCatalog):
        """Strips hold only catalog ids."""
        strips = make_generator(classic_catalog).generate(6)
        assert len(strips) == 6
        for strip in strips:
            assert all(symbol_id in classic_catalog for symbol_id in strip)

    def test_same_seed_same_strips(self, classic_catalog: SymbolCatalog):
        """Same seed, same strips."""
        first = make_generator(classic_catalog, rng=SeededRNG(seed=5)).generate(5)
        second = make_generator(classic_catalog, rng=SeededRNG(seed=5)).generate(5)
        assert first == second


class TestHorizontalInfluence:
    """Later reels lean on their left neighbour in physical mode."""

    def test_max_win_rate_copies_or_upgrades(self, classic_catalog: SymbolCatalog):
        """At win rate 100 reels copy or go wild."""
        strips = make_generator(classic_catalog, win_rate=100).generate(5)
        checked = 0
        followed = 0
        for reel in range(1, 5):
            for i, prev_id in enumerate(strips[reel - 1]):
                if not classic_catalog.get(prev_id).is_regular:
                    continue
                checked += 1
                if strips[reel][i] in (prev_id, "wild"):
                    followed += 1
        assert checked > 0
        assert followed / checked > 0.99

    def test_randomize_mode_is_independent(self, classic_catalog: SymbolCatalog):
        """Randomize mode ignores the left neighbour."""
        strips = make_generator(classic_catalog, win_rate=100).generate(5, randomize=True)
        same = sum(
            1
            for reel in range(1, 5)
            for i in range(32)
            if strips[reel][i] == strips[reel - 1][i]
        )
        assert same / (4 * 32) < 0.6

    def test_match_copies_previous_symbol(self, classic_catalog: SymbolCatalog):
        """A match without upgrade copies the neighbour."""
        # 0.1 < match chance 0.25, 0.99 misses the wild upgrade
        generator = make_generator(classic_catalog, rng=ScriptedRNG([0.1, 0.99]))
        assert generator._influenced_symbol("bell") == "bell"

    def test_match_can_upgrade_to_wild(self, classic_catalog: SymbolCatalog):
        """A match can upgrade to wild."""
        generator = make_generator(classic_catalog, rng=ScriptedRNG([0.1, 0.0]))
        assert generator._influenced_symbol("bell") == "wild"

    def test_forced_wild_at_max_win_rate(self, classic_catalog: SymbolCatalog):
        """At the top band a match can be forced wild."""
        generator = make_generator(classic_catalog, win_rate=100, rng=ScriptedRNG([0.0, 0.0]))
        assert generator._influenced_symbol("lemon") == "wild"

    def test_special_neighbour_falls_back_to_independent_draw(self, classic_catalog: SymbolCatalog):
        """Special neighbours are never copied."""
        generator = make_generator(classic_catalog, rng=ScriptedRNG([0.0]))
        assert generator._influenced_symbol("wild") == "cherry"
        assert generator._influenced_symbol("scatter") == "cherry"

    def test_zero_win_rate_never_matches(self, classic_catalog: SymbolCatalog):
        """Win rate 0 draws once, independently."""
        rng = ScriptedRNG([0.0])
        generator = make_generator(classic_catalog, win_rate=0, rng=rng)
        # Only the independent draw consumes a random value
        assert generator._influenced_symbol("star") == "cherry"
        assert rng.calls == 1
