"""Pytest fixtures for reelcore tests."""
from typing import Any, Callable

import pytest

from reelcore.config import Settings
from reelcore.logic.catalog import SymbolCatalog
from reelcore.logic.engine import SlotMachine
from reelcore.logic.rng import RNGBase, SeededRNG
from reelcore.telemetry import TelemetryService


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (long headless simulations)"
    )


class ScriptedRNG(RNGBase):
    """RNG that replays a fixed list of floats, cycling when exhausted."""

    def __init__(self, values: list[float]):
        self._values = list(values)
        self._index = 0
        self.calls = 0

    def random(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        self.calls += 1
        return value

    def randint(self, a: int, b: int) -> int:
        return a + int(self.random() * (b - a + 1)) % (b - a + 1)


class RecordingTelemetrySink:
    """Sink that keeps every event for assertions."""

    def __init__(self):
        self.events: list[tuple[str, dict[str, Any]]] = []

    def emit(self, event_name: str, data: dict[str, Any]) -> None:
        self.events.append((event_name, data))

    def get_events(self, event_name: str) -> list[dict[str, Any]]:
        return [data for name, data in self.events if name == event_name]

    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def seeded_rng() -> SeededRNG:
    """Deterministic RNG shared by a single test."""
    return SeededRNG(seed=12345)


@pytest.fixture
def classic_catalog() -> SymbolCatalog:
    return SymbolCatalog.from_theme("classic", wild_rarity=0.05, scatter_rarity=0.03)


@pytest.fixture
def recording_sink() -> RecordingTelemetrySink:
    return RecordingTelemetrySink()


@pytest.fixture
def make_machine(recording_sink: RecordingTelemetrySink) -> Callable[..., SlotMachine]:
    """
    Factory for seeded machines wired to the recording sink.

    Keyword arguments other than ``seed`` override Settings fields.
    """

    def _make(seed: int = 7, **overrides: Any) -> SlotMachine:
        return SlotMachine(
            rng=SeededRNG(seed=seed),
            telemetry=TelemetryService(recording_sink),
            config=Settings(**overrides),
        )

    return _make


@pytest.fixture
def machine(make_machine: Callable[..., SlotMachine]) -> SlotMachine:
    """Default 5x3 classic machine with seed 7."""
    return make_machine()
