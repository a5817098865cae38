"""Game notifications for presentation, audio and logging collaborators."""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol


logger = logging.getLogger(__name__)


class TelemetrySink(Protocol):
    """Protocol for notification sinks."""

    def emit(self, event_name: str, data: dict[str, Any]) -> None:
        """Emit a notification event."""
        ...


class LoggingTelemetrySink:
    """Default sink that logs events."""

    def emit(self, event_name: str, data: dict[str, Any]) -> None:
        """Log notification event."""
        logger.info("TELEMETRY %s: %s", event_name, data)


class CallbackSink:
    """
    Adapts plain callables to the sink protocol.

    Each callback receives the event payload dict. Events without a callback
    are ignored.
    """

    def __init__(
        self,
        on_reel_stopped: Callable[[dict[str, Any]], None] | None = None,
        on_spin_complete: Callable[[dict[str, Any]], None] | None = None,
        on_spin_rejected: Callable[[dict[str, Any]], None] | None = None,
        on_free_spins_awarded: Callable[[dict[str, Any]], None] | None = None,
    ):
        self._callbacks = {
            "reel_stopped": on_reel_stopped,
            "spin_complete": on_spin_complete,
            "spin_rejected": on_spin_rejected,
            "free_spins_awarded": on_free_spins_awarded,
        }

    def emit(self, event_name: str, data: dict[str, Any]) -> None:
        callback = self._callbacks.get(event_name)
        if callback is not None:
            callback(data)


@dataclass
class ReelStoppedEvent:
    """reel_stopped event: one reel reached its final position."""

    reel_index: int
    position: int
    scatter_visible: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for emission."""
        return {
            "reel_index": self.reel_index,
            "position": self.position,
            "scatter_visible": self.scatter_visible,
        }


@dataclass
class SpinCompleteEvent:
    """spin_complete event: every reel stopped and the grid was settled."""

    total_win: float
    winning_lines: list[str]
    scatter_count: int
    free_spins_awarded: int
    wilds_used: int
    balance: float
    was_free_spin: bool
    free_spins_remaining: int
    win_tier: str
    config_hash: str
    grid: list[list[str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for emission."""
        return {
            "total_win": self.total_win,
            "winning_lines": self.winning_lines,
            "scatter_count": self.scatter_count,
            "free_spins_awarded": self.free_spins_awarded,
            "wilds_used": self.wilds_used,
            "balance": self.balance,
            "was_free_spin": self.was_free_spin,
            "free_spins_remaining": self.free_spins_remaining,
            "win_tier": self.win_tier,
            "config_hash": self.config_hash,
            "grid": self.grid,
        }


@dataclass
class SpinRejectedEvent:
    """spin_rejected event: a spin request changed nothing."""

    reason: str  # "ROUND_IN_PROGRESS" | "INSUFFICIENT_FUNDS"
    balance: float
    total_bet: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for emission."""
        return {
            "reason": self.reason,
            "balance": self.balance,
            "total_bet": self.total_bet,
        }


@dataclass
class FreeSpinsAwardedEvent:
    """free_spins_awarded event: scatters started or extended a session."""

    count: int
    scatter_count: int
    is_retrigger: bool
    remaining: int
    total_awarded: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for emission."""
        return {
            "count": self.count,
            "scatter_count": self.scatter_count,
            "is_retrigger": self.is_retrigger,
            "remaining": self.remaining,
            "total_awarded": self.total_awarded,
        }


class TelemetryService:
    """Fans game events out to every registered sink."""

    def __init__(self, *sinks: TelemetrySink):
        self._sinks: list[TelemetrySink] = list(sinks) or [LoggingTelemetrySink()]
        self._sink_errors = 0  # Counter for sink failures

    @property
    def sink_errors(self) -> int:
        return self._sink_errors

    def set_sink(self, sink: TelemetrySink) -> None:
        """Replace all sinks with one (useful for testing)."""
        self._sinks = [sink]

    def add_sink(self, sink: TelemetrySink) -> None:
        self._sinks.append(sink)

    def _safe_emit(self, event_name: str, data: dict[str, Any]) -> None:
        """
        Emit event to every sink with exception safety.

        Sink failures MUST NOT break the game loop.
        """
        for sink in self._sinks:
            try:
                sink.emit(event_name, data)
            except Exception as e:
                self._sink_errors += 1
                logger.warning(
                    "Telemetry sink error (count=%d): %s - %s",
                    self._sink_errors,
                    event_name,
                    str(e),
                )

    def emit_reel_stopped(self, event: ReelStoppedEvent) -> None:
        self._safe_emit("reel_stopped", event.to_dict())

    def emit_spin_complete(self, event: SpinCompleteEvent) -> None:
        self._safe_emit("spin_complete", event.to_dict())

    def emit_spin_rejected(self, event: SpinRejectedEvent) -> None:
        self._safe_emit("spin_rejected", event.to_dict())

    def emit_free_spins_awarded(self, event: FreeSpinsAwardedEvent) -> None:
        self._safe_emit("free_spins_awarded", event.to_dict())
