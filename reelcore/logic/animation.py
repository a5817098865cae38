"""Per-reel spin animation driven by a simulation clock.

Every reel walks spinning -> easing -> settling -> stopped. The controller
never reads a wall clock: the caller passes ``now_ms`` to ``start`` and to each
``advance`` call, and each ``advance`` is one animation frame.
"""
import logging
import math

from reelcore.config import Settings, settings as default_settings
from reelcore.logic.models import ReelPhase, ReelState
from reelcore.logic.rng import RNGBase


logger = logging.getLogger(__name__)


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


class ReelAnimationController:
    """
    Owns the ReelState of every reel.

    Positions are strip indices of the symbol shown in row 0. Only stopped
    positions are meaningful to the grid; offsets are sub-row progress in
    animation units of ``row_height``.
    """

    def __init__(
        self,
        reel_count: int,
        strip_length: int,
        row_height: float,
        positions: list[int] | None = None,
        config: Settings = default_settings,
    ):
        self.config = config
        self.strip_length = strip_length
        self.row_height = row_height
        self.spin_speed = float(config.spin_speed)
        self.reels: list[ReelState] = []
        self.resize(reel_count, strip_length, positions)

    def resize(
        self,
        reel_count: int,
        strip_length: int,
        positions: list[int] | None = None,
        row_height: float | None = None,
    ) -> None:
        """Reset every reel to stopped at ``positions`` (0 when omitted)."""
        self.strip_length = strip_length
        if row_height is not None:
            self.row_height = row_height
        positions = positions or [0] * reel_count
        self.reels = [
            ReelState(
                position=positions[i] % strip_length,
                settle_speed=self.config.settle_speed_factor,
            )
            for i in range(reel_count)
        ]

    def start(self, now_ms: float, spin_speed: float, rng: RNGBase) -> None:
        """Put every reel into spinning with a staggered ease schedule."""
        self.spin_speed = spin_speed
        for i, reel in enumerate(self.reels):
            reel.phase = ReelPhase.SPINNING
            reel.easing_factor = 1.0
            reel.speed = spin_speed + rng.random() * self.config.spin_speed_jitter
            reel.settle_speed = self.config.settle_speed_factor
            reel.ease_at_ms = (
                now_ms
                + self.config.ease_start_base_ms
                + i * self.config.ease_start_stagger_ms
                + rng.random() * self.config.ease_start_jitter_ms
            )
        logger.debug(
            "Reels started at %.1fms (speed=%s, reels=%d)",
            now_ms,
            spin_speed,
            len(self.reels),
        )

    @property
    def all_stopped(self) -> bool:
        return all(reel.phase == ReelPhase.STOPPED for reel in self.reels)

    @property
    def positions(self) -> list[int]:
        return [reel.position for reel in self.reels]

    def advance(self, now_ms: float) -> list[int]:
        """
        Run one frame at clock time ``now_ms``.

        Returns:
            Indices of reels that reached ``stopped`` during this frame.
        """
        newly_stopped: list[int] = []
        for index, reel in enumerate(self.reels):
            if (
                reel.phase == ReelPhase.SPINNING
                and reel.ease_at_ms is not None
                and now_ms >= reel.ease_at_ms
            ):
                reel.phase = ReelPhase.EASING

            if reel.phase == ReelPhase.SPINNING:
                self._spin_step(reel)
            elif reel.phase == ReelPhase.EASING:
                self._ease_step(reel)
            elif reel.phase == ReelPhase.SETTLING:
                self._settle_step(reel)
                if reel.phase == ReelPhase.STOPPED:
                    newly_stopped.append(index)
        return newly_stopped

    def _direction(self, reel: ReelState) -> int:
        return _sign(reel.speed) or _sign(self.spin_speed) or 1

    def _step_position(self, reel: ReelState, direction: int) -> None:
        if direction > 0:
            reel.position = (reel.position + 1) % self.strip_length
        else:
            reel.position = (reel.position - 1) % self.strip_length

    def _spin_step(self, reel: ReelState) -> None:
        reel.offset += abs(reel.speed)
        direction = self._direction(reel)
        while reel.offset >= self.row_height:
            reel.offset -= self.row_height
            self._step_position(reel, direction)

    def _ease_step(self, reel: ReelState) -> None:
        reel.easing_factor *= self.config.easing_decay
        direction = self._direction(reel)

        if reel.easing_factor < self.config.easing_stop_threshold:
            self._begin_settling(reel, direction)
            return

        reel.offset += abs(reel.speed) * reel.easing_factor
        while reel.offset >= self.row_height:
            reel.offset -= self.row_height
            self._step_position(reel, direction)
        while reel.offset < 0:
            reel.offset += self.row_height
            self._step_position(reel, direction)

    def _begin_settling(self, reel: ReelState, direction: int) -> None:
        """Pick the nearest stop in the direction of travel and aim for it."""
        length = self.strip_length
        sub_row = reel.offset % self.row_height
        if direction > 0:
            continuous = reel.position + sub_row / self.row_height
        else:
            continuous = reel.position - sub_row / self.row_height
        continuous %= length

        if direction > 0:
            target = math.ceil(continuous)
        else:
            target = math.floor(continuous)
        target %= length

        settle_offset = (continuous - target) * self.row_height
        half_strip = length / 2 * self.row_height
        if settle_offset > half_strip:
            settle_offset -= length * self.row_height
        elif settle_offset < -half_strip:
            settle_offset += length * self.row_height

        reel.target_position = target
        reel.position = target
        reel.offset = settle_offset
        reel.phase = ReelPhase.SETTLING

    def _settle_step(self, reel: ReelState) -> None:
        if abs(reel.offset) < self.config.snap_threshold:
            reel.offset = 0.0
            reel.position = math.floor(reel.target_position)
            reel.phase = ReelPhase.STOPPED
            reel.ease_at_ms = None
        else:
            reel.offset *= 1 - reel.settle_speed
