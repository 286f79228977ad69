"""Keyframe animations and timed scenes driven by a shared timer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional

from .easing import linear_interpolation
from .types import TimerData, Vec4f


class ScheduleState(Enum):
    INITIALIZED = auto()
    RUNNING = auto()
    COMPLETED = auto()


@dataclass(eq=False)
class Keyframe:
    """Interpolates ``value`` from ``from_value`` to ``to_value`` over a time span.

    Times are in seconds relative to the start of the owning animation.
    """

    time_start: float
    time_end: float
    from_value: Vec4f
    to_value: Vec4f
    value: Vec4f
    easing: Callable[[float], float] = linear_interpolation

    def _apply(self, elapsed: float, offset: float) -> None:
        start = self.time_start + offset
        end = self.time_end + offset
        src, dst, out = self.from_value, self.to_value, self.value

        if elapsed >= end:
            out.x, out.y, out.z, out.w = dst.x, dst.y, dst.z, dst.w
            return

        if start <= elapsed < end:
            t = self.easing((elapsed - start) / (end - start))
            out.x = src.x + t * (dst.x - src.x)
            out.y = src.y + t * (dst.y - src.y)
            out.z = src.z + t * (dst.z - src.z)
            out.w = src.w + t * (dst.w - src.w)


AnimationProc = Callable[["Animation", TimerData], None]


@dataclass(eq=False)
class Animation:
    """A group of keyframes that run together once started."""

    keyframes: list[Keyframe] = field(default_factory=list)
    is_autostart: bool = False
    started_proc: Optional[AnimationProc] = None
    completed_proc: Optional[AnimationProc] = None
    state: ScheduleState = ScheduleState.INITIALIZED
    time_started_at: float = 0.0

    def start(self, time: TimerData) -> None:
        """Start running at the current elapsed time."""
        if self.started_proc:
            self.started_proc(self, time)
        self.state = ScheduleState.RUNNING
        self.time_started_at = time.elapsed

    def reset(self) -> None:
        self.state = ScheduleState.INITIALIZED
        self.time_started_at = 0.0

    def _process(self, time: TimerData) -> None:
        if self.is_autostart and self.state is ScheduleState.INITIALIZED:
            self.start(time)
        if self.state is not ScheduleState.RUNNING:
            return
        for keyframe in self.keyframes:
            keyframe._apply(time.elapsed, self.time_started_at)

    def _is_completed(self, time: TimerData) -> bool:
        last_end = max((k.time_end for k in self.keyframes), default=0.0)
        last_end = max(last_end, 0.0)
        return time.elapsed >= last_end + self.time_started_at

    def _handle_completed(self, time: TimerData) -> None:
        if self.state is ScheduleState.RUNNING and self._is_completed(time):
            # One last pass so every keyframe lands on its target value.
            self._process(time)
            self.state = ScheduleState.COMPLETED
            if self.completed_proc:
                self.completed_proc(self, time)


@dataclass(eq=False)
class AnimationSchedule:
    animations: list[Animation] = field(default_factory=list)

    def process(self, time: TimerData) -> None:
        """Complete finished animations, then advance all running ones."""
        for animation in self.animations:
            animation._handle_completed(time)
        for animation in self.animations:
            animation._process(time)

    def reset(self) -> None:
        for animation in self.animations:
            animation.reset()


SceneProc = Callable[["Scene", TimerData], None]


@dataclass(eq=False)
class Scene:
    """A section of the show that executes every frame for ``duration`` seconds."""

    duration: float = 0.0
    is_autostart: bool = False
    init_proc: Optional[Callable[[], None]] = None
    execute_proc: Optional[Callable[[TimerData], None]] = None
    completed_proc: Optional[SceneProc] = None
    state: ScheduleState = ScheduleState.INITIALIZED
    time_started_at: float = 0.0

    def start(self, time: TimerData) -> None:
        if self.init_proc:
            self.init_proc()
        self.state = ScheduleState.RUNNING
        self.time_started_at = time.elapsed

    def stop(self, time: TimerData, trigger_completed: bool = True) -> None:
        self.state = ScheduleState.COMPLETED
        if trigger_completed and self.completed_proc:
            self.completed_proc(self, time)

    def _process(self, time: TimerData) -> None:
        if self.is_autostart and self.state is ScheduleState.INITIALIZED:
            self.start(time)
        if self.state is not ScheduleState.RUNNING:
            return
        if self.execute_proc:
            self.execute_proc(time)

    def _handle_completed(self, time: TimerData) -> None:
        if (self.state is ScheduleState.RUNNING
                and time.elapsed > self.time_started_at + self.duration):
            self.stop(time, True)


@dataclass(eq=False)
class SceneSchedule:
    scenes: list[Scene] = field(default_factory=list)

    def process(self, time: TimerData) -> None:
        """Stop expired scenes, then execute all running ones."""
        for scene in self.scenes:
            scene._handle_completed(time)
        for scene in self.scenes:
            scene._process(time)