"""Plain value types shared by the framework: timer state and small vectors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TimerData:
    """Frame timing state.

    ``start``, ``current`` and ``previous_frame`` are millisecond ticks;
    ``elapsed`` and ``delta`` are seconds.
    """

    start: int = 0
    current: int = 0
    previous_frame: int = 0
    elapsed: float = 0.0
    delta: float = 0.0

    def advance(self, now_millis: int) -> None:
        """Move the timer to ``now_millis`` and update ``delta`` and ``elapsed``."""
        self.current = now_millis
        self.delta = 0.001 * (self.current - self.previous_frame)
        self.previous_frame = self.current
        self.elapsed = 0.001 * (self.current - self.start)


@dataclass(slots=True)
class Vec2f:
    x: float = 0.0
    y: float = 0.0


@dataclass(slots=True)
class Vec2i:
    x: int = 0
    y: int = 0


@dataclass(slots=True)
class Vec3f:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(slots=True)
class Vec3i:
    x: int = 0
    y: int = 0
    z: int = 0


@dataclass(slots=True)
class Vec4f:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass(slots=True)
class Vec4i:
    x: int = 0
    y: int = 0
    z: int = 0
    w: int = 0