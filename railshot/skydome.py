"""Two sky segments that scroll toward the camera and wrap around."""

from __future__ import annotations

from dataclasses import replace

from .vecmath import Vector3

_START_Z = -10.0
_SECOND_START_Z = 990.0
_WRAP_AT_Z = -1010.0
_RESPAWN_Z = 990.0


class SkyDome:
    """Scrolls two copies of the sky so one is always ahead of the other."""

    def __init__(self, move_speed: float = 0.5) -> None:
        self.move_speed = move_speed
        self._first = Vector3(0.0, 0.0, _START_Z)
        self._second = Vector3(0.0, 0.0, _SECOND_START_Z)

    def update(self) -> None:
        """Move both segments and wrap any that passed behind the camera."""
        for segment in (self._first, self._second):
            segment.z -= self.move_speed
            if segment.z <= _WRAP_AT_Z:
                segment.z = _RESPAWN_Z

    def positions(self) -> tuple[Vector3, Vector3]:
        """Current positions of the two segments."""
        return replace(self._first), replace(self._second)