"""Camera shake: jitters a position around its origin for a fixed number of steps."""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Optional, Protocol

from .vecmath import Vector3


class Positioned(Protocol):
    """Anything with a mutable ``translation`` vector."""

    translation: Vector3


class Shake:
    """Random shake that decays over a number of steps.

    Every ``time + 1`` updates the shake moves its position to the origin plus a
    random x/y offset whose range shrinks linearly with the steps left.  When
    the steps run out the position snaps back to the origin.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._target: Optional[Positioned] = None
        self._init_time = 2.0
        self._init_count = 25.0
        self._init_size = 60.0
        self._position = Vector3()
        self.reset()

    def reset(self) -> None:
        """Stop shaking and put the origin back at zero."""
        self._time = 0.0
        self._count = self._init_count
        self._size = self._init_size
        self._origin = Vector3()
        self._offset_position = replace(self._origin)
        self._shaking = False

    def update(self) -> None:
        """Advance the shake by one frame."""
        if not self._shaking:
            return
        if self._time > 0:
            self._time -= 1
            return
        self._time = self._init_time
        self._count -= 1
        if self._count <= 0:
            self._shaking = False
            if self._target is not None:
                self._target.translation = replace(self._origin)
            self._position = replace(self._origin)
            self._time = 0.0
            return

        self._size = self._init_size * (self._count / self._init_count)
        new_position = replace(self._origin)
        if self._size != 0:
            new_position.x += self.random_value(-self._size, self._size)
            new_position.y += self.random_value(-self._size, self._size)
        self._offset_position = new_position

        if self._target is not None:
            self._target.translation = replace(new_position)
        self._position = replace(new_position)

    def start(self) -> None:
        """Begin (or restart) a shake from full strength."""
        self._shaking = True
        self._time = 0.0
        self._offset_position = replace(self._origin)
        self._count = self._init_count
        self._size = self._init_size

    def value(self) -> Vector3:
        """The current shaken position."""
        return replace(self._position)

    def is_shaking(self) -> bool:
        """Whether a shake is in progress."""
        return self._shaking

    def attach(self, target: Positioned) -> None:
        """Shake ``target.translation``; its current value becomes the origin."""
        self._target = target
        self._origin = replace(target.translation)

    def set_origin(self, position: Vector3) -> None:
        """Set both the current position and the origin to ``position``."""
        self._position = replace(position)
        self._origin = replace(position)

    def random_value(self, low: float, high: float) -> float:
        """A random integer in ``[int(low), int(high)]`` scaled down by 100."""
        return self._rng.randint(int(low), int(high)) / 100

    def set_parameters(self, time: float, count: float, size: float) -> None:
        """Frames between steps, number of steps, and initial offset range."""
        self._init_time = time
        self._init_count = count
        self._init_size = size