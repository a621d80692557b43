"""The player's camera: rolls with A/D and can shake."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import Optional

from .shake import Shake
from .vecmath import Matrix4x4, Vector3, inverse, make_affine


class RailCamera:
    """Camera that rolls on A/D unless a scene change is under way."""

    def __init__(
        self,
        position: Vector3,
        rotation: Vector3,
        is_changing: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.translation = replace(position)
        self.rotation = replace(rotation)
        self.scale = Vector3(1.0, 1.0, 1.0)
        self.velocity = Vector3()
        self.spin = Vector3()
        self.rotate_speed = 0.05
        self.far_z = 1000.0
        self._is_changing = is_changing if is_changing is not None else (lambda: False)
        self.shake = Shake()
        self.shake.attach(self)
        self._refresh()

    def update(self, keys: Iterable[str] = ()) -> None:
        """Advance one frame given the names of the keys held down."""
        held = {key.upper() for key in keys}
        self.translation = self.translation + self.velocity
        self.rotation = self.rotation + self.spin

        if not self._is_changing():
            if "A" in held:
                self.rotation.z -= self.rotate_speed
            if "D" in held:
                self.rotation.z += self.rotate_speed

        self.shake.update()
        self._refresh()

    def shake_start(self) -> None:
        """Start a camera shake."""
        self.shake.start()

    def world_matrix(self) -> Matrix4x4:
        """The camera's world transform."""
        return self._world

    def view_matrix(self) -> Matrix4x4:
        """The view matrix, the inverse of the world transform."""
        return self._view

    def _refresh(self) -> None:
        self._world = make_affine(self.scale, self.rotation, self.translation)
        self._view = inverse(self._world)