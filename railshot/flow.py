"""Screen flow: title, play, clear and game over, with fades between them."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from typing import Protocol

_RESTART_HIT_POINT = 3


class Scene(Protocol):
    """What the flow needs from a play session."""

    def update(self) -> None: ...

    def is_clear(self) -> bool: ...

    def is_over(self) -> bool: ...

    def set_hit_point(self, value: int) -> None: ...


class Screen(enum.Enum):
    """The screens the game moves between."""

    TITLE = "title"
    GAME = "game"
    CLEAR = "clear"
    OVER = "over"


class GameFlow:
    """Drives the screens frame by frame; ``fade`` counts up to black and back."""

    def __init__(self, scene_factory: Callable[[], Scene], max_fade: float = 30) -> None:
        self._scene_factory = scene_factory
        self.max_fade = max_fade
        self.fade = max_fade
        self.screen = Screen.TITLE
        self.scene = scene_factory()
        self._change = False
        self._restart = False

    def update(self, pressed: Iterable[str] = ()) -> None:
        """Advance one frame given the names of keys pressed this frame."""
        keys = {key.upper() for key in pressed}
        if self.screen is Screen.TITLE:
            self._update_title(keys)
        elif self.screen is Screen.GAME:
            self._update_game()
        elif self.screen is Screen.CLEAR:
            self._update_clear(keys)
        elif self.screen is Screen.OVER:
            self._update_over(keys)

    def fade_alpha(self) -> float:
        """Opacity of the fade overlay, 0 (clear) to 1 (black)."""
        return self.fade / self.max_fade

    def _fade_in(self) -> bool:
        """Lighten one step; returns False (nothing done) when already clear."""
        if self.fade > 0:
            self.fade -= 1
            return True
        return False

    def _fade_out(self) -> bool:
        """Darken one step; True once fully dark."""
        if self.fade < self.max_fade:
            self.fade += 1
            return False
        self.fade = self.max_fade
        return True

    def _update_title(self, keys: set[str]) -> None:
        if not self._change:
            self._fade_in()
        elif self._fade_out():
            self.screen = Screen.GAME
            self.scene = self._scene_factory()
            self._change = False
        if "SPACE" in keys:
            self._change = True

    def _update_game(self) -> None:
        if not self._change and self._fade_in():
            self._restart = False
        self.scene.update()
        if self.scene.is_clear():
            self._finish_game(Screen.CLEAR)
        elif self.scene.is_over():
            self._finish_game(Screen.OVER)

    def _finish_game(self, target: Screen) -> None:
        self._change = True
        if self._fade_out():
            self._change = False
            self.screen = target

    def _update_clear(self, keys: set[str]) -> None:
        if not self._change:
            self._fade_in()
        elif self._fade_out():
            self._change = False
            self.screen = Screen.TITLE
        if "SPACE" in keys:
            self._change = True

    def _update_over(self, keys: set[str]) -> None:
        if not self._change:
            self._fade_in()
        elif self._fade_out():
            self._change = False
            if self._restart:
                self.screen = Screen.GAME
                self.scene.set_hit_point(_RESTART_HIT_POINT)
            else:
                self.screen = Screen.TITLE
        if "SPACE" in keys:
            self._restart = False
            self._change = True
        elif "R" in keys:
            self._restart = True
            self._change = True