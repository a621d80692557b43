"""Enemy spawn script and the clear/over judgement of a play session."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union

_PI = 3.14159265
_CHANGE_FRAMES = 90

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _leading_float(text: str) -> float:
    """Value of the longest numeric prefix of ``text``, or 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _leading_int(text: str) -> int:
    """Value of the leading integer of ``text``, or 0 if there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _fields(line: str) -> Iterator[str]:
    """Comma-separated fields; once they run out the last one repeats."""
    parts = line.split(",")
    yield from parts
    while True:
        yield parts[-1]


@dataclass(frozen=True)
class EnemySpawn:
    """One enemy to create: its depth, roll angle in radians, health and spin."""

    pos_z: float
    rotate_z: float
    hit_point: int
    rotate_speed: float


class EnemyPopScript:
    """Reads ``POP``, ``WAIT`` and ``RETRY`` commands a frame at a time.

    ``POP,z,angle_degrees,hit_point,rotate_speed`` spawns an enemy,
    ``WAIT,frames`` pauses the script, ``RETRY`` starts it over and lines
    starting with ``//`` are comments.
    """

    def __init__(self, text: str) -> None:
        lines = text.split("\n")
        if text.endswith("\n"):
            lines.pop()
        self._lines = lines
        self._cursor = 0
        self.waiting = False
        self.wait_time = 0

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> EnemyPopScript:
        """Load a script from a file."""
        return cls(Path(path).read_text(encoding="utf-8"))

    def update(self) -> list[EnemySpawn]:
        """Run the script for one frame and return the enemies it spawns."""
        if self.waiting:
            self.wait_time -= 1
            if self.wait_time <= 0:
                self.waiting = False
            return []

        spawns: list[EnemySpawn] = []
        while self._cursor < len(self._lines):
            line = self._lines[self._cursor]
            self._cursor += 1
            fields = _fields(line)
            word = next(fields)

            if word.startswith("//"):
                continue
            if word.startswith("POP"):
                pos_z = _leading_float(next(fields))
                rotate_z = _leading_float(next(fields))
                hit_point = int(_leading_float(next(fields)))
                rotate_speed = _leading_float(next(fields))
                rotate_z *= _PI
                if rotate_z != 0:
                    rotate_z /= 180
                spawns.append(EnemySpawn(pos_z, rotate_z, hit_point, rotate_speed))
            elif word.startswith("WAIT"):
                self.wait_time = _leading_int(next(fields))
                self.waiting = True
                break
            elif word.startswith("RETRY"):
                self._cursor = 0
                break
        return spawns


class GameJudge:
    """Decides when a session is cleared or lost, after a short delay."""

    def __init__(self, kill_count: int = 50) -> None:
        self.kill_count = kill_count
        self.is_changing = False
        self.change_to_clear = False
        self.change_to_over = False
        self.change_time = 0
        self.clear = False
        self.over = False

    def record_kill(self) -> bool:
        """Count one kill; False (and nothing counted) once a change is under way."""
        if self.is_changing:
            return False
        self.kill_count -= 1
        return True

    def update(self, player_hit_point: int) -> None:
        """Advance the judgement by one frame."""
        if not self.is_changing:
            if self.kill_count <= 0:
                self.change_to_clear = True
                self.is_changing = True
            elif player_hit_point <= 0:
                self.change_to_over = True
                self.is_changing = True
            return

        self.change_time += 1
        if self.change_time > _CHANGE_FRAMES:
            if self.change_to_clear:
                self.clear = True
            if self.change_to_over:
                self.over = True

    def restart(self) -> None:
        """Continue after a game over."""
        self.is_changing = False
        self.change_to_over = False
        self.over = False
        self.change_time = 0