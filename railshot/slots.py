"""Slot allocation for loaded textures."""

from __future__ import annotations

from pathlib import Path

_BITS_PER_WORD = 64


class RegistryFullError(RuntimeError):
    """Raised when every texture slot is in use."""


class SlotTable:
    """A fixed-size set of bits with a fast search for the first clear bit."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        word_count = 1 if size == 0 else (size - 1) // _BITS_PER_WORD + 1
        self._limit = word_count * _BITS_PER_WORD
        self._bits = 0

    def find_first(self) -> int:
        """Index of the first clear bit, or the word-rounded capacity if none."""
        lowest_clear = (self._bits + 1) & ~self._bits
        index = lowest_clear.bit_length() - 1
        return min(index, self._limit)

    def set(self, index: int, value: bool = True) -> None:
        """Set or clear the bit at ``index``."""
        self._check(index)
        if value:
            self._bits |= 1 << index
        else:
            self._bits &= ~(1 << index)

    def reset(self, index: int) -> None:
        """Clear the bit at ``index``."""
        self.set(index, False)

    def clear(self) -> None:
        """Clear every bit."""
        self._bits = 0

    def test(self, index: int) -> bool:
        """Whether the bit at ``index`` is set."""
        self._check(index)
        return bool(self._bits >> index & 1)

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"slot {index} out of range 0..{self.size - 1}")


class TextureRegistry:
    """Hands out a stable handle per texture file name."""

    def __init__(self, directory: str = "Resources/", capacity: int = 1024) -> None:
        self.directory = directory
        self.capacity = capacity
        self._names = [""] * capacity
        self._paths: list[Path | None] = [None] * capacity
        self._used = SlotTable(capacity)

    def load(self, file_name: str) -> int:
        """Return the handle for ``file_name``, registering it if new."""
        try:
            return self._names.index(file_name)
        except ValueError:
            pass

        handle = self._used.find_first()
        if handle >= self.capacity:
            raise RegistryFullError("no free texture slot")

        path = Path(self.full_path(file_name))
        if not path.is_file():
            raise FileNotFoundError(f"texture {file_name!r} not found at {path}")

        self._names[handle] = file_name
        self._paths[handle] = path
        self._used.set(handle)
        return handle

    def unload(self, handle: int) -> bool:
        """Release ``handle``; False when it is outside the registry."""
        if not 0 <= handle < self.capacity:
            return False
        if not self._names[handle]:
            raise ValueError(f"texture slot {handle} is not loaded")
        self._names[handle] = ""
        self._paths[handle] = None
        self._used.reset(handle)
        return True

    def full_path(self, file_name: str) -> str:
        """Names starting with ``./`` are used as is; others join the directory."""
        if len(file_name) > 2 and file_name.startswith("./"):
            return file_name
        return self.directory + file_name

    def reset_all(self) -> None:
        """Forget every loaded texture."""
        self._names = [""] * self.capacity
        self._paths = [None] * self.capacity
        self._used.clear()