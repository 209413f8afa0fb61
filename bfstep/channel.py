"""
IOChannel

Character buffer sitting between the interpreter and the outside world.
One channel feeds input to ',' and another collects the output of '.'.
"""

from typing import Optional


class IOChannel:
    def __init__(self, data: str = ""):
        self._buffer = data

    @property
    def buffer(self) -> str:
        return self._buffer

    def read(self, count: int = 1) -> str:
        """Remove up to `count` characters from the head of the buffer.

        Returns fewer characters (possibly none) when the buffer is shorter;
        callers check the length of the result.
        """
        count = max(count, 0)
        output = self._buffer[:count]
        self._buffer = self._buffer[count:]
        return output

    def write(self, data: Optional[str] = None) -> None:
        """Append `data` to the tail of the buffer. None is ignored."""
        if data is not None:
            self._buffer = self._buffer + data

    def clear(self) -> None:
        self._buffer = ""

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"IOChannel({self._buffer!r})"
