"""Line-by-line reading of command files."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from matcalc.errors import FileError


class LineReader:
    """Reads a text file one line at a time, without line terminators."""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        try:
            self._file = open(path, encoding="utf-8", newline="")
        except OSError as exc:
            raise FileError(f"Failed to open file: {self.path}") from exc

    def readline(self) -> str | None:
        """Return the next line without its newline, or None at end of file."""
        line = self._file.readline()
        if not line:
            return None
        return line[:-1] if line.endswith("\n") else line

    def __iter__(self) -> Iterator[str]:
        while (line := self.readline()) is not None:
            yield line

    def close(self) -> None:
        """Close the underlying file."""
        self._file.close()

    @property
    def closed(self) -> bool:
        return self._file.closed

    def __enter__(self) -> LineReader:
        return self

    def __exit__(self, *args) -> None:
        self.close()