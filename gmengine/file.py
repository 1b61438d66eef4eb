"""A file path with an open handle for binary reads and writes."""

from __future__ import annotations

from typing import BinaryIO, Optional

from gmengine.debug import EngineError
from gmengine.paths import EnginePath, PathLike
from gmengine.serializer import Serializer


class EngineFile(EnginePath):
    """A file that is opened, read or written, then closed.

    Usable as a context manager that closes the file on exit.
    """

    def __init__(self, path: Optional[PathLike] = None) -> None:
        super().__init__(path)
        self._handle: Optional[BinaryIO] = None

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def __enter__(self) -> EngineFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def open(self, mode: str) -> EngineFile:
        """Open in ``mode`` (always binary); raises EngineError on failure."""
        self.close()
        if "b" not in mode:
            mode += "b"
        try:
            self._handle = open(self.path, mode)
        except OSError as exc:
            raise EngineError(f"{self.path}: failed to open file") from exc
        return self

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def _require_open(self, action: str) -> BinaryIO:
        if self._handle is None:
            raise EngineError(f"tried to {action} a file that is not open: {self.path}")
        return self._handle

    def write(self, data: bytes) -> None:
        """Write raw bytes; empty data raises EngineError."""
        if not data:
            raise EngineError("cannot write data of size 0")
        self._require_open("write to").write(bytes(data))

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; a size of 0 raises EngineError."""
        if size <= 0:
            raise EngineError(f"cannot read data of size {size}")
        return self._require_open("read from").read(size)

    def write_serializer(self, ser: Serializer) -> None:
        """Write everything written to ``ser`` so far."""
        self.write(ser.written())

    def read_serializer(self, ser: Serializer) -> None:
        """Fill ``ser``'s buffer with the file's contents."""
        size = self.file_size()
        ser.resize(size)
        chunk = self.read(size)
        ser.data[: len(chunk)] = chunk

    def file_size(self) -> int:
        """Size in bytes; raises EngineError for a directory."""
        if not self.is_file():
            raise EngineError(f"{self.path}: a directory has no file size")
        return self.path.stat().st_size

    def all_text(self) -> str:
        """The whole file read as UTF-8 text, up to the first NUL byte."""
        ser = Serializer()
        self.read_serializer(ser)
        raw = bytes(ser.data).split(b"\x00", 1)[0]
        return raw.decode("utf-8", errors="replace")