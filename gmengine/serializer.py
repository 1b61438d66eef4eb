"""A little-endian byte buffer that values are written to and read back from in order."""

from __future__ import annotations

import struct
from typing import Callable, Iterable, TypeVar

from gmengine.debug import EngineError
from gmengine.vector import IntPoint, Vector

T = TypeVar("T")

_VECTOR = struct.Struct("<4f")
_INT_POINT = struct.Struct("<2i")
_INT_SIZE = 4


class SerializableObject:
    """An object that can store itself in a Serializer and restore itself from one.

    The default methods store and restore nothing.
    """

    def serialize(self, ser: Serializer) -> None:
        """Write this object's state to ``ser``."""

    def deserialize(self, ser: Serializer) -> None:
        """Read this object's state back from ``ser``."""


class Serializer:
    """Sequential binary writer and reader over one growable buffer.

    Integers are 32-bit, vectors four 32-bit floats, strings and lists carry a
    32-bit count in front.
    """

    def __init__(self) -> None:
        self._data = bytearray()
        self._write_offset = 0
        self._read_offset = 0

    @property
    def data(self) -> bytearray:
        """The whole underlying buffer, which callers may fill directly."""
        return self._data

    @property
    def write_offset(self) -> int:
        return self._write_offset

    @property
    def read_offset(self) -> int:
        return self._read_offset

    def __len__(self) -> int:
        return len(self._data)

    # --- raw bytes ------------------------------------------------------

    def write(self, data: bytes) -> None:
        """Append raw bytes at the write position."""
        chunk = bytes(data)
        start = self._write_offset
        if len(self._data) < start:
            self._data.extend(bytes(start - len(self._data)))
        end = start + len(chunk)
        self._data[start:end] = chunk
        self._write_offset = end

    def read(self, size: int) -> bytes:
        """Take ``size`` bytes from the read position."""
        if size < 0:
            raise EngineError(f"cannot read a negative number of bytes: {size}")
        end = self._read_offset + size
        if end > len(self._data):
            raise EngineError(
                f"read of {size} bytes at offset {self._read_offset} runs past "
                f"the end of {len(self._data)} bytes of data"
            )
        chunk = bytes(self._data[self._read_offset:end])
        self._read_offset = end
        return chunk

    # --- typed values ---------------------------------------------------

    def write_int(self, value: int) -> None:
        self.write(int(value).to_bytes(_INT_SIZE, "little", signed=True))

    def read_int(self) -> int:
        return int.from_bytes(self.read(_INT_SIZE), "little", signed=True)

    def write_bool(self, value: bool) -> None:
        self.write(b"\x01" if value else b"\x00")

    def read_bool(self) -> bool:
        return self.read(1)[0] != 0

    def write_vector(self, value: Vector) -> None:
        self.write(_VECTOR.pack(value.x, value.y, value.z, value.w))

    def read_vector(self) -> Vector:
        return Vector(*_VECTOR.unpack(self.read(_VECTOR.size)))

    def write_int_point(self, value: IntPoint) -> None:
        self.write(_INT_POINT.pack(value.x, value.y))

    def read_int_point(self) -> IntPoint:
        return IntPoint(*_INT_POINT.unpack(self.read(_INT_POINT.size)))

    def write_str(self, value: str) -> None:
        """Write the UTF-8 byte length followed by the bytes."""
        encoded = value.encode("utf-8")
        self.write_int(len(encoded))
        if encoded:
            self.write(encoded)

    def read_str(self) -> str:
        size = self.read_int()
        if size < 0:
            raise EngineError(f"stored string length is negative: {size}")
        return self.read(size).decode("utf-8")

    def write_object(self, obj: SerializableObject) -> None:
        obj.serialize(self)

    def read_object(self, obj: SerializableObject) -> None:
        obj.deserialize(self)

    def write_list(self, items: Iterable[T], write_item: Callable[[T], None]) -> None:
        """Write the item count, then each item with ``write_item``."""
        values = list(items)
        self.write_int(len(values))
        for item in values:
            write_item(item)

    def read_list(self, read_item: Callable[[], T]) -> list[T]:
        """Read the item count, then that many items with ``read_item``."""
        count = self.read_int()
        if count < 0:
            raise EngineError(f"stored list length is negative: {count}")
        return [read_item() for _ in range(count)]

    # --- buffer ---------------------------------------------------------

    def resize(self, size: int) -> None:
        """Grow with zero bytes or shrink the buffer to ``size`` bytes."""
        if size < 0:
            raise EngineError(f"buffer size must not be negative: {size}")
        if size < len(self._data):
            del self._data[size:]
        else:
            self._data.extend(bytes(size - len(self._data)))

    def written(self) -> bytes:
        """The bytes written so far."""
        return bytes(self._data[: self._write_offset])