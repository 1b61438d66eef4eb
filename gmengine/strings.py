"""String helpers: ASCII upper-casing, delimited extraction and encoding conversion."""

from __future__ import annotations

import codecs
import locale
from typing import Optional

from gmengine.debug import EngineError

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of ``text``; other characters are kept."""
    return text.translate(_ASCII_UPPER)


def inter_string(text: str, start: str, end: str, offset: int = 0) -> tuple[str, int]:
    """Find the text between ``start`` and ``end`` at or after ``offset``.

    Returns the text found and the offset to continue searching from, which is
    one past the start of ``end``. When either marker is missing the result is
    an empty string and the offset is returned unchanged.
    """
    data_start = text.find(start, offset)
    if data_start == -1:
        return "", offset
    data_end = text.find(end, data_start)
    if data_end == -1:
        return "", offset

    content_start = data_start + len(start)
    if data_end < content_start:
        # The end marker overlaps the start marker: take the rest of the text.
        result = text[content_start:]
    else:
        result = text[content_start:data_end]
    return result, data_end + 1


def _check_encoding(encoding: Optional[str]) -> str:
    name = encoding or locale.getpreferredencoding(False)
    try:
        codecs.lookup(name)
    except LookupError as exc:
        raise EngineError(f"unknown text encoding: {name}") from exc
    return name


def ansi_to_unicode(data: bytes, encoding: Optional[str] = None) -> str:
    """Decode bytes in a local code page; the default is the locale's encoding.

    Invalid bytes are replaced. Empty input cannot be converted and raises
    EngineError.
    """
    name = _check_encoding(encoding)
    if not data:
        raise EngineError("text conversion failed: no data to convert")
    return bytes(data).decode(name, errors="replace")


def unicode_to_utf8(text: str) -> bytes:
    """Encode text as UTF-8; empty text raises EngineError."""
    if not text:
        raise EngineError("text conversion failed: no text to convert")
    return text.encode("utf-8", errors="replace")


def ansi_to_utf8(data: bytes, encoding: Optional[str] = None) -> bytes:
    """Convert bytes in a local code page to UTF-8 bytes."""
    return unicode_to_utf8(ansi_to_unicode(data, encoding))