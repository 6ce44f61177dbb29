"""
Text encoding of array-typed property values.

When a property's getter returns a list or dict, the property text in the
form is an encoded array rather than a plain string.

Format version 1 is JSON (an array or an object). Older forms carry PHP
serialize() output instead; decode_array falls back to a strict reader for
the scalar/array subset of that format (objects are refused), retrying once
with repaired string lengths for text saved with the wrong byte counts.
"""

import json
import logging
import re
from typing import Any, Union

from pyqt_formstream.streaming.exceptions import ArrayDecodeError

logger = logging.getLogger(__name__)

ARRAY_FORMAT_VERSION = 1

ArrayValue = Union[list, dict]

_LEGACY_STRING = re.compile(r's:(\d+):"(.*?)";', re.DOTALL)

# Legacy arrays nested deeper than this are refused
MAX_ARRAY_DEPTH = 256


def encode_array(value: ArrayValue) -> str:
    """Encode a list or dict in the current (JSON) format."""
    if not isinstance(value, (list, dict)):
        raise TypeError(f"Only lists and dicts can be encoded, got {type(value).__name__}")
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def decode_array(text: str) -> ArrayValue:
    """
    Decode property text into a list or dict.

    Raises:
        ArrayDecodeError: If the text is neither JSON nor a legacy serialized array
    """
    stripped = text.strip()
    if stripped[:1] in ("[", "{"):
        try:
            value = json.loads(stripped)
        except (json.JSONDecodeError, RecursionError) as e:
            logger.debug(f"Array text is not JSON ({e}), trying legacy format")
        else:
            return value

    try:
        return _decode_legacy(stripped)
    except ValueError as first_error:
        repaired = _repair_string_lengths(stripped)
        if repaired == stripped:
            raise ArrayDecodeError(text, str(first_error)) from first_error
        try:
            return _decode_legacy(repaired)
        except ValueError as e:
            raise ArrayDecodeError(text, str(e)) from e


def _repair_string_lengths(text: str) -> str:
    """Rewrite s:<len>:"..."; prefixes with the real UTF-8 byte length."""
    def replace(match: re.Match) -> str:
        body = match.group(2)
        return f's:{len(body.encode("utf-8"))}:"{body}";'
    return _LEGACY_STRING.sub(replace, text)


def _decode_legacy(text: str) -> ArrayValue:
    value = _LegacyReader(text.encode("utf-8")).read()
    if not isinstance(value, (list, dict)):
        raise ValueError(f"expected an array, got {type(value).__name__}")
    return value


class _LegacyReader:
    """Reader for the N/b/i/d/s/a subset of PHP serialize() output."""

    def __init__(self, data: bytes):
        self._data = data
        self._pos = 0

    def read(self) -> Any:
        value = self._value()
        if self._pos != len(self._data):
            raise ValueError(f"trailing data at offset {self._pos}")
        return value

    def _value(self, depth: int = 0) -> Any:
        kind = self._take(1)
        if kind == b"N":
            self._expect(b";")
            return None
        self._expect(b":")
        if kind == b"b":
            raw = self._until(b";")
            if raw not in ("0", "1"):
                raise ValueError(f"invalid boolean {raw!r}")
            return raw == "1"
        if kind == b"i":
            return int(self._until(b";"))
        if kind == b"d":
            return float(self._until(b";"))
        if kind == b"s":
            length = int(self._until(b":"))
            self._expect(b'"')
            raw = self._take(length)
            self._expect(b'";')
            return raw.decode("utf-8")
        if kind == b"a":
            if depth >= MAX_ARRAY_DEPTH:
                raise ValueError(f"nesting too deep at offset {self._pos - 1}")
            count = int(self._until(b":"))
            self._expect(b"{")
            items = []
            for _ in range(count):
                key = self._value(depth + 1)
                if isinstance(key, bool) or not isinstance(key, (int, str)):
                    raise ValueError(f"invalid array key {key!r}")
                items.append((key, self._value(depth + 1)))
            self._expect(b"}")
            return _as_container(items)
        raise ValueError(f"unsupported value type {kind!r} at offset {self._pos - 1}")

    def _take(self, count: int) -> bytes:
        end = self._pos + count
        if count < 0 or end > len(self._data):
            raise ValueError(f"unexpected end of data at offset {self._pos}")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def _expect(self, token: bytes) -> None:
        if self._take(len(token)) != token:
            raise ValueError(f"expected {token!r} at offset {self._pos - len(token)}")

    def _until(self, delimiter: bytes) -> str:
        end = self._data.find(delimiter, self._pos)
        if end < 0:
            raise ValueError(f"missing {delimiter!r} after offset {self._pos}")
        raw = self._data[self._pos:end]
        self._pos = end + len(delimiter)
        return raw.decode("ascii")


def _as_container(items: list) -> ArrayValue:
    keys = [key for key, _ in items]
    if keys == list(range(len(items))):
        return [value for _, value in items]
    return dict(items)
