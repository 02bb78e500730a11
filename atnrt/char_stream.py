"""Character input helpers used by lexers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Union

REPLACEMENT_CHARACTER = "\ufffd"


class CharStream(ABC):
    """Input stream that can hand out pieces of its underlying data."""

    @abstractmethod
    def get_text(self, start: int, stop: int) -> Any:
        """Return the data between the two indexes, inclusive."""


def sequence_offset(data: Sequence[int], index: int, item_offset: int) -> Optional[int]:
    """Index ``item_offset`` items away from ``index``, or None if outside the data."""
    new_index = index + item_offset
    if new_index < 0 or new_index > len(data):
        return None
    return new_index


def sequence_item(data: Sequence[int], index: int) -> Optional[int]:
    """Code of the item at ``index``, or None if there is none."""
    if 0 <= index < len(data):
        return int(data[index])
    return None


def _is_char_boundary(data: bytes, index: int) -> bool:
    if index == 0 or index == len(data):
        return True
    if index < 0 or index > len(data):
        return False
    return not 0x80 <= data[index] <= 0xBF


def utf8_offset(data: bytes, index: int, item_offset: int) -> Optional[int]:
    """Byte index ``item_offset`` characters away from byte ``index`` in UTF-8 data."""
    if item_offset == 0:
        return index
    direction = 1 if item_offset > 0 else -1
    while item_offset != 0:
        index += direction
        if index < 0 or index > len(data):
            return None
        if _is_char_boundary(data, index):
            item_offset -= direction
    return index


def utf8_item(data: bytes, index: int) -> Optional[int]:
    """Code point starting at byte ``index`` in UTF-8 data, or None if none starts there."""
    if index < 0 or index >= len(data) or not _is_char_boundary(data, index):
        return None
    end = index + 1
    while end < len(data) and not _is_char_boundary(data, end):
        end += 1
    return ord(data[index:end].decode("utf-8"))


def _display_char(code: int) -> str:
    if 0 <= code <= 0x10FFFF and not 0xD800 <= code <= 0xDFFF:
        return chr(code)
    return REPLACEMENT_CHARACTER


def to_display(data: Union[str, Sequence[int]]) -> str:
    """Readable text for input data; invalid code points become U+FFFD."""
    if isinstance(data, str):
        return data
    return "".join(_display_char(int(code)) for code in data)