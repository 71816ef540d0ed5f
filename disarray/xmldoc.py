"""A lenient XML document reader and writer built on :class:`XmlNode` trees.

The reader is deliberately simple: the text is cut at every ``>``, and a tag
is only recognised when some text (whitespace counts) stands before its ``<``
inside the same piece. Tags starting with ``?`` or ``!`` are ignored, and any
tag containing ``/`` that is not a closing tag is taken as self-closing.
"""

from __future__ import annotations

import io
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Iterator, Optional, Union

from .xmlnode import XmlNode

__all__ = ["Xml", "XML_HEADER"]

XML_HEADER = '<?xml version="1.0"?>\n'

_SPACES = " \t"
_QUOTE_OR_TAB = '"\t'
_QUOTE_OR_SPACE = '" \t'


@lru_cache(maxsize=None)
def _token_pattern(delimiters: str) -> "re.Pattern[str]":
    cls = re.escape(delimiters)
    return re.compile(f"[{cls}]*([^{cls}]+)[{cls}]?")


class _Tokenizer:
    """Stateful tokenizer: each call may use its own set of delimiters."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def next(self, delimiters: str) -> Optional[str]:
        match = _token_pattern(delimiters).match(self._text, self._pos)
        if match is None:
            self._pos = len(self._text)
            return None
        self._pos = match.end()
        return match.group(1)


def _split(text: str, delimiters: str) -> Iterator[str]:
    tokens = _Tokenizer(text)
    while (token := tokens.next(delimiters)) is not None:
        yield token


def _first_part(part: str, name: str, box: XmlNode) -> tuple[str, bool]:
    """Read the tag name and first attribute name; return (name, is_closing)."""
    tokens = _Tokenizer(part)
    first = tokens.next(_SPACES)
    if first is None:
        return name, False
    closing = first.startswith("/")
    if closing:
        first = first[1:]
    name = first
    attribute_name = tokens.next(_SPACES)
    if attribute_name is not None:
        box.add_attribute(attribute_name, "")
    elif name.endswith("/"):
        name = name[:-1]
    return name, closing


def _middle_part(part: str, box: XmlNode) -> None:
    """Read the previous attribute's value and the next attribute's name."""
    tokens = _Tokenizer(part)
    value = tokens.next(_QUOTE_OR_TAB)
    if value is None:
        return
    if box.attributes:
        box.attributes[-1].value = value
    attribute_name = tokens.next(_QUOTE_OR_SPACE)
    if attribute_name is not None:
        box.add_attribute(attribute_name, "")


def _last_part(part: str, box: XmlNode) -> None:
    """Read the value of the last attribute."""
    value = _Tokenizer(part).next(_QUOTE_OR_SPACE)
    if value is not None and box.attributes:
        box.attributes[-1].value = value


def _attach(current: XmlNode, name: str, value: str, box: XmlNode) -> XmlNode:
    child = XmlNode(name=name, value=value)
    for attribute in box.attributes:
        child.add_attribute(attribute.name, attribute.value)
    return current.add_child(child)


def _parse_piece(piece: str, box: XmlNode, current: XmlNode) -> XmlNode:
    """Apply one ``>``-delimited piece of text; return the new current node."""
    tokens = _Tokenizer(piece)
    value = tokens.next("<")
    if value is None:
        return current
    tag = tokens.next("<")
    if tag is None:
        return current

    name = tag
    closing = False
    parts = list(_split(tag, "="))
    last = len(parts) - 1
    for index, part in enumerate(parts):
        if index == 0:
            name, closing = _first_part(part, name, box)
        elif index != last:
            _middle_part(part, box)
        else:
            _last_part(part, box)

    if closing:
        current.value = value
        return current.parent if current.parent is not None else current

    if "/" in tag:
        _attach(current, name, value, box)
    elif tag[0] not in "?!":
        current = _attach(current, name, value, box)
    box.clear()
    return current


@dataclass
class Xml:
    """An XML document whose elements hang under an unnamed ``root`` node."""

    root: XmlNode = field(default_factory=XmlNode)

    def parse(self, text: str) -> None:
        """Parse ``text`` and add the elements found to the root node."""
        box = XmlNode()
        current = self.root
        for piece in _split(text, ">"):
            current = _parse_piece(piece, box, current)

    def load(self, filename: Union[str, Path]) -> None:
        """Read a UTF-8 file and parse it; raise ValueError if it holds no text."""
        raw = Path(filename).read_bytes().split(b"\0", 1)[0]
        if not raw:
            raise ValueError(f"{filename}: no XML text to read")
        self.parse(raw.decode("utf-8", errors="replace"))

    def dumps(self) -> str:
        """Return the document as text, header included."""
        buffer = io.StringIO()
        buffer.write(XML_HEADER)
        self.root.write(buffer, 0)
        return buffer.getvalue()

    def write(self, filename: Union[str, Path]) -> None:
        """Write the document to ``filename`` as UTF-8."""
        with open(filename, "w", encoding="utf-8", newline="") as stream:
            stream.write(XML_HEADER)
            self.root.write(stream, 0)

    def clear(self) -> None:
        """Drop everything below the root."""
        self.root.clear()