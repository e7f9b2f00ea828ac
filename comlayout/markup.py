"""A small, lenient XML reader for layout descriptions.

Elements, attributes and the text that precedes an element's first child are
kept. Comments (``<!-- -->``) and processing directives (``<? ?>``) are
skipped. Only the five predefined entities are decoded. An unknown ``&`` is
kept as it is.
"""

from __future__ import annotations

import locale
import re
from dataclasses import dataclass, field
from enum import IntEnum

__all__ = ["MarkupError", "XmlEncoding", "MarkupNode", "Markup"]

MAX_ATTRIBUTES = 64

_WHITESPACE = frozenset(chr(code) for code in range(1, 33))
_ENTITIES = {"amp": "&", "lt": "<", "gt": ">", "quot": '"', "apos": "'"}
_ENTITY_RE = re.compile(r"&(amp|lt|gt|quot|apos);")
_COLLAPSE_RE = re.compile(r" [\x01-\x20]*")
_ERROR_MESSAGE_LIMIT = 99
_ERROR_LOCATION_LIMIT = 49


class MarkupError(ValueError):
    """Raised when a document cannot be parsed."""

    def __init__(self, message: str, location: str = "") -> None:
        self.message = message[:_ERROR_MESSAGE_LIMIT]
        self.location = location[:_ERROR_LOCATION_LIMIT]
        text = f"{self.message}: {self.location!r}" if self.location else self.message
        super().__init__(text)


class XmlEncoding(IntEnum):
    """How raw bytes handed to :meth:`Markup.load_bytes` are decoded."""

    UTF8 = 0
    UNICODE = 1
    ANSI = 2


@dataclass(eq=False)
class MarkupNode:
    """One element of a parsed document."""

    name: str
    value: str = ""
    attributes: list[tuple[str, str]] = field(default_factory=list)
    children: list[MarkupNode] = field(default_factory=list)
    parent: MarkupNode | None = field(default=None, repr=False)

    def child(self, name: str | None = None) -> MarkupNode | None:
        """Return the first child, or the first child called ``name``."""
        return next(
            (node for node in self.children if name is None or node.name == name),
            None,
        )

    def get(self, name: str, default: str = "") -> str:
        """Return the value of the first attribute called ``name``."""
        return next((value for key, value in self.attributes if key == name), default)

    def has_attribute(self, name: str) -> bool:
        return any(key == name for key, _ in self.attributes)


def _is_identifier_char(char: str) -> bool:
    return char in ("_", ":") or (char.isascii() and char.isalnum())


class _Parser:
    def __init__(self, text: str, preserve_whitespace: bool) -> None:
        self.text = text.split("\0", 1)[0]
        self.pos = 0
        self.preserve_whitespace = preserve_whitespace
        self.first: MarkupNode | None = None

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_whitespace(self) -> None:
        while self.peek() in _WHITESPACE:
            self.pos += 1

    def skip_identifier(self) -> None:
        while self.peek() and _is_identifier_char(self.peek()):
            self.pos += 1

    def fail(self, message: str) -> MarkupError:
        return MarkupError(message, self.text[self.pos:])

    def parse_nodes(self, parent: MarkupNode | None) -> list[MarkupNode]:
        # End of input is tolerated at document level and directly inside
        # the first element of the document.
        lenient = parent is None or parent is self.first
        nodes: list[MarkupNode] = []
        self.skip_whitespace()
        while True:
            if self.at_end() and lenient:
                return nodes
            self.skip_whitespace()
            if self.peek() != "<":
                raise self.fail("Expected start tag")
            if self.peek(1) == "/":
                return nodes
            self.pos += 1
            self.skip_whitespace()
            if self.peek() in ("!", "?"):
                terminator = "->" if self.peek() == "!" else "?>"
                end = self.text.find(terminator, self.pos)
                self.pos = len(self.text) if end < 0 else end + 2
                self.skip_whitespace()
                continue

            node = MarkupNode(name="", parent=parent)
            if self.first is None:
                self.first = node
            nodes.append(node)

            start = self.pos
            self.skip_identifier()
            node.name = self.text[start:self.pos]
            if self.at_end():
                raise self.fail("Error parsing element name")
            node.attributes = self.parse_attributes()
            self.skip_whitespace()

            if self.text.startswith("/>", self.pos):
                self.pos += 2
            else:
                if self.peek() != ">":
                    raise self.fail("Expected start-tag closing")
                self.pos += 1
                node.value = self.parse_data("<")
                if self.at_end() and lenient:
                    return nodes
                if self.peek() != "<":
                    raise self.fail("Expected end-tag start")
                if self.peek(1) != "/":
                    node.children = self.parse_nodes(node)
                if self.text.startswith("</", self.pos):
                    self.pos += 2
                    self.skip_whitespace()
                    if not self.text.startswith(node.name, self.pos):
                        raise self.fail("Unmatched closing tag")
                    self.pos += len(node.name)
                    self.skip_whitespace()
                    if self.peek() != ">":
                        raise self.fail("Unmatched closing tag")
                    self.pos += 1
            self.skip_whitespace()

    def parse_attributes(self) -> list[tuple[str, str]]:
        attributes: list[tuple[str, str]] = []
        if self.peek() == ">":
            return attributes
        if self.peek() in _WHITESPACE:
            self.pos += 1
        self.skip_whitespace()
        while self.peek() not in ("", ">", "/"):
            start = self.pos
            self.skip_identifier()
            name = self.text[start:self.pos]
            self.skip_whitespace()
            if self.peek() != "=":
                raise self.fail("Error while parsing attributes")
            self.pos += 1
            self.skip_whitespace()
            if self.peek() != '"':
                raise self.fail("Expected attribute value")
            self.pos += 1
            value = self.parse_data('"')
            if self.at_end():
                raise self.fail("Error while parsing attribute string")
            self.pos += 1
            self.skip_whitespace()
            if len(attributes) < MAX_ATTRIBUTES:
                attributes.append((name, value))
        return attributes

    def parse_data(self, end: str) -> str:
        stop = self.text.find(end, self.pos)
        if stop < 0:
            stop = len(self.text)
        raw = self.text[self.pos:stop]
        self.pos = stop
        if not self.preserve_whitespace:
            raw = _COLLAPSE_RE.sub(" ", raw)
        return _ENTITY_RE.sub(lambda match: _ENTITIES[match.group(1)], raw)


class Markup:
    """A parsed document: its top-level elements and the first of them."""

    def __init__(self, xml: str | None = None, preserve_whitespace: bool = True) -> None:
        self.preserve_whitespace = preserve_whitespace
        self.elements: list[MarkupNode] = []
        self._loaded = False
        if xml is not None:
            self.load(xml)

    @property
    def root(self) -> MarkupNode | None:
        return self.elements[0] if self.elements else None

    @property
    def is_valid(self) -> bool:
        return self._loaded

    def load(self, xml: str) -> MarkupNode | None:
        """Parse ``xml`` and return the root element; raise MarkupError on failure."""
        self.elements = []
        self._loaded = False
        parser = _Parser(xml, self.preserve_whitespace)
        self.elements = parser.parse_nodes(None)
        self._loaded = True
        return self.root

    def load_bytes(
        self, data: bytes, encoding: XmlEncoding = XmlEncoding.UTF8
    ) -> MarkupNode | None:
        """Decode ``data`` as ``encoding`` and parse it."""
        encoding = XmlEncoding(encoding)
        if encoding is XmlEncoding.UTF8:
            if data.startswith(b"\xef\xbb\xbf"):
                data = data[3:]
            text = data.decode("utf-8", errors="replace")
        elif encoding is XmlEncoding.UNICODE:
            if data[:2] == b"\xfe\xff":
                codec = "utf-16-be"
            elif data[:2] == b"\xff\xfe":
                codec = "utf-16-le"
            else:
                self.elements = []
                self._loaded = False
                raise MarkupError("Missing byte order mark")
            units = len(data) // 2 - 1
            text = data[2:2 + 2 * units].decode(codec, errors="replace")
        else:
            text = data.decode(locale.getpreferredencoding(False), errors="replace")
        return self.load(text)