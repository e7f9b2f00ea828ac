"""A line-oriented ``key = value`` configuration file that keeps comments.

Each line of a file becomes one item: a setting, a comment line or a blank
line. Saving writes the items back in the same order. A line that cannot be
read as a setting is dropped.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["ConfigItem", "Config", "str_to_int"]

MAX_FILE_SIZE = 1 << 20
_INT_RE = re.compile(r"[\t\n\v\f\r ]*([+-]?[0-9]+)")
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def str_to_int(text: str) -> int:
    """Read a leading decimal integer, skipping leading white space; 0 when there is none."""
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _to_text(value: str | bool | int) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    return value


@dataclass
class ConfigItem:
    """One line of a configuration: a setting, a comment or a blank line."""

    key: str = ""
    value: str = ""
    comment: str = ""

    def as_int(self) -> int:
        return str_to_int(self.value)

    def as_bool(self) -> bool:
        return self.value == "true"

    def set(self, value: str | bool | int) -> None:
        """Store a string, a boolean (as ``true``/``false``) or an integer."""
        self.value = _to_text(value)


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def skip_ws(self) -> None:
        while self.peek() in (" ", "\t", "\r"):
            self.pos += 1

    def skip_line(self) -> None:
        end = self.text.find("\n", self.pos)
        self.pos = len(self.text) if end < 0 else end + 1

    def read_str(self, in_quotes: bool = False) -> str:
        chars: list[str] = []
        while True:
            char = self.peek()
            if not char or char == '"':
                break
            if char == "\\":
                following = self.peek(1)
                if following == '"':
                    chars.append('"')
                    self.pos += 2
                elif following in ("\r", "\n"):
                    # A backslash at the end of a line continues the value.
                    if following == "\r" and self.peek(2) == "\n":
                        self.pos += 1
                    self.pos += 2
                else:
                    chars.append("\\")
                    self.pos += 1
            elif char in (" ", "\t", "="):
                if not in_quotes:
                    break
                chars.append(char)
                self.pos += 1
            elif char in ("\r", "\n"):
                break
            else:
                if char in (";", "#") and not in_quotes:
                    break
                chars.append(char)
                self.pos += 1
        return "".join(chars)

    def read_comment(self) -> str:
        start = self.pos
        while self.peek() not in ("", "\n", "\r"):
            self.pos += 1
        return self.text[start:self.pos]

    def at_comment(self) -> bool:
        return self.peek() in (";", "#")


class Config:
    """An ordered list of configuration items, with the file it was read from."""

    def __init__(self) -> None:
        self._items: list[ConfigItem] = []
        self.path: str | os.PathLike[str] | None = None

    def __iter__(self) -> Iterator[ConfigItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def load(self, text: str) -> None:
        """Parse ``text`` and append its items; raise ValueError when it is empty."""
        text = text.split("\0", 1)[0]
        if not text:
            raise ValueError("configuration text is empty")

        reader = _Reader(text)
        while True:
            reader.skip_ws()
            char = reader.peek()
            if char == "\n":
                self._items.append(ConfigItem())
                reader.skip_line()
            elif char in (";", "#"):
                self._items.append(ConfigItem(comment=reader.read_comment()))
                reader.skip_line()
            elif not char:
                break
            else:
                self._read_setting(reader)

    def _read_setting(self, reader: _Reader) -> None:
        key = reader.read_str()
        reader.skip_ws()
        if reader.peek() != "=":
            reader.skip_line()
            return
        reader.pos += 1
        reader.skip_ws()

        value = ""
        comment = ""
        if reader.peek() == '"':
            reader.pos += 1
            value = reader.read_str(in_quotes=True)
            if reader.peek() != '"':
                reader.skip_line()
                return
            reader.pos += 1
            reader.skip_ws()
            if reader.at_comment():
                comment = reader.read_comment()
        elif reader.at_comment():
            comment = reader.read_comment()
        else:
            value = reader.read_str()
            reader.skip_ws()
            if reader.at_comment():
                comment = reader.read_comment()
        reader.skip_line()
        self._items.append(ConfigItem(key, value, comment))

    def load_file(self, path: str | os.PathLike[str]) -> None:
        """Read and parse ``path``, which becomes the default path for saving.

        Raises OSError when the file cannot be read and ValueError when it is
        empty or larger than 1 MiB.
        """
        self.path = path
        with open(path, "rb") as stream:
            data = stream.read(MAX_FILE_SIZE + 1)
        if not data:
            raise ValueError(f"configuration file {os.fspath(path)!r} is empty")
        if len(data) > MAX_FILE_SIZE:
            raise ValueError(f"configuration file {os.fspath(path)!r} is too large")
        self.load(data.decode(_ENCODING, errors=_ERRORS))

    def dumps(self) -> str:
        """Return the configuration as text, one CRLF-terminated line per item."""
        lines = []
        for item in self._items:
            line = ""
            if item.key:
                value = f'"{item.value}"' if " " in item.value else item.value
                line = f"{item.key} = {value}"
            if item.comment:
                if item.key:
                    line += "\t"
                line += item.comment
            lines.append(line + "\r\n")
        return "".join(lines)

    def save_file(self, path: str | os.PathLike[str] | None = None) -> None:
        """Write to ``path``, or to the file last loaded."""
        target = path if path is not None else self.path
        if target is None:
            raise ValueError("no file to save the configuration to")
        with open(target, "wb") as stream:
            stream.write(self.dumps().encode(_ENCODING, errors=_ERRORS))

    def get(self, key: str) -> ConfigItem | None:
        """Return the first item called ``key``, or None."""
        return next((item for item in self._items if item.key == key), None)

    def set(self, key: str, value: str | bool | int) -> ConfigItem:
        """Update the item called ``key``, or append a new one."""
        item = self.get(key)
        if item is None:
            item = ConfigItem(key, _to_text(value))
            self._items.append(item)
        else:
            item.set(value)
        return item