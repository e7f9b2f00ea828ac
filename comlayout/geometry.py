"""Rectangles, sizes and small string helpers used by the layout engine."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Size", "Rect", "split_string", "hash_key"]

_UINT_MASK = 0xFFFFFFFF


def hash_key(key: str) -> int:
    """Return the 32-bit ``*33 + c`` hash of ``key``, taken from its last character."""
    value = 0
    for char in reversed(key):
        value = ((value << 5) + value + ord(char)) & _UINT_MASK
    return value


def split_string(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``.

    Every delimiter ends a piece, even an empty one; a trailing piece is kept
    only when it is not empty.
    """
    pieces = text.split(delimiter)
    if pieces and not pieces[-1]:
        pieces.pop()
    return pieces


@dataclass
class Size:
    """A width and a height."""

    cx: int = 0
    cy: int = 0


@dataclass
class Rect:
    """A rectangle given by its edges; ``right`` and ``bottom`` are exclusive."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def _has_no_area(self) -> bool:
        return self.right <= self.left or self.bottom <= self.top

    def empty(self) -> None:
        """Set every edge to zero."""
        self.left = self.top = self.right = self.bottom = 0

    def is_null(self) -> bool:
        """True when every edge is zero."""
        return self.left == 0 and self.top == 0 and self.right == 0 and self.bottom == 0

    def join(self, other: Rect) -> None:
        """Grow to cover ``other`` as well."""
        self.left = min(self.left, other.left)
        self.top = min(self.top, other.top)
        self.right = max(self.right, other.right)
        self.bottom = max(self.bottom, other.bottom)

    def reset_offset(self) -> None:
        """Move so that the top-left corner is at the origin."""
        self.offset(-self.left, -self.top)

    def normalize(self) -> None:
        """Swap edges so that left <= right and top <= bottom."""
        if self.left > self.right:
            self.left, self.right = self.right, self.left
        if self.top > self.bottom:
            self.top, self.bottom = self.bottom, self.top

    def offset(self, cx: int, cy: int) -> None:
        self.left += cx
        self.right += cx
        self.top += cy
        self.bottom += cy

    def inflate(self, cx: int, cy: int) -> None:
        self.left -= cx
        self.right += cx
        self.top -= cy
        self.bottom += cy

    def deflate(self, cx: int, cy: int) -> None:
        self.inflate(-cx, -cy)

    def union(self, other: Rect) -> None:
        """Become the smallest rectangle holding both; rectangles without area are ignored."""
        if self._has_no_area():
            if other._has_no_area():
                self.empty()
            else:
                self.left, self.top = other.left, other.top
                self.right, self.bottom = other.right, other.bottom
        elif not other._has_no_area():
            self.join(other)