"""The base layout control: a rectangle with size limits bound to an optional window.

A control's native window, when it has one, is any object; the control sets
its ``rect``, ``visible`` and ``font`` attributes.
"""

from __future__ import annotations

import re
from dataclasses import replace

from comlayout.fonts import FontManager
from comlayout.geometry import Rect, Size

__all__ = ["Control"]

MAX_EXTENT = 9999
DEFAULT_FONT_ID = -1
KEEP_FONT_ID = -2

_INT_RE = re.compile(r"[\t\n\v\f\r ]*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _parse_ints(text: str, count: int) -> list[int]:
    """Read ``count`` integers, each one skipping a single separator after the last."""
    values = []
    pos = 0
    for _ in range(count):
        match = _INT_RE.match(text, pos) if pos <= len(text) else None
        if match:
            values.append(int(match.group(1)))
            end = match.end()
        else:
            values.append(0)
            end = pos
        pos = end + 1
    return values


class Control:
    """A positioned element of a layout."""

    class_name = "Control"

    def __init__(self) -> None:
        self.inited = False
        self.handle: object | None = None
        self.font_id = DEFAULT_FONT_ID
        self.id = 0
        self.name = ""
        self.user_data: object | None = None
        self.manager: FontManager | None = None
        self.parent = None
        self.inset = Rect()
        self.pos = Rect()
        self.fixed_xy = Size()
        self._fixed = Size()
        self._min = Size()
        self._max = Size(MAX_EXTENT, MAX_EXTENT)
        self.post_size = Size()
        self._visible = True
        self._visible_by_parent = True
        self._displayed = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, id={self.id}, pos={self.pos})"

    def do_init(self) -> None:
        if self.manager is None:
            raise RuntimeError("control has no manager")
        self.inited = True

    # position ---------------------------------------------------------------

    def set_pos(self, rect: Rect) -> None:
        """Place the control at ``rect`` and move its window inside the inset."""
        self.pos = replace(rect)
        self.pos.right = max(self.pos.right, self.pos.left)
        self.pos.bottom = max(self.pos.bottom, self.pos.top)
        self.post_size = Size(self.pos.width, self.pos.height)

        if self.handle is None or self.pos.is_null():
            return

        inner = Rect(
            self.pos.left + self.inset.left,
            self.pos.top + self.inset.top,
            self.pos.right - self.inset.right,
            self.pos.bottom - self.inset.bottom,
        )
        self.handle.rect = inner

    @property
    def width(self) -> int:
        return self.pos.width

    @property
    def height(self) -> int:
        return self.pos.height

    @property
    def x(self) -> int:
        return self.pos.left

    @property
    def y(self) -> int:
        return self.pos.top

    @property
    def fixed_width(self) -> int:
        return self._fixed.cx

    @fixed_width.setter
    def fixed_width(self, cx: int) -> None:
        if cx >= 0:
            self._fixed.cx = cx

    @property
    def fixed_height(self) -> int:
        return self._fixed.cy

    @fixed_height.setter
    def fixed_height(self, cy: int) -> None:
        if cy >= 0:
            self._fixed.cy = cy

    @property
    def min_width(self) -> int:
        return self._min.cx

    @min_width.setter
    def min_width(self, cx: int) -> None:
        if cx >= 0:
            self._min.cx = cx

    @property
    def max_width(self) -> int:
        return self._max.cx

    @max_width.setter
    def max_width(self, cx: int) -> None:
        if cx >= 0:
            self._max.cx = cx

    @property
    def min_height(self) -> int:
        return self._min.cy

    @min_height.setter
    def min_height(self, cy: int) -> None:
        if cy >= 0:
            self._min.cy = cy

    @property
    def max_height(self) -> int:
        return self._max.cy

    @max_height.setter
    def max_height(self, cy: int) -> None:
        if cy >= 0:
            self._max.cy = cy

    def estimate_size(self, available: Size) -> Size:
        """Return the preset size; zero in a direction means "stretch"."""
        return replace(self._fixed)

    # attributes -------------------------------------------------------------

    def set_attribute(self, name: str, value: str) -> None:
        """Apply one attribute from a layout description; unknown names are ignored."""
        if name == "id":
            self.id = _atoi(value)
        elif name == "font":
            self.set_font(_atoi(value))
        elif name == "name":
            self.name = value
        elif name == "width":
            self.fixed_width = _atoi(value)
        elif name == "height":
            self.fixed_height = _atoi(value)
        elif name == "minwidth":
            self.min_width = _atoi(value)
        elif name == "minheight":
            self.min_height = _atoi(value)
        elif name == "maxwidth":
            self.max_width = _atoi(value)
        elif name == "maxheight":
            self.max_height = _atoi(value)
        elif name == "inset":
            self.inset = Rect(*_parse_ints(value, 4))
        elif name == "visible":
            self.set_visible(value == "true")
        elif name == "display":
            self.set_displayed(value == "true")

    # visibility -------------------------------------------------------------

    @property
    def visible(self) -> bool:
        return self._visible and self._visible_by_parent

    @property
    def displayed(self) -> bool:
        return self._displayed

    def set_visible(self, visible: bool = True) -> None:
        self._visible = visible
        self.set_displayed(self.displayed)
        self.need_parent_update()

    def set_visible_by_parent(self, visible: bool) -> None:
        self._visible_by_parent = visible
        self.set_displayed(self.displayed)

    def set_displayed(self, displayed: bool) -> None:
        self._displayed = displayed
        if self.handle is not None:
            self.handle.visible = self.visible

    def need_update(self) -> None:
        if not self.inited:
            return
        self.set_pos(self.pos)

    def need_parent_update(self) -> None:
        if not self.inited:
            return
        if self.parent is not None:
            self.parent.need_update()
        else:
            self.need_update()

    # fonts and binding ------------------------------------------------------

    def set_font(self, font_id: int) -> None:
        """Select a font by index; -1 is the default font, -2 re-applies the current one."""
        if font_id != KEEP_FONT_ID:
            self.font_id = font_id
        if self.handle is not None and self.manager is not None:
            if self.font_id == DEFAULT_FONT_ID:
                font = self.manager.default_font
            else:
                font = self.manager.font(self.font_id)
            self.handle.font = font

    def set_manager(self, manager: FontManager) -> None:
        """Attach to ``manager`` and bind the child window with this control's id."""
        self.manager = manager
        if self.id <= 0:
            self.handle = None
            return
        handle = manager.dialog_items.get(self.id)
        if handle is None:
            raise LookupError(f"no dialog item with id {self.id}")
        self.handle = handle

    def find_control(self, name: str) -> Control | None:
        return self if name == self.name else None