"""Controls that hold other controls: a plain stack, a column and a row."""

from __future__ import annotations

from collections.abc import Iterator

from comlayout.controls import Control
from comlayout.fonts import FontManager
from comlayout.geometry import Rect, Size

__all__ = ["Container", "VerticalLayout", "HorizontalLayout"]


def _clamp(value: int, low: int, high: int) -> int:
    if value < low:
        value = low
    if value > high:
        value = high
    return value


def _inner_rect(control: Control) -> Rect:
    return Rect(
        control.pos.left + control.inset.left,
        control.pos.top + control.inset.top,
        control.pos.right - control.inset.right,
        control.pos.bottom - control.inset.bottom,
    )


class Container(Control):
    """A control whose visible children all fill its area inside the inset."""

    class_name = "Container"

    def __init__(self) -> None:
        super().__init__()
        self.items: list[Control] = []
        self.enable_update = True

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Control:
        return self.items[index]

    def __iter__(self) -> Iterator[Control]:
        return iter(self.items)

    def add(self, control: Control | None) -> bool:
        """Append ``control``; bind and initialise it when a manager is set."""
        if control is None:
            return False
        control.parent = self
        if self.manager is not None:
            control.set_manager(self.manager)
            control.do_init()
        self.items.append(control)
        return True

    def remove(self, control: Control | None) -> bool:
        """Remove ``control``; return False when it is not a direct child."""
        if control is None:
            return False
        for index, item in enumerate(self.items):
            if item is control:
                del self.items[index]
                self.need_update()
                return True
        return False

    def remove_all(self) -> None:
        self.items.clear()

    def do_init(self) -> None:
        super().do_init()
        for item in self.items:
            item.do_init()

    def set_pos(self, rect: Rect) -> None:
        Control.set_pos(self, rect)
        if not self.items:
            return
        inner = _inner_rect(self)
        for item in self.items:
            if item.visible:
                item.set_pos(inner)

    def set_manager(self, manager: FontManager) -> None:
        super().set_manager(manager)
        for item in self.items:
            item.set_manager(manager)

    def find_control(self, name: str) -> Control | None:
        """Return this container or the first descendant called ``name``."""
        if name == self.name:
            return self
        for item in self.items:
            found = item.find_control(name)
            if found is not None:
                return found
        return None

    def set_visible(self, visible: bool = True) -> None:
        self._visible = visible
        for item in self.items:
            item.set_visible_by_parent(self.visible)
        self.need_parent_update()

    def set_displayed(self, displayed: bool) -> None:
        self._displayed = displayed
        for item in self.items:
            item.set_visible_by_parent(self.visible)
        self.need_update()

    def set_font(self, font_id: int) -> None:
        super().set_font(font_id)
        for item in self.items:
            item.set_font(font_id)


class VerticalLayout(Container):
    """Stacks visible children top to bottom; zero-height children share the rest."""

    class_name = "Vertical"

    def set_pos(self, rect: Rect) -> None:
        Control.set_pos(self, rect)
        if not self.items:
            return

        inner = _inner_rect(self)
        available = Size(inner.width, inner.height)

        adjustables = 0
        cy_fixed = 0
        for item in self.items:
            if not item.visible:
                continue
            size = item.estimate_size(available)
            if size.cy == 0:
                adjustables += 1
            else:
                size.cy = _clamp(size.cy, item.min_height, item.max_height)
            cy_fixed += size.cy

        cy_expand = max(0, int((available.cy - cy_fixed) / adjustables)) if adjustables else 0

        remaining = available.cy
        pos_y = inner.top
        adjustable_index = 0
        fixed_remaining = cy_fixed
        needed = 0
        for item in self.items:
            if not item.visible:
                continue
            size = item.estimate_size(Size(available.cx, remaining))
            if size.cy == 0:
                adjustable_index += 1
                cy = cy_expand
                if adjustable_index == adjustables:
                    cy = max(0, remaining - fixed_remaining)
                cy = _clamp(cy, item.min_height, item.max_height)
            else:
                cy = _clamp(size.cy, item.min_height, item.max_height)
                fixed_remaining -= cy

            cx = item.fixed_width
            if cx == 0:
                cx = available.cx
            if cx < 0:
                cx = 0
            cx = _clamp(cx, item.min_width, item.max_width)

            item.set_pos(Rect(inner.left, pos_y, inner.left + cx, pos_y + cy))
            pos_y += cy
            needed += cy
            remaining -= cy

        self.post_size = Size(self.pos.width, needed + self.inset.top + self.inset.bottom)


class HorizontalLayout(Container):
    """Lines visible children up left to right; zero-width children share the rest."""

    class_name = "Horizontal"

    def set_pos(self, rect: Rect) -> None:
        Control.set_pos(self, rect)
        if not self.items:
            return

        inner = _inner_rect(self)
        available = Size(inner.width, inner.height)

        adjustables = 0
        cx_fixed = 0
        for item in self.items:
            if not item.visible:
                continue
            size = item.estimate_size(available)
            if size.cx == 0:
                adjustables += 1
            else:
                size.cx = _clamp(size.cx, item.min_width, item.max_width)
            cx_fixed += size.cx

        cx_expand = max(0, int((available.cx - cx_fixed) / adjustables)) if adjustables else 0

        remaining = available.cx
        pos_x = inner.left
        adjustable_index = 0
        fixed_remaining = cx_fixed
        needed = 0
        for item in self.items:
            if not item.visible:
                continue
            size = item.estimate_size(Size(remaining, available.cy))
            if size.cx == 0:
                adjustable_index += 1
                cx = cx_expand
                if adjustable_index == adjustables:
                    cx = max(0, remaining - fixed_remaining)
                cx = _clamp(cx, item.min_width, item.max_width)
            else:
                cx = _clamp(size.cx, item.min_width, item.max_width)
                fixed_remaining -= cx

            cy = item.fixed_height
            if cy == 0:
                cy = inner.bottom - inner.top
            if cy < 0:
                cy = 0
            cy = _clamp(cy, item.min_height, item.max_height)

            item.set_pos(Rect(pos_x, inner.top, pos_x + cx, inner.top + cy))
            pos_x += cx
            needed += cx
            remaining -= cx

        self.post_size = Size(needed + self.inset.left + self.inset.right, self.pos.height)