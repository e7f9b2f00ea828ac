"""A layout bound to a host window: sizing, fonts and scroll bars."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from enum import IntEnum

from comlayout.builder import DialogBuilder
from comlayout.containers import Container
from comlayout.controls import KEEP_FONT_ID, Control
from comlayout.fonts import FontManager
from comlayout.geometry import Rect, Size

__all__ = ["ScrollAction", "ScrollBar", "Layout"]

PAGE_SIZE = 100


class ScrollAction(IntEnum):
    """What a scroll request asks for; left and up share values, as do right and down."""

    LINE_UP = 0
    LINE_DOWN = 1
    PAGE_UP = 2
    PAGE_DOWN = 3
    THUMB_POSITION = 4
    THUMB_TRACK = 5
    TOP = 6
    BOTTOM = 7
    END_SCROLL = 8


@dataclass
class ScrollBar:
    """The state of one scroll bar of the host window."""

    minimum: int = 0
    maximum: int = 0
    page: int = 0
    pos: int = 0
    visible: bool = False

    def _clamp(self, pos: int) -> int:
        upper = self.maximum - max(self.page - 1, 0)
        return max(self.minimum, min(pos, upper))

    def scroll(self, action: ScrollAction, track_pos: int = 0) -> int:
        """Move the thumb; return how far the content moves (old minus new position)."""
        old = self.pos
        action = ScrollAction(action)
        pos = old
        if action is ScrollAction.TOP:
            pos = 0
        elif action is ScrollAction.BOTTOM:
            pos = self.maximum
        elif action is ScrollAction.LINE_UP:
            pos -= 1
        elif action is ScrollAction.LINE_DOWN:
            pos += 1
        elif action is ScrollAction.PAGE_UP:
            pos -= self.page
        elif action is ScrollAction.PAGE_DOWN:
            pos += self.page
        elif action in (ScrollAction.THUMB_TRACK, ScrollAction.THUMB_POSITION):
            pos = track_pos
        self.pos = self._clamp(pos)
        return old - self.pos


def _walk(control: Control) -> Iterator[Control]:
    yield control
    if isinstance(control, Container):
        for item in control:
            yield from _walk(item)


class Layout:
    """Lays out a control tree in a host window of ``client_size``."""

    def __init__(
        self,
        client_size: Size | None = None,
        id_resolver: Callable[[str], int] | None = None,
    ) -> None:
        self.client_size = replace(client_size) if client_size is not None else Size()
        self.id_resolver = id_resolver
        self.manager = FontManager(window=self)
        self.root: Container | None = None
        self.vertical_bar = ScrollBar()
        self.horizontal_bar = ScrollBar()
        self.scroll_origin = Size()
        self.last_rect = Rect()

    @property
    def post_size(self) -> Size:
        """The size the content needs, as reported by the root's first child."""
        if self.root is None or len(self.root) == 0:
            return Size()
        return self.root[0].post_size

    def set_layout(self, xml: str) -> Container:
        """Build the description, bind it to this window and size the window to it."""
        self.delete_layout()
        root = DialogBuilder(self.id_resolver).create(xml, self.manager)
        self.manager.window = self
        self.root = root
        root.set_manager(self.manager)
        self.vertical_bar.visible = True
        self.horizontal_bar.visible = True
        self._initialize()
        return root

    def _initialize(self) -> None:
        root = self.root
        init = self.manager.init_size
        self.client_size = Size(init.cx, init.cy)
        root.set_font(KEEP_FONT_ID)
        root.set_visible(root.visible)
        root.do_init()
        self.resize()

    def delete_layout(self) -> None:
        self.root = None

    def resize(self, rect: Rect | None = None) -> None:
        """Place the tree in ``rect``, or in the whole client area."""
        if self.root is None:
            return
        if rect is None:
            rect = Rect(0, 0, self.client_size.cx, self.client_size.cy)
        self.root.set_pos(rect)
        self._update_scroll_bars(rect)
        self.last_rect = replace(rect)

    def _update_scroll_bars(self, rect: Rect) -> None:
        post = self.post_size
        for bar, needed, extent in (
            (self.vertical_bar, post.cy, rect.height),
            (self.horizontal_bar, post.cx, rect.width),
        ):
            if needed > extent:
                bar.minimum = 0
                bar.page = PAGE_SIZE
                bar.maximum = needed - extent - 1 + PAGE_SIZE - 1
                bar.pos = 0
                bar.visible = True
            else:
                bar.visible = False
        self.scroll_origin = Size()

    def find_control(self, name: str) -> Control | None:
        return self.root.find_control(name) if self.root is not None else None

    def set_default_font(self, face: str, size: int) -> None:
        """Replace the default font and re-apply fonts to every control."""
        self.manager.set_default_font(face, size)
        if self.root is not None:
            self.root.set_font(KEEP_FONT_ID)

    def new_font(self, face: str, size: int) -> int:
        """Add a custom font and return its index."""
        font = self.manager.add_font(face, size)
        return self.manager.index_of(font)

    def scroll(self, vertical: bool, action: ScrollAction, track_pos: int = 0) -> int:
        """Scroll one bar; child windows move by the returned amount."""
        bar = self.vertical_bar if vertical else self.horizontal_bar
        delta = bar.scroll(action, track_pos)
        if delta:
            dx, dy = (0, delta) if vertical else (delta, 0)
            self.scroll_origin.cx += dx
            self.scroll_origin.cy += dy
            for window in self._windows():
                window.rect.offset(dx, dy)
        return delta

    def _windows(self) -> Iterator[object]:
        seen: set[int] = set()
        handles: list[object] = []
        if self.root is not None:
            handles.extend(c.handle for c in _walk(self.root) if c.handle is not None)
        handles.extend(self.manager.dialog_items.values())
        for handle in handles:
            if id(handle) in seen:
                continue
            seen.add(id(handle))
            if isinstance(getattr(handle, "rect", None), Rect):
                yield handle