"""Builds a control tree from a ``<Window>`` layout description."""

from __future__ import annotations

import re
from collections.abc import Callable

from comlayout.containers import Container, HorizontalLayout, VerticalLayout
from comlayout.controls import Control
from comlayout.fonts import FontManager
from comlayout.geometry import Size
from comlayout.markup import Markup, MarkupError, MarkupNode
from comlayout.widgets import Button, Check, Edit, Group, Option, Static

__all__ = ["BuildError", "DialogBuilder"]

DEFAULT_FONT_SIZE = 12

_INT_RE = re.compile(r"[\t\n\v\f\r ]*([+-]?\d+)")

_CONTROL_CLASSES: dict[str, type[Control]] = {
    "Control": Control,
    "Container": Container,
    "Vertical": VerticalLayout,
    "Horizontal": HorizontalLayout,
    "Button": Button,
    "Option": Option,
    "Check": Check,
    "Static": Static,
    "Group": Group,
    "Edit": Edit,
}


class BuildError(ValueError):
    """Raised when a layout description cannot be turned into controls."""


def _read_ints(text: str, count: int) -> list[int]:
    """Read ``count`` integers, each one skipping a single separator after the last."""
    values = []
    pos = 0
    for _ in range(count):
        match = _INT_RE.match(text, pos) if pos <= len(text) else None
        if match:
            values.append(int(match.group(1)))
            pos = match.end() + 1
        else:
            values.append(0)
            pos += 1
    return values


class DialogBuilder:
    """Turns a layout description into a tree of controls.

    ``id_resolver`` maps a symbolic control id (one that does not start with a
    digit) to a number.
    """

    def __init__(self, id_resolver: Callable[[str], int] | None = None) -> None:
        self.id_resolver = id_resolver
        self.manager: FontManager | None = None

    def create(self, xml: str, manager: FontManager) -> Container:
        """Parse ``xml`` and return its top container, unbound to ``manager``."""
        try:
            root = Markup(xml).root
        except MarkupError as exc:
            raise BuildError(f"invalid layout description: {exc}") from exc
        if root is None:
            raise BuildError("empty layout description")
        if root.name != "Window":
            raise BuildError(f"expected <Window> as the root element, got <{root.name}>")

        for name, value in root.attributes:
            if name == "size":
                cx, cy = _read_ints(value, 2)
                manager.init_size = Size(cx, cy)

        self.manager = manager
        top = self._parse(root, None)
        if top is None:
            raise BuildError("layout description holds no controls")
        if not isinstance(top, Container):
            raise BuildError(f"top element <{top.class_name}> is not a container")
        return top

    def _parse(self, node: MarkupNode, parent: Container | None) -> Control | None:
        first: Control | None = None
        for child in node.children:
            if child.name == "Font":
                self._add_font(child)
                continue
            cls = _CONTROL_CLASSES.get(child.name)
            if cls is None:
                if parent is None:
                    raise BuildError(f"unknown element <{child.name}>")
                continue
            control = cls()
            if child.children:
                if not isinstance(control, Container):
                    raise BuildError(f"<{child.name}> cannot hold other elements")
                self._parse(child, control)
            if parent is not None:
                parent.add(control)
            for name, value in child.attributes:
                control.set_attribute(name, self._resolve(name, value))
            if first is None:
                first = control
        return first

    def _resolve(self, name: str, value: str) -> str:
        if name.startswith("id") and value and value[0] > "9" and self.id_resolver:
            return str(int(self.id_resolver(value)))
        return value

    def _add_font(self, node: MarkupNode) -> None:
        face: str | None = None
        size = DEFAULT_FONT_SIZE
        bold = underline = italic = default = False
        for name, value in node.attributes:
            if name == "name":
                face = value
            elif name == "size":
                size = _read_ints(value, 1)[0]
            elif name == "bold":
                bold = value == "true"
            elif name == "underline":
                underline = value == "true"
            elif name == "italic":
                italic = value == "true"
            elif name == "default":
                default = value == "true"
        if face is not None and self.manager is not None:
            self.manager.add_font(face, size, bold, underline, italic)
            if default:
                self.manager.set_default_font(face, size, bold, underline, italic)