"""Layout controls that own a native child window: buttons, labels, edits."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import IntFlag

from comlayout.controls import Control
from comlayout.fonts import Font, FontManager
from comlayout.geometry import Rect, split_string

__all__ = [
    "Style",
    "StyleError",
    "map_style",
    "SystemControl",
    "Button",
    "Option",
    "Check",
    "Static",
    "Group",
    "Edit",
]


class Style(IntFlag):
    """Window style bits understood by the layout description."""

    BORDER = 0x00800000
    CAPTION = 0x00C00000
    CHILD = 0x40000000
    VISIBLE = 0x10000000
    CLIPSIBLINGS = 0x04000000
    CLIPCHILDREN = 0x02000000
    DISABLED = 0x08000000
    GROUP = 0x00020000
    HSCROLL = 0x00100000
    TABSTOP = 0x00010000
    VSCROLL = 0x00200000

    EX_ACCEPTFILES = 0x00000010
    EX_CLIENTEDGE = 0x00000200
    EX_STATICEDGE = 0x00020000
    EX_TOOLWINDOW = 0x00000080
    EX_TOPMOST = 0x00000008
    EX_TRANSPARENT = 0x00000020

    BS_AUTOCHECKBOX = 0x00000003
    BS_GROUPBOX = 0x00000007
    BS_AUTORADIOBUTTON = 0x00000009
    BS_MULTILINE = 0x00002000

    ES_CENTER = 0x00000001
    ES_MULTILINE = 0x00000004
    ES_AUTOVSCROLL = 0x00000040
    ES_AUTOHSCROLL = 0x00000080
    ES_NOHIDESEL = 0x00000100
    ES_READONLY = 0x00000800
    ES_WANTRETURN = 0x00001000
    ES_NUMBER = 0x00002000


class StyleError(ValueError):
    """Raised for a style name no control class knows."""


def map_style(known_styles: Mapping[str, int], styles: Iterable[str]) -> tuple[int, list[str]]:
    """Combine the bits of the known names; return them and the names left unknown.

    Empty names are ignored.
    """
    bits = 0
    unknown: list[str] = []
    for name in styles:
        if not name:
            continue
        if name in known_styles:
            bits |= int(known_styles[name])
        else:
            unknown.append(name)
    return bits, unknown


_WINDOW_STYLES = {
    "border": Style.BORDER,
    "caption": Style.CAPTION,
    "child": Style.CHILD,
    "clipsiblings": Style.CLIPSIBLINGS,
    "clipchildren": Style.CLIPCHILDREN,
    "disabled": Style.DISABLED,
    "group": Style.GROUP,
    "hscroll": Style.HSCROLL,
    "tabstop": Style.TABSTOP,
    "vscroll": Style.VSCROLL,
}

_WINDOW_EX_STYLES = {
    "acceptfiles": Style.EX_ACCEPTFILES,
    "clientedge": Style.EX_CLIENTEDGE,
    "staticedge": Style.EX_STATICEDGE,
    "toolwindow": Style.EX_TOOLWINDOW,
    "topmost": Style.EX_TOPMOST,
    "transparent": Style.EX_TRANSPARENT,
}

_BUTTON_STYLES = {"multiline": Style.BS_MULTILINE}

_EDIT_STYLES = {
    "center": Style.ES_CENTER,
    "multiline": Style.ES_MULTILINE,
    "nohidesel": Style.ES_NOHIDESEL,
    "number": Style.ES_NUMBER,
    "readonly": Style.ES_READONLY,
    "wantreturn": Style.ES_WANTRETURN,
}


@dataclass(eq=False)
class _NativeWindow:
    """The child window a system control creates in its host."""

    window_class: str
    text: str
    style: int
    ex_style: int
    id: int
    parent: object | None
    rect: Rect = field(default_factory=Rect)
    visible: bool = True
    font: Font | None = None
    checked: bool = False


class SystemControl(Control):
    """A control that creates its own native window when bound to a manager."""

    window_class = ""

    def __init__(self) -> None:
        super().__init__()
        self.style = int(Style.CHILD | Style.VISIBLE)
        self.ex_style = 0
        self.text = ""

    def set_attribute(self, name: str, value: str) -> None:
        if name == "text":
            self.text = value
        elif name == "style":
            self.set_style(split_string(value, ","))
        elif name == "exstyle":
            self.set_style(split_string(value, ","), True)
        else:
            super().set_attribute(name, value)

    def _add_style(self, bits: int, extended: bool) -> None:
        if extended:
            self.ex_style |= bits
        else:
            self.style |= bits

    def set_style(self, styles: list[str], extended: bool = False) -> None:
        """Apply style names; raise StyleError for a name that is not known."""
        known = _WINDOW_EX_STYLES if extended else _WINDOW_STYLES
        bits, unknown = map_style(known, styles)
        self._add_style(bits, extended)
        if unknown:
            raise StyleError(f"unknown style: {', '.join(unknown)}")

    def _set_own_style(
        self, known: Mapping[str, int], styles: list[str], extended: bool
    ) -> None:
        bits, unknown = map_style(known, styles)
        self._add_style(bits, extended)
        if unknown:
            SystemControl.set_style(self, unknown, extended)

    def _create(self) -> _NativeWindow:
        manager = self.manager
        window = _NativeWindow(
            window_class=self.window_class,
            text=self.text,
            style=self.style,
            ex_style=self.ex_style,
            id=self.id,
            parent=manager.window if manager is not None else None,
            visible=bool(self.style & Style.VISIBLE),
        )
        if manager is not None and self.id > 0:
            manager.dialog_items[self.id] = window
        return window

    def set_manager(self, manager: FontManager) -> None:
        """Attach to ``manager`` and create the native window."""
        self.manager = manager
        self.handle = self._create()


class Button(SystemControl):
    window_class = "Button"

    def set_style(self, styles: list[str], extended: bool = False) -> None:
        self._set_own_style({} if extended else _BUTTON_STYLES, styles, extended)


class Option(SystemControl):
    """A radio button."""

    window_class = "Button"

    def __init__(self) -> None:
        super().__init__()
        self.has_ws_group = False
        self.style |= int(Style.BS_AUTORADIOBUTTON)


class Check(SystemControl):
    """A check box; the ``checked`` attribute sets its initial state."""

    window_class = "Button"

    def __init__(self) -> None:
        super().__init__()
        self.checked = False
        self.style |= int(Style.BS_AUTOCHECKBOX)

    def set_manager(self, manager: FontManager) -> None:
        super().set_manager(manager)
        self.handle.checked = self.checked

    def set_attribute(self, name: str, value: str) -> None:
        if name == "checked":
            self.checked = value == "true"
        else:
            super().set_attribute(name, value)


class Static(SystemControl):
    window_class = "Static"


class Group(SystemControl):
    """A group box frame; it does not hold other controls."""

    window_class = "Button"

    def __init__(self) -> None:
        super().__init__()
        self.style |= int(Style.BS_GROUPBOX)


class Edit(SystemControl):
    window_class = "Edit"

    def __init__(self) -> None:
        super().__init__()
        self.style |= int(Style.ES_AUTOHSCROLL | Style.ES_AUTOVSCROLL)

    def set_style(self, styles: list[str], extended: bool = False) -> None:
        self._set_own_style({} if extended else _EDIT_STYLES, styles, extended)