"""Fonts shared by the controls of one layout."""

from __future__ import annotations

from dataclasses import dataclass, field

from comlayout.geometry import Size

__all__ = ["Font", "FontManager"]

FACE_NAME_LIMIT = 31
DEFAULT_FACE = "MS Shell Dlg"
DEFAULT_SIZE = 11
DEFAULT_INIT_SIZE = 500


@dataclass(eq=False)
class Font:
    """A font description; each one is a distinct object, as a font handle is."""

    face: str
    size: int
    bold: bool = False
    underline: bool = False
    italic: bool = False

    def __post_init__(self) -> None:
        self.face = self.face[:FACE_NAME_LIMIT]


@dataclass
class FontManager:
    """Holds the default font, a list of custom fonts and the host window state.

    ``dialog_items`` maps control ids to the native child windows of the host,
    and ``init_size`` is the initial client size a layout description asks for.
    """

    window: object | None = None
    init_size: Size = field(default_factory=lambda: Size(DEFAULT_INIT_SIZE, DEFAULT_INIT_SIZE))
    dialog_items: dict[int, object] = field(default_factory=dict)
    default_font: Font = field(default_factory=lambda: Font(DEFAULT_FACE, DEFAULT_SIZE))
    _fonts: list[Font] = field(default_factory=list, repr=False)

    def __len__(self) -> int:
        return len(self._fonts)

    @property
    def fonts(self) -> list[Font]:
        return list(self._fonts)

    def set_default_font(
        self,
        face: str,
        size: int,
        bold: bool = False,
        underline: bool = False,
        italic: bool = False,
    ) -> Font:
        self.default_font = Font(face, size, bold, underline, italic)
        return self.default_font

    def add_font(
        self,
        face: str,
        size: int,
        bold: bool = False,
        underline: bool = False,
        italic: bool = False,
    ) -> Font:
        """Create a custom font, append it and return it."""
        font = Font(face, size, bold, underline, italic)
        self._fonts.append(font)
        return font

    def remove_font(self, font: Font) -> bool:
        """Remove ``font``; return False when it is not one of the custom fonts."""
        index = self.index_of(font)
        if index < 0:
            return False
        del self._fonts[index]
        return True

    def remove_all_fonts(self) -> None:
        self._fonts.clear()

    def font(self, index: int) -> Font:
        """Return the custom font at ``index``, or the default font when out of range."""
        if 0 <= index < len(self._fonts):
            return self._fonts[index]
        return self.default_font

    def index_of(self, font: Font) -> int:
        """Return the index of ``font`` among the custom fonts, or -1."""
        return next((i for i, f in enumerate(self._fonts) if f is font), -1)