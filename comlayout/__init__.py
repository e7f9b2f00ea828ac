"""XML-described window layouts computed in memory, and a key = value configuration format."""

__version__ = "0.1.0"
__all__ = [
    "builder",
    "config",
    "containers",
    "controls",
    "fonts",
    "geometry",
    "layout",
    "markup",
    "widgets",
]