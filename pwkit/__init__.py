"""Read PCK game archives and parse the icon lists and text tables inside them."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "configtext",
    "engine",
    "entry",
    "iconlists",
    "keys",
    "properties",
    "resources",
    "server",
    "stream",
    "zlibcodec",
]