"""Parsing of the icon atlas index files (``iconlist_*.txt``)."""

import re
from dataclasses import dataclass, field

__all__ = ["IconList", "parse_icon_list"]

_LINE_BREAK = re.compile(r"\r?\n")


def _to_int(text):
    try:
        return int(text.strip())
    except ValueError:
        return 0


@dataclass
class IconList:
    """An icon atlas index: cell size, grid shape and the icon file names."""

    width: int = 0
    height: int = 0
    rows: int = 0
    columns: int = 0
    names: list = field(default_factory=list)
    positions: dict = field(default_factory=dict)

    def position(self, name):
        """Pixel offset ``(x, y)`` of the icon called ``name`` in the atlas."""
        try:
            return self.positions[name]
        except KeyError:
            raise KeyError(f"no icon named {name!r}") from None


def parse_icon_list(data):
    """Parse a GBK encoded icon list.

    The first four lines hold the cell width, cell height, row count and
    column count; every following line names one icon, laid out row by row.
    Reading stops at the first NUL character or empty line.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        text = bytes(data).decode("gbk", errors="replace")
    else:
        text = str(data)
    text = text.split("\0", 1)[0]

    header = []
    names = []
    for line in _LINE_BREAK.split(text):
        if not line:
            break
        if len(header) < 4:
            header.append(_to_int(line))
        else:
            names.append(line)
    width, height, rows, columns = header + [0] * (4 - len(header))

    if names and columns == 0:
        raise ValueError("icon list has icons but no columns")

    positions = {}
    for index, name in enumerate(names):
        row, column = divmod(index, columns)
        positions[name] = (column * width, row * height)

    return IconList(width, height, rows, columns, names, positions)