"""Parsers for the text tables found in ``configs.pck``."""

import re

__all__ = [
    "parse_item_color",
    "parse_item_desc",
    "parse_item_ext_desc",
    "parse_item_ext_prop",
    "parse_fixed_msg",
]

_LINE_BREAK = re.compile(r"\r?\n")
_INTEGER = re.compile(r"[+-]?\d+")


def _decode(data, encoding):
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode(encoding, errors="replace")
    return str(data)


def _lines(text):
    """Split like a line reader: no empty line after a final line break."""
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def _to_int(text):
    text = text.strip()
    return int(text) if _INTEGER.fullmatch(text) else 0


def _is_entry(line):
    return bool(line) and not line.startswith("#") and not line.startswith("/")


def _quoted_texts(data, encoding):
    """First non-empty quote-separated part of every entry line after the header."""
    texts = []
    for line in _lines(_decode(data, encoding))[1:]:
        line = line.replace("\0", "")
        if not _is_entry(line):
            continue
        parts = [part for part in line.split('"') if part]
        if parts:
            texts.append(parts[0])
    return texts


def parse_item_color(text):
    """Map item ids to colour indices from tab separated ``id<TAB>color`` lines.

    A line with only an id gives colour 0; a line with only a colour stores
    it under id 0.
    """
    colors = {}
    for line in _lines(_decode(text, "gbk")):
        parts = line.split("\t")
        first = parts[0]
        second = parts[1] if len(parts) > 1 else ""
        if first and second:
            colors[_to_int(first)] = _to_int(second)
        else:
            if first:
                colors[_to_int(first)] = 0
            if second:
                colors[0] = _to_int(second)
    return colors


def parse_item_desc(text):
    """List the descriptions of ``item_desc.txt`` in file order.

    The first line is a header; empty lines and lines starting with ``#`` or
    ``/`` are skipped.
    """
    return _quoted_texts(text, "utf-16-le")


def parse_item_ext_desc(text):
    """Map item ids to their extended descriptions (``id "text"`` lines).

    Lines whose id is not a positive number are ignored.
    """
    descriptions = {}
    for line in _lines(_decode(text, "utf-16-le"))[1:]:
        line = line.replace("\0", "")
        if not _is_entry(line):
            continue
        parts = line.split('"')
        item_id = _to_int(parts[0])
        if item_id > 0:
            descriptions[item_id] = parts[1] if len(parts) > 1 else ""
    return descriptions


def parse_item_ext_prop(text):
    """Map addon ids to their property type from ``item_ext_prop.txt``.

    Each ``type: N`` line must be followed by a ``{`` line; the comma
    separated ids up to the closing ``}`` line all get type ``N``.
    """
    addons = {}
    lines = iter(_lines(_decode(text, "gbk")))
    for line in lines:
        if not line.startswith("type:"):
            continue
        prop_type = _to_int(line[5:])
        opening = next(lines, None)
        if opening is None or not opening.startswith("{"):
            continue
        for body in lines:
            if body.startswith("}"):
                break
            for token in body.split(","):
                token = token.strip()
                if token:
                    addons[token] = prop_type
        else:
            raise ValueError(f"unterminated block for type {prop_type}")
    return addons


def parse_fixed_msg(text):
    """List the messages of ``fixed_msg.txt`` in file order.

    The first line is a header; empty lines and lines starting with ``#`` or
    ``/`` are skipped.
    """
    return _quoted_texts(text, "utf-16-le")