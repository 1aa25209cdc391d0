"""Loading of the game resources kept in ``surfaces.pck`` and ``configs.pck``."""

import errno
import os
from dataclasses import dataclass, field

from .configtext import (
    parse_fixed_msg,
    parse_item_color,
    parse_item_desc,
    parse_item_ext_desc,
    parse_item_ext_prop,
)
from .engine import PckEngine
from .iconlists import parse_icon_list
from .stream import PckStream

__all__ = ["GameResources", "load_surfaces", "load_configs"]

SURFACE_IMAGES = {
    "surfaces\\ingame\\profession.tga": "profession",
    "surfaces\\iconset\\iconlist_ivtrm.dds": "ivtrm",
    "surfaces\\iconset\\iconlist_ivtrf.dds": "ivtrf",
    "surfaces\\iconset\\iconlist_skill.dds": "skill",
    "surfaces\\iconset\\iconlist_guild.dds": "guild",
}

SURFACE_ICON_LISTS = {
    "surfaces\\iconset\\iconlist_ivtrm.txt": "ivtrm",
    "surfaces\\iconset\\iconlist_ivtrf.txt": "ivtrf",
    "surfaces\\iconset\\iconlist_skill.txt": "skill",
    "surfaces\\iconset\\iconlist_guild.txt": "guild",
}

CONFIG_TABLES = {
    "configs\\item_color.txt": ("item_colors", parse_item_color),
    "configs\\item_desc.txt": ("item_desc", parse_item_desc),
    "configs\\item_ext_desc.txt": ("item_ext_desc", parse_item_ext_desc),
    "configs\\item_ext_prop.txt": ("addon_types", parse_item_ext_prop),
    "configs\\fixed_msg.txt": ("fixed_msg", parse_fixed_msg),
}


@dataclass
class GameResources:
    """Images, icon indices and text tables read from the client archives."""

    images: dict = field(default_factory=dict)
    icon_lists: dict = field(default_factory=dict)
    item_colors: dict = field(default_factory=dict)
    item_desc: list = field(default_factory=list)
    item_ext_desc: dict = field(default_factory=dict)
    addon_types: dict = field(default_factory=dict)
    fixed_msg: list = field(default_factory=list)


def _archive_files(path, wanted):
    """Yield ``(archive path, contents)`` for every entry named in ``wanted``."""
    path = os.fspath(path)
    if not os.path.isfile(path):
        raise FileNotFoundError(errno.ENOENT, "archive not found", path)
    engine = PckEngine()
    with PckStream(path) as stream:
        for entry in engine.read_entries(stream):
            if entry.path in wanted:
                yield entry.path, engine.read_file(stream, entry)


def load_surfaces(path):
    """Read the icon atlases and their index files from ``surfaces.pck``.

    Atlas images are kept as raw file bytes under ``images``; the parsed
    index files go to ``icon_lists``, both keyed by atlas name.
    """
    resources = GameResources()
    wanted = SURFACE_IMAGES.keys() | SURFACE_ICON_LISTS.keys()
    for name, data in _archive_files(path, wanted):
        if name in SURFACE_IMAGES:
            resources.images[SURFACE_IMAGES[name]] = data
        else:
            resources.icon_lists[SURFACE_ICON_LISTS[name]] = parse_icon_list(data)
    return resources


def load_configs(path):
    """Read the item colour, description, addon and message tables of ``configs.pck``."""
    resources = GameResources()
    for name, data in _archive_files(path, CONFIG_TABLES.keys()):
        attribute, parser = CONFIG_TABLES[name]
        setattr(resources, attribute, parser(data))
    return resources