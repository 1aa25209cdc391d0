import struct
import zlib

import pytest

from pwkit.entry import PckFileEntry
from pwkit.zlibcodec import DecompressionError


def _v3_record(path, offset, size, compressed_size):
    return (
        path.encode("gb18030").ljust(260, b"\0")
        + struct.pack("<iqii", 0, offset, size, compressed_size)
        + b"\0" * 8
    )


def test_v2_round_trip_compressed():
    entry = PckFileEntry("configs\\item_color.txt", 1234, 500, 200)
    raw = entry.to_bytes(9)
    assert len(raw) < 276
    assert PckFileEntry.from_bytes(raw, 2) == entry


def test_v2_uncompressed_record_is_276_bytes():
    entry = PckFileEntry("surfaces\\ingame\\profession.tga", 7, 8, 9)
    raw = entry.to_bytes(0)
    assert len(raw) == 276
    assert PckFileEntry.from_bytes(raw, 2) == entry


def test_forward_slashes_become_backslashes():
    entry = PckFileEntry("surfaces/iconset/iconlist_skill.dds", 1, 2, 3)
    parsed = PckFileEntry.from_bytes(entry.to_bytes(9), 2)
    assert parsed.path == "surfaces\\iconset\\iconlist_skill.dds"


def test_gb18030_path_round_trip():
    entry = PckFileEntry("configs\\技能.txt", 10, 20, 20)
    assert PckFileEntry.from_bytes(entry.to_bytes(9), 2).path == "configs\\技能.txt"


def test_v2_large_offset_is_unsigned():
    entry = PckFileEntry("a.txt", 3000000000, 1, 1)
    assert PckFileEntry.from_bytes(entry.to_bytes(9), 2).offset == 3000000000


def test_v3_plain_record():
    raw = _v3_record("configs/skillstr.txt", 5000000000, 64, 32)
    entry = PckFileEntry.from_bytes(raw, 3)
    assert entry == PckFileEntry("configs\\skillstr.txt", 5000000000, 64, 32)


def test_v3_compressed_record():
    raw = zlib.compress(_v3_record("configs\\fixed_msg.txt", 42, 100, 50))
    entry = PckFileEntry.from_bytes(raw, 3)
    assert entry == PckFileEntry("configs\\fixed_msg.txt", 42, 100, 50)


def test_short_garbage_record_raises():
    with pytest.raises(DecompressionError):
        PckFileEntry.from_bytes(b"\x01\x02\x03", 2)