"""File table entries of a PCK archive."""

import struct
from dataclasses import dataclass

from .zlibcodec import compress, decompress

__all__ = ["PckFileEntry"]

_PATH_SIZE = 260
_V2_SIZE = 276
_V3_SIZE = 288


def _decode_path(raw):
    name = raw.split(b"\0", 1)[0].decode("gb18030", errors="replace")
    return name.replace("/", "\\")


@dataclass
class PckFileEntry:
    """One file of a PCK archive: its path, location and sizes."""

    path: str = ""
    offset: int = 0
    size: int = 0
    compressed_size: int = 0

    @classmethod
    def from_bytes(cls, data, version):
        """Parse a (possibly compressed) file table record."""
        data = bytes(data)
        if version == 3:
            if len(data) < _V3_SIZE:
                data = decompress(data, _V3_SIZE)
            _, offset, size, compressed_size = struct.unpack_from("<iqii", data, _PATH_SIZE)
        else:
            if len(data) < _V2_SIZE:
                data = decompress(data, _V2_SIZE)
            offset, size, compressed_size = struct.unpack_from("<Iii", data, _PATH_SIZE)
        return cls(_decode_path(data[:_PATH_SIZE]), offset, size, compressed_size)

    def to_bytes(self, compression_level):
        """Serialise as a version 2 record, compressed when that is shorter."""
        raw_path = self.path.replace("/", "\\").encode("gb18030")[:_PATH_SIZE]
        body = raw_path.ljust(_PATH_SIZE, b"\0") + struct.pack(
            "<Iiii", self.offset & 0xFFFFFFFF, self.size, self.compressed_size, 0
        )
        packed = compress(body, compression_level)
        return packed if len(packed) < _V2_SIZE else body