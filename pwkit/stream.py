"""Random access over a PCK archive and its optional .pkx continuation."""

import os
import struct

from .keys import PckKey

__all__ = ["PckStream"]


def _open_rw(path):
    try:
        return open(path, "r+b")
    except FileNotFoundError:
        return open(path, "w+b")


def _size(handle):
    handle.flush()
    return os.fstat(handle.fileno()).st_size


class PckStream:
    """A byte stream that spans a ``.pck`` file and its ``.pkx`` overflow file."""

    PCK_MAX_SIZE = 2147483392

    def __init__(self, path, key=None):
        self.path = os.fspath(path)
        self.key = key if key is not None else PckKey()
        self.position = 0
        self.max_pck_size = self.PCK_MAX_SIZE
        self._pck = _open_rw(self.path)
        self._pkx = None
        pkx_path = self._pkx_path()
        if pkx_path != self.path and os.path.exists(pkx_path):
            self._pkx = _open_rw(pkx_path)

    def _pkx_path(self):
        return self.path.replace(".pck", ".pkx")

    def seek(self, offset, whence=os.SEEK_SET):
        """Move the logical position and return it."""
        if whence == os.SEEK_SET:
            self.position = offset
        elif whence == os.SEEK_CUR:
            self.position += offset
        elif whence == os.SEEK_END:
            self.position = self.length() + offset
        else:
            raise ValueError(f"invalid whence {whence!r}")
        return self.position

    def length(self):
        """Total size of the ``.pck`` and ``.pkx`` parts."""
        total = _size(self._pck)
        if self._pkx is not None:
            total += _size(self._pkx)
        return total

    def read_bytes(self, count):
        """Read ``count`` bytes, zero-padded where the archive ends early."""
        if count < 0:
            raise ValueError(f"negative read size {count}")
        pck_size = _size(self._pck)
        chunk = b""
        if self.position < pck_size:
            self._pck.seek(self.position)
            chunk = self._pck.read(count)
            if len(chunk) < count and self._pkx is not None:
                self._pkx.seek(0)
                chunk += self._pkx.read(count - len(chunk))
        elif self._pkx is not None:
            self._pkx.seek(self.position - pck_size)
            chunk = self._pkx.read(count)
        self.position += count
        return chunk.ljust(count, b"\0")

    def write_bytes(self, data):
        """Write ``data``, spilling into the ``.pkx`` file past the size limit."""
        data = bytes(data)
        end = self.position + len(data)
        limit = self.max_pck_size
        if end <= limit:
            self._pck.seek(self.position)
            self._pck.write(data)
        else:
            if self._pkx is None:
                pkx_path = self._pkx_path()
                if pkx_path == self.path:
                    raise ValueError(f"no .pkx file can be derived from {self.path!r}")
                self._pkx = _open_rw(pkx_path)
            if self.position >= limit:
                self._pkx.seek(self.position - limit)
                self._pkx.write(data)
            else:
                split = limit - self.position
                self._pck.seek(self.position)
                self._pck.write(data[:split])
                self._pkx.seek(0)
                self._pkx.write(data[split:])
        self.position = end

    def read_int16(self):
        return struct.unpack("<h", self.read_bytes(2))[0]

    def read_uint32(self):
        return struct.unpack("<I", self.read_bytes(4))[0]

    def read_int32(self):
        return struct.unpack("<i", self.read_bytes(4))[0]

    def read_int64(self):
        return struct.unpack("<q", self.read_bytes(8))[0]

    def write_uint32(self, value):
        self.write_bytes(struct.pack("<I", value))

    def write_int32(self, value):
        self.write_bytes(struct.pack("<i", value))

    def write_int16(self, value):
        self.write_bytes(struct.pack("<h", value))

    def close(self):
        """Close both underlying files."""
        self._pck.close()
        if self._pkx is not None:
            self._pkx.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()