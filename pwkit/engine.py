"""Reading the file table and file contents of PCK archives."""

import os

from .entry import PckFileEntry
from .zlibcodec import decompress

__all__ = ["PckEngine"]


class PckEngine:
    """Reads archives through a :class:`~pwkit.stream.PckStream`."""

    def __init__(self):
        self.version = 0

    def files_count(self, stream):
        """Number of files recorded in the archive trailer."""
        stream.seek(-8, os.SEEK_END)
        return stream.read_int32()

    def read_all_entries(self, stream):
        """Read the file table using the already known :attr:`version`."""
        pointer_offset = -280 if self.version == 3 else -272
        count = self.files_count(stream)
        stream.seek(pointer_offset, os.SEEK_END)
        key = stream.key.key_1
        if self.version == 3:
            table_offset = stream.read_int64() ^ key
        else:
            table_offset = (stream.read_uint32() ^ key) & 0xFFFFFFFF
        stream.seek(table_offset, os.SEEK_SET)
        entries = []
        for _ in range(count):
            entry_size = stream.read_int32() ^ key
            stream.read_int32()
            entries.append(PckFileEntry.from_bytes(stream.read_bytes(entry_size), self.version))
        return entries

    def read_entries(self, stream):
        """Detect the archive version and read its file table."""
        stream.seek(-4, os.SEEK_END)
        self.version = stream.read_int16()
        return self.read_all_entries(stream)

    def read_file(self, stream, entry):
        """Return the contents of ``entry``, inflated when stored compressed."""
        stream.seek(entry.offset, os.SEEK_SET)
        data = stream.read_bytes(entry.compressed_size)
        if entry.compressed_size < entry.size:
            return decompress(data, entry.size)
        return data