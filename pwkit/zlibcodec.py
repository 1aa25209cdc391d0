"""zlib helpers used by the PCK archive format."""

import zlib

__all__ = ["DecompressionError", "decompress", "compress"]


class DecompressionError(ValueError):
    """Raised when a zlib block cannot be inflated into the expected size."""


def decompress(data, size):
    """Inflate ``data`` into a buffer of exactly ``size`` bytes.

    Output shorter than ``size`` is padded with zero bytes; output that does
    not fit, or input that is not a valid zlib stream, raises
    :class:`DecompressionError`.
    """
    if size < 0:
        raise DecompressionError(f"invalid output size {size}")
    inflater = zlib.decompressobj()
    try:
        out = inflater.decompress(bytes(data), size + 1)
    except zlib.error as exc:
        raise DecompressionError(str(exc)) from exc
    if len(out) > size or inflater.unconsumed_tail:
        raise DecompressionError(f"data inflates to more than {size} bytes")
    if not inflater.eof:
        raise DecompressionError("truncated zlib stream")
    return out.ljust(size, b"\0")


def compress(data, level):
    """Deflate ``data`` at ``level``; return the input unchanged unless shorter."""
    data = bytes(data)
    try:
        packed = zlib.compress(data, level)
    except (zlib.error, ValueError):
        return data
    return packed if len(packed) < len(data) else data