"""Keys and signatures of the PCK archive format."""

from dataclasses import dataclass

__all__ = ["PckKey"]


@dataclass(frozen=True)
class PckKey:
    """The XOR keys and signatures that protect a PCK file table."""

    key_1: int = -1466731422
    key_2: int = -240896429
    asig_1: int = -33685778
    asig_2: int = -267534609
    fsig_1: int = 1305093103
    fsig_2: int = 1453361591