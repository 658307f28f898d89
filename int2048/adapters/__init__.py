"""
Adapters between BigInt and external text streams.
"""

from int2048.adapters.streams import iter_bigints, read_bigint, write_bigint

__all__ = [
    "read_bigint",
    "iter_bigints",
    "write_bigint",
]
