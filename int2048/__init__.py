"""
int2048 — arbitrary-precision signed integers.

Usage example:

    from int2048 import BigInt, parse

    x = parse("999999999999999999")
    assert str(x * x) == "999999999999999998000000000000000001"
    assert BigInt(-7) // 2 == -4 and BigInt(-7) % 2 == 1
"""

from int2048.core.domain import (
    BigInt,
    BigIntSnapshot,
    add,
    compare,
    divide,
    equal,
    format_value,
    from_integer,
    greater_or_equal,
    greater_than,
    less_or_equal,
    less_than,
    modulo,
    multiply,
    negate,
    not_equal,
    parse,
    subtract,
)
from int2048.core.math import (
    RADIX,
    RADIX_DIGITS,
    BigIntError,
    BigIntParseError,
    BigIntZeroDivisionError,
    MultiplicationConfig,
    Ordering,
    ParseConfig,
)

__all__ = [
    "BigInt",
    "BigIntSnapshot",
    "Ordering",
    "ParseConfig",
    "MultiplicationConfig",
    "RADIX",
    "RADIX_DIGITS",
    "BigIntError",
    "BigIntParseError",
    "BigIntZeroDivisionError",
    "parse",
    "format_value",
    "from_integer",
    "negate",
    "add",
    "subtract",
    "multiply",
    "divide",
    "modulo",
    "compare",
    "equal",
    "not_equal",
    "less_than",
    "greater_than",
    "less_or_equal",
    "greater_or_equal",
]

__version__ = "0.1.0"
