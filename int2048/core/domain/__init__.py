"""
Domain models and value objects.

Contains the BigInt value type, its functional interface and the
serializable snapshot model.
"""

from int2048.core.domain.bigint import (
    BigInt,
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
from int2048.core.domain.snapshot import BigIntSnapshot

__all__ = [
    # Value type
    "BigInt",
    "BigIntSnapshot",
    # Text
    "parse",
    "format_value",
    "from_integer",
    # Arithmetic
    "negate",
    "add",
    "subtract",
    "multiply",
    "divide",
    "modulo",
    # Comparison
    "compare",
    "equal",
    "not_equal",
    "less_than",
    "greater_than",
    "less_or_equal",
    "greater_or_equal",
]
