"""
Core math modules для int2048

Алгоритмы над модулями чисел в блочном представлении.
Знак здесь не обрабатывается: этим занимается BigInt.
"""

# Errors
from int2048.core.math.errors import (
    BigIntError,
    BigIntParseError,
    BigIntZeroDivisionError,
    BlockRangeError,
    MagnitudeOrderError,
    ScalarRangeError,
)

# Digit blocks
from int2048.core.math.blocks import (
    RADIX,
    RADIX_DIGITS,
    Ordering,
    add_magnitude,
    blocks_from_int,
    compare_magnitude,
    int_from_blocks,
    normalize,
    shift_blocks,
    sub_magnitude,
    validate_blocks,
)

# Multiplication
from int2048.core.math.multiplication import (
    DEFAULT_MULTIPLICATION_CONFIG,
    KARATSUBA_THRESHOLD,
    MultiplicationConfig,
    mul_by_scalar,
    multiply_karatsuba,
    multiply_magnitude,
    multiply_schoolbook,
)

# Division
from int2048.core.math.division import (
    divmod_magnitude,
    estimate_quotient_block,
)

# Decimal text
from int2048.core.math.decimal_text import (
    DEFAULT_PARSE_CONFIG,
    ParseConfig,
    format_decimal,
    parse_decimal,
)

__all__ = [
    # Errors
    "BigIntError",
    "BigIntParseError",
    "BigIntZeroDivisionError",
    "BlockRangeError",
    "MagnitudeOrderError",
    "ScalarRangeError",
    # Digit blocks: Constants
    "RADIX",
    "RADIX_DIGITS",
    # Digit blocks: Types
    "Ordering",
    # Digit blocks: Functions
    "add_magnitude",
    "blocks_from_int",
    "compare_magnitude",
    "int_from_blocks",
    "normalize",
    "shift_blocks",
    "sub_magnitude",
    "validate_blocks",
    # Multiplication
    "DEFAULT_MULTIPLICATION_CONFIG",
    "KARATSUBA_THRESHOLD",
    "MultiplicationConfig",
    "mul_by_scalar",
    "multiply_karatsuba",
    "multiply_magnitude",
    "multiply_schoolbook",
    # Division
    "divmod_magnitude",
    "estimate_quotient_block",
    # Decimal text
    "DEFAULT_PARSE_CONFIG",
    "ParseConfig",
    "format_decimal",
    "parse_decimal",
]
