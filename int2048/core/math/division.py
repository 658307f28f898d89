"""
Long Division — деление модулей блоками

Делитель выравнивается по старшему краю делимого сдвигом на k = n - m блоков.
Для каждой позиции от k до 0 очередной блок частного подбирается двоичным
поиском по [0, RADIX): наибольшее d, при котором shifted * d <= остаток.
После вычитания делитель сдвигается на один блок к младшему краю.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Перед каждым шагом остаток < shifted * RADIX, поэтому d < RADIX
2. После завершения 0 <= остаток < |v|
3. Частное и остаток неотрицательны; знаковую коррекцию делает BigInt
"""

from typing import Sequence

from int2048.core.math.blocks import (
    RADIX,
    Ordering,
    compare_magnitude,
    normalize,
    shift_blocks,
    sub_magnitude,
)
from int2048.core.math.errors import BigIntZeroDivisionError
from int2048.core.math.multiplication import mul_by_scalar


def estimate_quotient_block(divisor: Sequence[int], remainder: Sequence[int]) -> int:
    """
    Наибольшее d в [0, RADIX) такое, что |divisor| * d <= |remainder|.

    Двоичный поиск: границы включительные, best обновляется только
    на допустимых mid.
    """
    low = 0
    high = RADIX - 1
    best = 0

    while low <= high:
        mid = (low + high) // 2
        product = mul_by_scalar(divisor, mid)
        if compare_magnitude(product, remainder) is not Ordering.GREATER:
            best = mid
            low = mid + 1
        else:
            high = mid - 1

    return best


def divmod_magnitude(
    u: Sequence[int],
    v: Sequence[int],
) -> tuple[list[int], list[int]]:
    """
    Деление модулей с остатком: |u| = q * |v| + r, 0 <= r < |v|.

    Args:
        u: Нормализованные блоки делимого
        v: Нормализованные блоки делителя

    Returns:
        (q, r): нормализованные блоки частного и остатка

    Raises:
        BigIntZeroDivisionError: Если v == 0

    Examples:
        >>> divmod_magnitude([7], [2])
        ([3], [1])
        >>> divmod_magnitude([1], [5])
        ([], [1])
    """
    if not v:
        raise BigIntZeroDivisionError("integer division or modulo by zero")

    if compare_magnitude(u, v) is Ordering.LESS:
        return [], list(u)

    k = len(u) - len(v)
    shifted = shift_blocks(v, k)
    remainder = list(u)
    quotient = [0] * (k + 1)

    for pos in range(k, -1, -1):
        digit = estimate_quotient_block(shifted, remainder)
        if digit:
            remainder = sub_magnitude(remainder, mul_by_scalar(shifted, digit))
        quotient[pos] = digit
        # Младший блок сдвинутого делителя нулевой при pos > 0
        shifted = shifted[1:]

    return normalize(quotient), normalize(remainder)
