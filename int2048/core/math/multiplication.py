"""
Multiplication — умножение модулей

- mul_by_scalar: умножение на один блок (используется делением)
- multiply_schoolbook: школьное умножение O(n·m)
- multiply_karatsuba: Карацуба для длинных операндов
- multiply_magnitude: выбор алгоритма по MultiplicationConfig

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Karatsuba и schoolbook дают побитово идентичный результат
2. Результат всегда нормализован, ноль — пустой список
"""

import logging
from dataclasses import dataclass
from typing import Final, Sequence

from int2048.core.math.blocks import (
    RADIX,
    add_magnitude,
    normalize,
    shift_blocks,
    sub_magnitude,
)
from int2048.core.math.errors import ScalarRangeError

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Минимальная длина (в блоках) короткого операнда для перехода на Карацубу
KARATSUBA_THRESHOLD: Final[int] = 48


def _check_threshold(threshold: int) -> None:
    # При пороге 1 разбиение операндов из одного блока не уменьшает задачу
    if threshold < 2:
        raise ValueError(f"karatsuba_threshold must be >= 2, got {threshold}")


@dataclass(frozen=True)
class MultiplicationConfig:
    """Конфигурация умножения."""

    karatsuba_threshold: int = KARATSUBA_THRESHOLD

    def __post_init__(self) -> None:
        _check_threshold(self.karatsuba_threshold)


DEFAULT_MULTIPLICATION_CONFIG: Final[MultiplicationConfig] = MultiplicationConfig()


# =============================================================================
# УМНОЖЕНИЕ НА СКАЛЯР
# =============================================================================


def mul_by_scalar(x: Sequence[int], m: int) -> list[int]:
    """
    |x| * m для одного блока m.

    Args:
        x: Нормализованные блоки
        m: Скаляр в [0, RADIX)

    Returns:
        Нормализованное произведение

    Raises:
        ScalarRangeError: Если m вне [0, RADIX)
    """
    if not 0 <= m < RADIX:
        raise ScalarRangeError(f"scalar must be in [0, {RADIX}), got {m}")

    if not x or m == 0:
        return []

    result = []
    carry = 0
    for block in x:
        current = block * m + carry
        result.append(current % RADIX)
        carry = current // RADIX

    if carry:
        result.append(carry)

    return result


# =============================================================================
# ПОЛНОЕ УМНОЖЕНИЕ
# =============================================================================


def multiply_schoolbook(x: Sequence[int], y: Sequence[int]) -> list[int]:
    """
    Школьное умножение: для каждого блока x[i] добавить y * x[i],
    сдвинутое на i блоков, в буфер длины len(x) + len(y).
    """
    if not x or not y:
        return []

    result = [0] * (len(x) + len(y))

    for i, x_block in enumerate(x):
        if x_block == 0:
            continue
        carry = 0
        for j, y_block in enumerate(y):
            current = result[i + j] + x_block * y_block + carry
            result[i + j] = current % RADIX
            carry = current // RADIX
        k = i + len(y)
        while carry:
            current = result[k] + carry
            result[k] = current % RADIX
            carry = current // RADIX
            k += 1

    return normalize(result)


def multiply_karatsuba(
    x: Sequence[int],
    y: Sequence[int],
    threshold: int = KARATSUBA_THRESHOLD,
) -> list[int]:
    """
    Умножение Карацубы.

    x = x1 * B^h + x0, y = y1 * B^h + y0 (B = RADIX):
        z0 = x0 * y0
        z2 = x1 * y1
        z1 = (x0 + x1)(y0 + y1) - z0 - z2
        x * y = z2 * B^2h + z1 * B^h + z0

    Операнды короче threshold блоков умножаются по-школьному.

    Raises:
        ValueError: Если threshold < 2
    """
    _check_threshold(threshold)

    if min(len(x), len(y)) < threshold:
        return multiply_schoolbook(x, y)

    half = max(len(x), len(y)) // 2

    x0, x1 = normalize(x[:half]), normalize(x[half:])
    y0, y1 = normalize(y[:half]), normalize(y[half:])

    z0 = multiply_karatsuba(x0, y0, threshold)
    z2 = multiply_karatsuba(x1, y1, threshold)
    z1 = multiply_karatsuba(add_magnitude(x0, x1), add_magnitude(y0, y1), threshold)
    z1 = sub_magnitude(sub_magnitude(z1, z0), z2)

    result = add_magnitude(z0, shift_blocks(z1, half))
    return add_magnitude(result, shift_blocks(z2, 2 * half))


def multiply_magnitude(
    x: Sequence[int],
    y: Sequence[int],
    config: MultiplicationConfig | None = None,
) -> list[int]:
    """
    |x| * |y| с выбором алгоритма по длине операндов.

    Args:
        x: Нормализованные блоки
        y: Нормализованные блоки
        config: Конфигурация умножения (default: DEFAULT_MULTIPLICATION_CONFIG)

    Returns:
        Нормализованное произведение
    """
    config = config or DEFAULT_MULTIPLICATION_CONFIG
    threshold = config.karatsuba_threshold

    if min(len(x), len(y)) < threshold:
        return multiply_schoolbook(x, y)

    logger.debug(
        "karatsuba multiply: %d x %d blocks (threshold %d)",
        len(x),
        len(y),
        threshold,
    )
    return multiply_karatsuba(x, y, threshold)
