"""
Digit Blocks — блочное представление модуля целого числа

Модуль (magnitude) числа хранится как последовательность блоков по основанию
RADIX, младший блок первым. Пустая последовательность представляет ноль.

Операции этого модуля работают только с модулями (без знака):
- Нормализация (удаление старших нулевых блоков)
- Сравнение модулей
- Сложение с переносом, вычитание с заёмом
- Сдвиг на целое число блоков

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После normalize() старший блок (если есть) ненулевой
2. Каждый блок лежит в [0, RADIX)
3. Функции всегда строят новый список и никогда не мутируют аргументы
4. sub_magnitude требует |x| >= |y|; нарушение поднимает MagnitudeOrderError
"""

from enum import IntEnum
from typing import Final, Sequence

from int2048.core.math.errors import BlockRangeError, MagnitudeOrderError

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание одного блока: степень десяти, чтобы печать не требовала деления
RADIX: Final[int] = 10000

# Количество десятичных цифр в одном блоке (RADIX == 10 ** RADIX_DIGITS)
RADIX_DIGITS: Final[int] = 4


# =============================================================================
# ORDERING
# =============================================================================


class Ordering(IntEnum):
    """Результат трёхзначного сравнения."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# НОРМАЛИЗАЦИЯ И ВАЛИДАЦИЯ
# =============================================================================


def normalize(blocks: Sequence[int]) -> list[int]:
    """
    Удаление старших нулевых блоков.

    Args:
        blocks: Блоки, младший первым

    Returns:
        Новый список без старших нулевых блоков ([] для нуля)

    Examples:
        >>> normalize([5, 0, 0])
        [5]
        >>> normalize([0, 0])
        []
    """
    result = list(blocks)
    while result and result[-1] == 0:
        result.pop()
    return result


def validate_blocks(blocks: Sequence[int]) -> None:
    """
    Проверка, что каждый блок — int в диапазоне [0, RADIX).

    Raises:
        BlockRangeError: Если блок не int или вне диапазона
    """
    for index, block in enumerate(blocks):
        if isinstance(block, bool) or not isinstance(block, int):
            raise BlockRangeError(
                f"block {index} must be an int, got {type(block).__name__}"
            )
        if not 0 <= block < RADIX:
            raise BlockRangeError(
                f"block {index} must be in [0, {RADIX}), got {block}"
            )


def blocks_from_int(value: int) -> list[int]:
    """Блоки модуля Python int (знак отбрасывается)."""
    value = abs(value)
    blocks = []
    while value:
        value, block = divmod(value, RADIX)
        blocks.append(block)
    return blocks


def int_from_blocks(blocks: Sequence[int]) -> int:
    """Модуль как Python int."""
    value = 0
    for block in reversed(blocks):
        value = value * RADIX + block
    return value


def shift_blocks(blocks: Sequence[int], count: int) -> list[int]:
    """
    Умножение модуля на RADIX ** count (дописывание count нулевых младших блоков).

    Ноль остаётся нулём: нулевые блоки к пустой последовательности не добавляются.
    """
    if not blocks:
        return []
    return [0] * count + list(blocks)


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def compare_magnitude(x: Sequence[int], y: Sequence[int]) -> Ordering:
    """
    Сравнение модулей двух нормализованных последовательностей блоков.

    Сначала сравнивается длина (нормализация гарантирует ненулевой старший
    блок, поэтому более длинная последовательность больше), затем блоки
    от старшего к младшему.

    Args:
        x: Нормализованные блоки
        y: Нормализованные блоки

    Returns:
        Ordering.LESS / EQUAL / GREATER для |x| относительно |y|
    """
    if len(x) != len(y):
        return Ordering.LESS if len(x) < len(y) else Ordering.GREATER

    for i in range(len(x) - 1, -1, -1):
        if x[i] != y[i]:
            return Ordering.LESS if x[i] < y[i] else Ordering.GREATER

    return Ordering.EQUAL


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ МОДУЛЕЙ
# =============================================================================


def add_magnitude(x: Sequence[int], y: Sequence[int]) -> list[int]:
    """
    |x| + |y| поблочно с переносом.

    Перенос не превышает 1, аккумулятор не превышает 2 * (RADIX - 1) + 1.
    Результат всегда без знака: знак назначает вызывающая сторона.
    """
    size = max(len(x), len(y))
    result = [0] * size
    carry = 0

    for i in range(size):
        current = carry
        if i < len(x):
            current += x[i]
        if i < len(y):
            current += y[i]
        result[i] = current % RADIX
        carry = current // RADIX

    if carry:
        result.append(carry)

    return normalize(result)


def sub_magnitude(x: Sequence[int], y: Sequence[int]) -> list[int]:
    """
    |x| - |y| поблочно с заёмом.

    Args:
        x: Уменьшаемое, |x| >= |y|
        y: Вычитаемое

    Returns:
        Нормализованная разность ([] при |x| == |y|)

    Raises:
        MagnitudeOrderError: Если |x| < |y|
    """
    if compare_magnitude(x, y) is Ordering.LESS:
        raise MagnitudeOrderError(
            f"sub_magnitude requires |x| >= |y| (got {len(x)} vs {len(y)} blocks)"
        )

    result = [0] * len(x)
    borrow = 0

    for i in range(len(x)):
        current = x[i] - borrow - (y[i] if i < len(y) else 0)
        if current < 0:
            current += RADIX
            borrow = 1
        else:
            borrow = 0
        result[i] = current

    return normalize(result)
