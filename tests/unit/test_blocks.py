"""
Тесты для модуля Digit Blocks

Проверяет:
1. Нормализацию (старшие нулевые блоки)
2. Валидацию диапазона блоков
3. Сравнение модулей
4. Сложение с переносом и вычитание с заёмом
5. Предусловие sub_magnitude
6. Конверсии int ↔ блоки
"""

import pytest

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
from int2048.core.math.errors import (
    BigIntError,
    BlockRangeError,
    MagnitudeOrderError,
)

# =============================================================================
# ТЕСТЫ ПАРАМЕТРОВ И НОРМАЛИЗАЦИИ
# =============================================================================


class TestRadix:
    """Тесты констант представления"""

    def test_radix_is_power_of_ten(self) -> None:
        """RADIX совпадает с 10 ** RADIX_DIGITS"""
        assert RADIX == 10**RADIX_DIGITS
        assert RADIX == 10000


class TestNormalize:
    """Тесты для normalize"""

    def test_strips_trailing_zero_blocks(self) -> None:
        """Старшие нулевые блоки удаляются"""
        assert normalize([5, 0, 0]) == [5]
        assert normalize([0, 7, 0]) == [0, 7]

    def test_all_zero_becomes_empty(self) -> None:
        """Ноль — пустая последовательность"""
        assert normalize([0, 0, 0]) == []
        assert normalize([]) == []

    def test_does_not_mutate_argument(self) -> None:
        """Аргумент не изменяется"""
        blocks = [1, 0, 0]
        normalize(blocks)
        assert blocks == [1, 0, 0]

    def test_accepts_tuple(self) -> None:
        assert normalize((3, 0)) == [3]


class TestValidateBlocks:
    """Тесты для validate_blocks"""

    def test_valid_blocks_pass(self) -> None:
        validate_blocks([0, 1, RADIX - 1])
        validate_blocks([])

    def test_block_equal_to_radix_rejected(self) -> None:
        with pytest.raises(BlockRangeError, match="must be in"):
            validate_blocks([1, RADIX])

    def test_negative_block_rejected(self) -> None:
        with pytest.raises(BlockRangeError, match="block 0"):
            validate_blocks([-1])

    def test_non_int_block_rejected(self) -> None:
        """float и bool не являются блоками"""
        with pytest.raises(BlockRangeError, match="must be an int"):
            validate_blocks([1.0])
        with pytest.raises(BlockRangeError, match="must be an int"):
            validate_blocks([True])

    def test_error_hierarchy(self) -> None:
        """BlockRangeError ловится и как ValueError, и как BigIntError"""
        with pytest.raises(ValueError):
            validate_blocks([RADIX])
        with pytest.raises(BigIntError):
            validate_blocks([RADIX])


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ
# =============================================================================


class TestCompareMagnitude:
    """Тесты для compare_magnitude"""

    def test_longer_is_greater(self) -> None:
        """Более длинная нормализованная последовательность больше"""
        assert compare_magnitude([0, 1], [RADIX - 1]) is Ordering.GREATER
        assert compare_magnitude([RADIX - 1], [0, 1]) is Ordering.LESS

    def test_most_significant_difference_decides(self) -> None:
        assert compare_magnitude([9999, 1], [0, 2]) is Ordering.LESS
        assert compare_magnitude([0, 2], [9999, 1]) is Ordering.GREATER

    def test_equal(self) -> None:
        assert compare_magnitude([1, 2, 3], [1, 2, 3]) is Ordering.EQUAL
        assert compare_magnitude([], []) is Ordering.EQUAL

    def test_zero_is_smallest(self) -> None:
        assert compare_magnitude([], [1]) is Ordering.LESS


# =============================================================================
# ТЕСТЫ СЛОЖЕНИЯ И ВЫЧИТАНИЯ
# =============================================================================


class TestAddMagnitude:
    """Тесты для add_magnitude"""

    def test_simple_sum(self) -> None:
        assert add_magnitude([123], [456]) == [579]

    def test_carry_propagates_into_new_block(self) -> None:
        """9999 + 1 = 1_0000"""
        assert add_magnitude([RADIX - 1], [1]) == [0, 1]

    def test_carry_chain(self) -> None:
        """9999_9999_9999 + 1 = 1_0000_0000_0000"""
        assert add_magnitude([9999, 9999, 9999], [1]) == [0, 0, 0, 1]

    def test_different_lengths(self) -> None:
        assert add_magnitude([1], [0, 0, 5]) == [1, 0, 5]
        assert add_magnitude([0, 0, 5], [1]) == [1, 0, 5]

    def test_zero_identity(self) -> None:
        assert add_magnitude([], [4, 2]) == [4, 2]
        assert add_magnitude([], []) == []

    def test_arguments_not_mutated(self) -> None:
        x, y = [9999], [1]
        add_magnitude(x, y)
        assert x == [9999] and y == [1]


class TestSubMagnitude:
    """Тесты для sub_magnitude"""

    def test_simple_difference(self) -> None:
        assert sub_magnitude([579], [456]) == [123]

    def test_borrow_across_blocks(self) -> None:
        """1_0000 - 1 = 9999"""
        assert sub_magnitude([0, 1], [1]) == [RADIX - 1]

    def test_borrow_chain_and_trim(self) -> None:
        """1_0000_0000_0000 - 1 = 9999_9999_9999"""
        assert sub_magnitude([0, 0, 0, 1], [1]) == [9999, 9999, 9999]

    def test_equal_gives_zero(self) -> None:
        assert sub_magnitude([1, 2, 3], [1, 2, 3]) == []

    def test_smaller_first_raises(self) -> None:
        """Нарушение предусловия |x| >= |y| не вычисляется молча"""
        with pytest.raises(MagnitudeOrderError, match="requires"):
            sub_magnitude([1], [2])
        with pytest.raises(AssertionError):
            sub_magnitude([5], [0, 1])


# =============================================================================
# ТЕСТЫ КОНВЕРСИЙ
# =============================================================================


class TestIntConversions:
    """Тесты blocks_from_int / int_from_blocks / shift_blocks"""

    def test_blocks_from_int(self) -> None:
        assert blocks_from_int(0) == []
        assert blocks_from_int(123456789) == [6789, 2345, 1]
        assert blocks_from_int(-10000) == [0, 1]

    def test_int_from_blocks(self) -> None:
        assert int_from_blocks([6789, 2345, 1]) == 123456789
        assert int_from_blocks([]) == 0

    def test_shift_blocks(self) -> None:
        """Сдвиг умножает на RADIX ** count"""
        assert shift_blocks([7], 2) == [0, 0, 7]
        assert shift_blocks([7], 0) == [7]
        assert shift_blocks([], 3) == []
