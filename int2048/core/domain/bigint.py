"""
BigInt — целое произвольной точности со знаком

Значение — пара (negative, digits): знак и нормализованные блоки модуля
по основанию RADIX, младший блок первым.

Операции:
- Конструирование из str (десятичный парсинг), int и блоков
- Сложение/вычитание со знаком (сведение к add_magnitude/sub_magnitude)
- Умножение (schoolbook / Karatsuba)
- Деление с округлением к минус бесконечности (floor), остаток со знаком делителя
- Полный порядок и равенство, совместимые с int

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нет старших нулевых блоков; ноль — пустая последовательность
2. Ноль никогда не отрицательный
3. Каждый блок в [0, RADIX)
4. Значение неизменяемо: каждая операция возвращает новый BigInt,
   поэтому x //= x и подобные присваивания безопасны
5. x == (x // y) * y + x % y, 0 <= |x % y| < |y|, знак x % y совпадает со знаком y
"""

from typing import Any, Dict, Sequence, Union

from int2048.core.contracts.validators import validate_bigint_payload
from int2048.core.domain.snapshot import BigIntSnapshot
from int2048.core.math.blocks import (
    RADIX,
    Ordering,
    add_magnitude,
    blocks_from_int,
    compare_magnitude,
    int_from_blocks,
    normalize,
    sub_magnitude,
    validate_blocks,
)
from int2048.core.math.decimal_text import ParseConfig, format_decimal, parse_decimal
from int2048.core.math.division import divmod_magnitude
from int2048.core.math.multiplication import MultiplicationConfig, multiply_magnitude

# Допустимые операнды арифметики и сравнений
Operand = Union["BigInt", int]


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# BIGINT
# =============================================================================


class BigInt:
    """
    Целое произвольной точности.

    Examples:
        >>> BigInt("123") + BigInt("456")
        BigInt('579')
        >>> BigInt(-7) // 2, BigInt(-7) % 2
        (BigInt('-4'), BigInt('1'))
    """

    __slots__ = ("_digits", "_negative")

    _digits: tuple[int, ...]
    _negative: bool

    def __init__(
        self,
        value: "BigInt | int | str" = 0,
        config: ParseConfig | None = None,
    ) -> None:
        """
        Args:
            value: BigInt (копия), int или десятичная строка
            config: Режим парсинга для строк (default: lenient)

        Raises:
            TypeError: Для bool и других типов
            BigIntParseError: Некорректная строка в strict режиме
            AttributeError: При повторном вызове __init__ на готовом значении
        """
        if hasattr(self, "_digits"):
            raise AttributeError("BigInt is immutable")

        if isinstance(value, BigInt):
            negative, blocks = value._negative, list(value._digits)
        elif isinstance(value, str):
            negative, blocks = parse_decimal(value, config)
        elif _is_plain_int(value):
            negative, blocks = value < 0, blocks_from_int(value)
        else:
            raise TypeError(
                f"BigInt() argument must be BigInt, int or str, got {type(value).__name__}"
            )
        self._assign(blocks, negative)

    def _assign(self, blocks: Sequence[int], negative: bool) -> None:
        digits = tuple(normalize(blocks))
        self._digits = digits
        self._negative = negative and bool(digits)

    @classmethod
    def _from_magnitude(cls, blocks: Sequence[int], negative: bool) -> "BigInt":
        """Новое значение из готовых блоков без повторного парсинга."""
        result = cls.__new__(cls)
        result._assign(blocks, negative)
        return result

    @classmethod
    def from_integer(cls, value: int) -> "BigInt":
        """Конструирование из Python int."""
        if not _is_plain_int(value):
            raise TypeError(f"expected int, got {type(value).__name__}")
        return cls._from_magnitude(blocks_from_int(value), value < 0)

    @classmethod
    def from_blocks(cls, blocks: Sequence[int], negative: bool = False) -> "BigInt":
        """
        Конструирование из блоков (младший первым).

        Старшие нулевые блоки отбрасываются, знак нуля сбрасывается.

        Raises:
            BlockRangeError: Если блок вне [0, RADIX)
        """
        validate_blocks(blocks)
        return cls._from_magnitude(blocks, negative)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def digits(self) -> tuple[int, ...]:
        """Блоки модуля, младший первым."""
        return self._digits

    @property
    def negative(self) -> bool:
        return self._negative

    @property
    def is_zero(self) -> bool:
        return not self._digits

    def __bool__(self) -> bool:
        return not self.is_zero

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        magnitude = int_from_blocks(self._digits)
        return -magnitude if self._negative else magnitude

    __index__ = __int__

    def __str__(self) -> str:
        return format_decimal(self._negative, self._digits)

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __hash__(self) -> int:
        return hash(int(self))

    def to_snapshot(self) -> BigIntSnapshot:
        return BigIntSnapshot(radix=RADIX, negative=self._negative, digits=self._digits)

    @classmethod
    def from_snapshot(cls, snapshot: BigIntSnapshot) -> "BigInt":
        return cls._from_magnitude(snapshot.digits, snapshot.negative)

    def to_payload(self) -> Dict[str, Any]:
        """JSON payload по контракту bigint."""
        return {"value": str(self), "radix": RADIX}

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "BigInt":
        """
        Конструирование из JSON payload.

        Raises:
            ValidationError: Если payload не соответствует контракту bigint
        """
        validate_bigint_payload(data)
        return cls(data["value"], ParseConfig(strict=True))

    # -------------------------------------------------------------------------
    # Приведение операндов
    # -------------------------------------------------------------------------

    @classmethod
    def _coerce(cls, other: Any) -> "BigInt | None":
        if isinstance(other, BigInt):
            return other
        if _is_plain_int(other):
            return cls.from_integer(other)
        return None

    @classmethod
    def _require(cls, other: Any, operation: str) -> "BigInt":
        coerced = cls._coerce(other)
        if coerced is None:
            raise TypeError(
                f"unsupported operand for {operation}: {type(other).__name__}"
            )
        return coerced

    # -------------------------------------------------------------------------
    # Сложение и вычитание
    # -------------------------------------------------------------------------

    def negate(self) -> "BigInt":
        return BigInt._from_magnitude(self._digits, not self._negative)

    def _add_signed(self, other_digits: Sequence[int], other_negative: bool) -> "BigInt":
        if self._negative == other_negative:
            return BigInt._from_magnitude(
                add_magnitude(self._digits, other_digits), self._negative
            )

        order = compare_magnitude(self._digits, other_digits)
        if order is Ordering.EQUAL:
            return BigInt()
        if order is Ordering.GREATER:
            return BigInt._from_magnitude(
                sub_magnitude(self._digits, other_digits), self._negative
            )
        return BigInt._from_magnitude(
            sub_magnitude(other_digits, self._digits), other_negative
        )

    def add(self, other: Operand) -> "BigInt":
        other = self._require(other, "add")
        return self._add_signed(other._digits, other._negative)

    def subtract(self, other: Operand) -> "BigInt":
        other = self._require(other, "subtract")
        # Смена знака нуля даёт ноль
        flipped = not other._negative if other._digits else False
        return self._add_signed(other._digits, flipped)

    # -------------------------------------------------------------------------
    # Умножение
    # -------------------------------------------------------------------------

    def multiply(
        self,
        other: Operand,
        config: MultiplicationConfig | None = None,
    ) -> "BigInt":
        other = self._require(other, "multiply")
        product = multiply_magnitude(self._digits, other._digits, config)
        return BigInt._from_magnitude(product, self._negative != other._negative)

    # -------------------------------------------------------------------------
    # Деление
    # -------------------------------------------------------------------------

    def divide(self, other: Operand) -> "BigInt":
        """
        Частное с округлением к минус бесконечности.

        Модули делятся divmod_magnitude; при разных знаках и ненулевом
        остатке модуль частного увеличивается на 1.

        Raises:
            BigIntZeroDivisionError: Если other == 0
        """
        other = self._require(other, "divide")
        quotient, remainder = divmod_magnitude(self._digits, other._digits)
        quotient_negative = self._negative != other._negative
        if quotient_negative and remainder:
            quotient = add_magnitude(quotient, [1])
        return BigInt._from_magnitude(quotient, quotient_negative)

    def modulo(self, other: Operand) -> "BigInt":
        """
        Остаток floor-деления: x - (x // y) * y.

        Raises:
            BigIntZeroDivisionError: Если other == 0
        """
        return self.divmod(other)[1]

    def divmod(self, other: Operand) -> tuple["BigInt", "BigInt"]:
        other = self._require(other, "divmod")
        quotient = self.divide(other)
        return quotient, self.subtract(quotient.multiply(other))

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: Operand) -> Ordering:
        """
        Полный порядок: разные знаки решают сразу, одинаковые —
        сравнение модулей (инвертированное для двух отрицательных).
        """
        other = self._require(other, "compare")
        if self._negative != other._negative:
            return Ordering.LESS if self._negative else Ordering.GREATER
        order = compare_magnitude(self._digits, other._digits)
        return Ordering(-order) if self._negative else order

    def __eq__(self, other: object) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._negative == other._negative and self._digits == other._digits

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: Operand) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: Operand) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: Operand) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: Operand) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) is not Ordering.LESS

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __pos__(self) -> "BigInt":
        return self

    def __neg__(self) -> "BigInt":
        return self.negate()

    def __abs__(self) -> "BigInt":
        return BigInt._from_magnitude(self._digits, False)

    def __add__(self, other: Operand) -> "BigInt":
        other = self._coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other: Operand) -> "BigInt":
        other = self._coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other: Operand) -> "BigInt":
        other = self._coerce(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other: Operand) -> "BigInt":
        other = self._coerce(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other: Operand) -> "BigInt":
        other = self._coerce(other)
        return NotImplemented if other is None else self.multiply(other)

    def __rmul__(self, other: Operand) -> "BigInt":
        other = self._coerce(other)
        return NotImplemented if other is None else other.multiply(self)

    def __floordiv__(self, other: Operand) -> "BigInt":
        other = self._coerce(other)
        return NotImplemented if other is None else self.divide(other)

    def __rfloordiv__(self, other: Operand) -> "BigInt":
        other = self._coerce(other)
        return NotImplemented if other is None else other.divide(self)

    def __mod__(self, other: Operand) -> "BigInt":
        other = self._coerce(other)
        return NotImplemented if other is None else self.modulo(other)

    def __rmod__(self, other: Operand) -> "BigInt":
        other = self._coerce(other)
        return NotImplemented if other is None else other.modulo(self)

    def __divmod__(self, other: Operand) -> tuple["BigInt", "BigInt"]:
        other = self._coerce(other)
        return NotImplemented if other is None else self.divmod(other)

    def __rdivmod__(self, other: Operand) -> tuple["BigInt", "BigInt"]:
        other = self._coerce(other)
        return NotImplemented if other is None else other.divmod(self)


# =============================================================================
# ФУНКЦИОНАЛЬНЫЙ ИНТЕРФЕЙС
# =============================================================================


def parse(text: str, config: ParseConfig | None = None) -> BigInt:
    """
    Десятичная строка → BigInt.

    Raises:
        TypeError: Если text не str
        BigIntParseError: Некорректная строка в strict режиме
    """
    negative, blocks = parse_decimal(text, config)
    return BigInt._from_magnitude(blocks, negative)


def format_value(value: BigInt) -> str:
    """BigInt → каноническая десятичная строка."""
    return str(value)


def from_integer(value: int) -> BigInt:
    return BigInt.from_integer(value)


def negate(x: BigInt) -> BigInt:
    return x.negate()


def add(x: BigInt, y: Operand) -> BigInt:
    return x.add(y)


def subtract(x: BigInt, y: Operand) -> BigInt:
    return x.subtract(y)


def multiply(x: BigInt, y: Operand) -> BigInt:
    return x.multiply(y)


def divide(x: BigInt, y: Operand) -> BigInt:
    return x.divide(y)


def modulo(x: BigInt, y: Operand) -> BigInt:
    return x.modulo(y)


def compare(x: BigInt, y: Operand) -> Ordering:
    return x.compare(y)


def equal(x: BigInt, y: Operand) -> bool:
    return x.compare(y) is Ordering.EQUAL


def not_equal(x: BigInt, y: Operand) -> bool:
    return x.compare(y) is not Ordering.EQUAL


def less_than(x: BigInt, y: Operand) -> bool:
    return x.compare(y) is Ordering.LESS


def greater_than(x: BigInt, y: Operand) -> bool:
    return x.compare(y) is Ordering.GREATER


def less_or_equal(x: BigInt, y: Operand) -> bool:
    return x.compare(y) is not Ordering.GREATER


def greater_or_equal(x: BigInt, y: Operand) -> bool:
    return x.compare(y) is not Ordering.LESS
