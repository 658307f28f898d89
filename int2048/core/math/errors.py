"""
Исключения арифметики int2048

Иерархия построена так, чтобы вызывающий код мог ловить как BigIntError,
так и соответствующее встроенное исключение Python:

- BigIntZeroDivisionError  → ZeroDivisionError
- BigIntParseError         → ValueError
- BlockRangeError          → ValueError
- ScalarRangeError         → ValueError
- MagnitudeOrderError      → AssertionError (нарушение внутреннего предусловия)
"""


class BigIntError(ArithmeticError):
    """Базовый класс ошибок int2048."""

    pass


class BigIntZeroDivisionError(BigIntError, ZeroDivisionError):
    """
    Деление или взятие остатка по нулевому делителю.

    Операция не определена: вместо молчаливого нуля всегда поднимается
    исключение, иначе ошибка незаметно испортит последующие вычисления.
    """

    pass


class BigIntParseError(BigIntError, ValueError):
    """Строка не является десятичным целым (только в strict режиме парсинга)."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid decimal integer literal: {text!r}")


class BlockRangeError(BigIntError, ValueError):
    """Блок цифр вне диапазона [0, RADIX)."""

    pass


class ScalarRangeError(BigIntError, ValueError):
    """Скалярный множитель вне диапазона [0, RADIX)."""

    pass


class MagnitudeOrderError(BigIntError, AssertionError):
    """
    sub_magnitude вызвана с |x| < |y|.

    Это ошибка программирования вызывающей стороны: порядок операндов
    обязан быть установлен через compare_magnitude до вызова.
    """

    pass
