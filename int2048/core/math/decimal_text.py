"""
Decimal Text — десятичный парсинг и печать блоков

Парсинг (lenient, совместимый режим по умолчанию):
1. Пропуск ведущих пробельных символов
2. Необязательный знак '+' / '-'
3. Поиск последней десятичной цифры; всё после неё отбрасывается
4. Группировка символов по RADIX_DIGITS от младшего края,
   нецифровые символы внутри диапазона игнорируются
5. Нет ни одной цифры → ноль (не ошибка)

Strict режим: после удаления окружающих пробелов строка обязана иметь вид
[+-]?[0-9]+, иначе BigIntParseError.

Печать: ноль → "0"; иначе знак, старший блок без ведущих нулей, остальные
блоки дополнены нулями до RADIX_DIGITS.
"""

import logging
import re
from dataclasses import dataclass
from typing import Final, Sequence

from int2048.core.math.blocks import RADIX_DIGITS, normalize
from int2048.core.math.errors import BigIntParseError

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Пробельные символы, пропускаемые перед знаком
WHITESPACE: Final[str] = " \t\n\r\v\f"

_STRICT_LITERAL: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ParseConfig:
    """
    Конфигурация парсинга.

    strict=False воспроизводит снисходительное поведение: мусор после
    последней цифры отбрасывается, строка без цифр даёт ноль.
    strict=True превращает любую некорректную строку в BigIntParseError.
    """

    strict: bool = False


DEFAULT_PARSE_CONFIG: Final[ParseConfig] = ParseConfig()


def _is_digit(char: str) -> bool:
    """Только ASCII 0-9."""
    return "0" <= char <= "9"


# =============================================================================
# ПАРСИНГ
# =============================================================================


def parse_decimal(
    text: str,
    config: ParseConfig | None = None,
) -> tuple[bool, list[int]]:
    """
    Разбор десятичной строки в (negative, blocks).

    Args:
        text: Исходная строка
        config: Режим парсинга (default: lenient)

    Returns:
        (negative, blocks): знак и нормализованные блоки; ноль всегда
        возвращается как (False, [])

    Raises:
        TypeError: Если text не str
        BigIntParseError: Только в strict режиме, для некорректной строки

    Examples:
        >>> parse_decimal("-123456")
        (True, [3456, 12])
        >>> parse_decimal("   +007abc")
        (False, [7])
        >>> parse_decimal("abc")
        (False, [])
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    config = config or DEFAULT_PARSE_CONFIG

    if config.strict and _STRICT_LITERAL.fullmatch(text.strip(WHITESPACE)) is None:
        raise BigIntParseError(text)

    return _parse_lenient(text)


def _parse_lenient(text: str) -> tuple[bool, list[int]]:
    size = len(text)
    start = 0
    while start < size and text[start] in WHITESPACE:
        start += 1

    negative = False
    if start < size and text[start] in "+-":
        negative = text[start] == "-"
        start += 1

    end = size - 1
    while end >= start and not _is_digit(text[end]):
        end -= 1

    if end < start:
        if text.strip(WHITESPACE):
            logger.debug("no decimal digits in %r, parsed as zero", text)
        return False, []

    span = text[start : end + 1]
    if end != size - 1 or not span.isascii() or not span.isdigit():
        logger.debug("ignoring non-digit characters in %r", text)

    blocks = []
    for high in range(end, start - 1, -RADIX_DIGITS):
        low = max(high - RADIX_DIGITS + 1, start)
        value = 0
        for char in text[low : high + 1]:
            if _is_digit(char):
                value = value * 10 + (ord(char) - ord("0"))
        blocks.append(value)

    blocks = normalize(blocks)
    return negative and bool(blocks), blocks


# =============================================================================
# ПЕЧАТЬ
# =============================================================================


def format_decimal(negative: bool, blocks: Sequence[int]) -> str:
    """
    Каноническая десятичная запись.

    Examples:
        >>> format_decimal(True, [3456, 12])
        '-123456'
        >>> format_decimal(False, [1, 0, 5])
        '500000001'
        >>> format_decimal(False, [])
        '0'
    """
    if not blocks:
        return "0"

    head = str(blocks[-1])
    tail = "".join(f"{block:0{RADIX_DIGITS}d}" for block in reversed(blocks[:-1]))
    sign = "-" if negative else ""
    return sign + head + tail
