"""
Stream adapters — чтение и запись BigInt в текстовые потоки

Тонкий слой над parse/format_value:
- read_bigint: следующий токен, разделённый пробельными символами
- iter_bigints: все токены потока
- write_bigint: каноническая десятичная запись
"""

from typing import Iterator, TextIO

from int2048.core.domain.bigint import BigInt, format_value, parse
from int2048.core.math.decimal_text import ParseConfig


def _next_token(stream: TextIO) -> str | None:
    chars = []
    while True:
        char = stream.read(1)
        if not char:
            break
        if char.isspace():
            if chars:
                break
            continue
        chars.append(char)
    return "".join(chars) if chars else None


def read_bigint(stream: TextIO, config: ParseConfig | None = None) -> BigInt:
    """
    Чтение следующего BigInt из текстового потока.

    Args:
        stream: Текстовый поток
        config: Режим парсинга токена (default: lenient)

    Returns:
        Разобранное значение

    Raises:
        EOFError: Если в потоке не осталось токенов
    """
    token = _next_token(stream)
    if token is None:
        raise EOFError("no integer token left in stream")
    return parse(token, config)


def iter_bigints(stream: TextIO, config: ParseConfig | None = None) -> Iterator[BigInt]:
    """Все BigInt потока до его конца."""
    while True:
        token = _next_token(stream)
        if token is None:
            return
        yield parse(token, config)


def write_bigint(stream: TextIO, value: BigInt) -> int:
    """Запись value в поток; возвращает число записанных символов."""
    return stream.write(format_value(value))
