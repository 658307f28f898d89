"""
Тесты для модуля Decimal Text

Проверяет:
1. Lenient парсинг: пробелы, знак, ведущие нули, мусор после цифр
2. Группировку по RADIX_DIGITS от младшего края
3. Strict режим и BigIntParseError
4. Печать: ноль, знак, дополнение блоков нулями
"""

import logging

import pytest

from int2048.core.math.decimal_text import (
    DEFAULT_PARSE_CONFIG,
    ParseConfig,
    format_decimal,
    parse_decimal,
)
from int2048.core.math.errors import BigIntError, BigIntParseError

STRICT = ParseConfig(strict=True)


# =============================================================================
# ТЕСТЫ: lenient parse
# =============================================================================


class TestParseLenient:
    """Тесты снисходительного парсинга"""

    def test_default_is_lenient(self) -> None:
        assert DEFAULT_PARSE_CONFIG.strict is False

    def test_plain_number(self) -> None:
        assert parse_decimal("123") == (False, [123])

    def test_grouping_from_least_significant(self) -> None:
        """Блоки по 4 цифры, младший первым"""
        assert parse_decimal("123456789") == (False, [6789, 2345, 1])
        assert parse_decimal("10000") == (False, [0, 1])

    def test_sign(self) -> None:
        assert parse_decimal("-100") == (True, [100])
        assert parse_decimal("+100") == (False, [100])

    def test_leading_whitespace_and_zeros_with_trailing_garbage(self) -> None:
        """'   +007abc' → 7"""
        assert parse_decimal("   +007abc") == (False, [7])

    def test_leading_zeros_trimmed(self) -> None:
        assert parse_decimal("0000000000001") == (False, [1])

    def test_negative_zero_is_zero(self) -> None:
        assert parse_decimal("-0") == (False, [])
        assert parse_decimal("-0000") == (False, [])

    def test_no_digits_is_zero(self) -> None:
        assert parse_decimal("") == (False, [])
        assert parse_decimal("   ") == (False, [])
        assert parse_decimal("-") == (False, [])
        assert parse_decimal("abc") == (False, [])

    def test_whitespace_variants(self) -> None:
        assert parse_decimal("\t\n\r\v\f-42\n") == (True, [42])

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("12a34", (False, [234, 1])),
            ("1 2", (False, [12])),
            ("1a2b3c4d5", (False, [45, 23, 1])),
            ("- 5", (True, [5])),
            ("+-5", (False, [5])),
            ("-+5", (True, [5])),
        ],
    )
    def test_inner_non_digits_skipped_per_window(
        self, text: str, expected: tuple[bool, list[int]]
    ) -> None:
        """Окна по 4 символа считаются от последней цифры, нецифры внутри окна пропускаются"""
        assert parse_decimal(text) == expected

    def test_non_ascii_digits_not_digits(self) -> None:
        """Арабско-индийские цифры не считаются цифрами"""
        assert parse_decimal("١٢") == (False, [])

    def test_discarded_characters_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="int2048.core.math.decimal_text"):
            parse_decimal("12xyz")
        assert "ignoring non-digit characters" in caplog.text

    def test_clean_input_not_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="int2048.core.math.decimal_text"):
            parse_decimal("-12345")
        assert caplog.text == ""

    def test_non_str_rejected(self) -> None:
        with pytest.raises(TypeError, match="text must be str"):
            parse_decimal(123)  # type: ignore[arg-type]


# =============================================================================
# ТЕСТЫ: strict parse
# =============================================================================


class TestParseStrict:
    """Тесты строгого парсинга"""

    def test_valid_literals(self) -> None:
        assert parse_decimal("  -00123  ", STRICT) == (True, [123])
        assert parse_decimal("+5", STRICT) == (False, [5])
        assert parse_decimal("0", STRICT) == (False, [])

    @pytest.mark.parametrize("text", ["   +007abc", "", "   ", "-", "1 2", "12a3", "--1", "0x10"])
    def test_malformed_raises(self, text: str) -> None:
        with pytest.raises(BigIntParseError, match="invalid decimal integer literal"):
            parse_decimal(text, STRICT)

    def test_error_carries_text(self) -> None:
        with pytest.raises(BigIntParseError) as exc_info:
            parse_decimal("abc", STRICT)
        assert exc_info.value.text == "abc"

    def test_error_hierarchy(self) -> None:
        with pytest.raises(ValueError):
            parse_decimal("x", STRICT)
        with pytest.raises(BigIntError):
            parse_decimal("x", STRICT)


# =============================================================================
# ТЕСТЫ: format
# =============================================================================


class TestFormatDecimal:
    """Тесты печати"""

    def test_zero(self) -> None:
        assert format_decimal(False, []) == "0"

    def test_inner_blocks_zero_padded(self) -> None:
        assert format_decimal(False, [1, 0, 5]) == "500000001"
        assert format_decimal(False, [7, 1]) == "10007"

    def test_most_significant_block_not_padded(self) -> None:
        assert format_decimal(False, [42]) == "42"

    def test_negative(self) -> None:
        assert format_decimal(True, [3456, 12]) == "-123456"

    @pytest.mark.parametrize(
        "text,canonical",
        [
            ("0", "0"),
            ("-0", "0"),
            ("+007", "7"),
            ("-000100000000", "-100000000"),
            ("99999999", "99999999"),
            ("  123456789012345678901234567890", "123456789012345678901234567890"),
        ],
    )
    def test_round_trip_canonical(self, text: str, canonical: str) -> None:
        assert format_decimal(*parse_decimal(text)) == canonical
