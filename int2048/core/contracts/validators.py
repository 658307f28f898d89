"""
Bigint JSON contract

Payload десятичной записи BigInt:

    {"value": "-123456789", "radix": 10000}

- value: каноническая десятичная запись (без '+', ведущих нулей и "-0")
- radix: необязательное основание блоков, только 10000

Схема schema/bigint.json (Draft 2020-12) читается и проходит meta-валидацию
один раз при импорте модуля.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, List

from jsonschema import Draft202012Validator, ValidationError

BIGINT_SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "bigint.json"


def load_bigint_schema(path: Path = BIGINT_SCHEMA_PATH) -> Dict[str, Any]:
    """
    Чтение схемы bigint с meta-валидацией.

    Raises:
        FileNotFoundError: Если файла схемы нет
        jsonschema.SchemaError: Если схема не является корректной Draft 2020-12
    """
    with path.open(encoding="utf-8") as f:
        schema = json.load(f)
    Draft202012Validator.check_schema(schema)
    return schema


_BIGINT_VALIDATOR: Final[Draft202012Validator] = Draft202012Validator(load_bigint_schema())


def validate_bigint_payload(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Первое найденное нарушение контракта
    """
    _BIGINT_VALIDATOR.validate(data)


def is_bigint_payload(data: Any) -> bool:
    return _BIGINT_VALIDATOR.is_valid(data)


def bigint_payload_errors(data: Any) -> List[str]:
    """
    Все нарушения контракта в виде "<путь>: <сообщение>".

    Examples:
        >>> bigint_payload_errors({"value": "007"})
        ["value: '007' does not match '^(0|-?[1-9][0-9]*)$'"]
        >>> bigint_payload_errors({"value": "7"})
        []
    """
    errors = sorted(_BIGINT_VALIDATOR.iter_errors(data), key=lambda e: list(e.path))
    return [f"{'/'.join(str(p) for p in e.path) or '<root>'}: {e.message}" for e in errors]


__all__ = [
    "BIGINT_SCHEMA_PATH",
    "ValidationError",
    "bigint_payload_errors",
    "is_bigint_payload",
    "load_bigint_schema",
    "validate_bigint_payload",
]
