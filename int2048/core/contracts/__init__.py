"""
Contract Validation Module

Модуль для валидации JSON контракта bigint.
"""

from .validators import (
    BIGINT_SCHEMA_PATH,
    ValidationError,
    bigint_payload_errors,
    is_bigint_payload,
    load_bigint_schema,
    validate_bigint_payload,
)

__all__ = [
    # Schema
    "BIGINT_SCHEMA_PATH",
    "load_bigint_schema",
    # Exceptions
    "ValidationError",
    # Functions
    "bigint_payload_errors",
    "is_bigint_payload",
    "validate_bigint_payload",
]
