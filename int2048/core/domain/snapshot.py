"""
BigIntSnapshot — сериализуемый снапшот блочного представления

Immutable Pydantic модель: основание, знак и блоки (младший первым).
Валидаторы проверяют те же инварианты, что и BigInt:
- radix совпадает с RADIX
- каждый блок в [0, RADIX)
- нет старшего нулевого блока
- ноль не бывает отрицательным
"""

from pydantic import BaseModel, Field, field_validator

from int2048.core.math.blocks import RADIX, validate_blocks


class BigIntSnapshot(BaseModel):
    """Снапшот значения BigInt."""

    radix: int = Field(RADIX, description="Основание блока")
    negative: bool = Field(False, description="Строго отрицательное значение")
    digits: tuple[int, ...] = Field(
        default=(),
        validate_default=True,
        description="Блоки модуля, младший первым",
    )

    model_config = {"frozen": True}

    @field_validator("radix")
    @classmethod
    def validate_radix(cls, v: int) -> int:
        """Снапшот с другим основанием нельзя интерпретировать"""
        if v != RADIX:
            raise ValueError(f"radix must be {RADIX}, got {v}")
        return v

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: tuple[int, ...], info) -> tuple[int, ...]:
        """Проверка диапазона блоков, нормализации и знака нуля"""
        validate_blocks(v)
        if v and v[-1] == 0:
            raise ValueError("digits must not end with a zero block")
        if not v and info.data.get("negative"):
            raise ValueError("zero cannot be negative")
        return v
