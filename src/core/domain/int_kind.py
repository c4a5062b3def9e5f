"""
IntKind — Модель целочисленного типа фиксированной ширины

Python int не ограничен по ширине, поэтому нативные типы (int32, uint32, ...)
моделируются явно: ширина в битах + знаковость.

Используется арифметическим ядром для:
- Проверки, что значение помещается в тип (contains)
- Эмуляции нативного переполнения (wrap, two's complement)
- Выбора поведения abs() для unsigned типов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Диапазон signed: [-2^(bits-1), 2^(bits-1) - 1]
2. Диапазон unsigned: [0, 2^bits - 1]
3. wrap(x) всегда возвращает значение из диапазона типа
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class OverflowPolicy(str, Enum):
    """Поведение при выходе значения за диапазон IntKind"""

    RAISE = "raise"  # IntegerOverflowError
    WRAP = "wrap"  # Нативный wrap-around (two's complement)


# =============================================================================
# INT KIND MODEL
# =============================================================================


class IntKind(BaseModel):
    """
    Целочисленный тип фиксированной ширины.

    Immutable модель (frozen=True), пригодна как ключ словаря.

    Examples:
        >>> UINT8.max_value
        255
        >>> INT8.wrap(128)
        -128
        >>> UINT8.wrap(-1)
        255
    """

    bits: int = Field(..., gt=0, le=128, description="Ширина типа в битах")
    signed: bool = Field(..., description="True для знакового типа")

    model_config = {"frozen": True}

    @property
    def name(self) -> str:
        """Каноническое имя: int32, uint64, ..."""
        return f"{'' if self.signed else 'u'}int{self.bits}"

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Проверка, что value представимо в типе без переполнения."""
        return self.min_value <= value <= self.max_value

    def wrap(self, value: int) -> int:
        """
        Приведение value к типу с нативным wrap-around.

        Unsigned: value mod 2^bits.
        Signed: two's complement интерпретация младших bits бит.
        """
        mask = (1 << self.bits) - 1
        wrapped = value & mask
        if self.signed and wrapped > self.max_value:
            wrapped -= 1 << self.bits
        return wrapped

    def __str__(self) -> str:
        return self.name


# =============================================================================
# ПРЕДОПРЕДЕЛЁННЫЕ ТИПЫ
# =============================================================================

INT8: Final[IntKind] = IntKind(bits=8, signed=True)
UINT8: Final[IntKind] = IntKind(bits=8, signed=False)
INT16: Final[IntKind] = IntKind(bits=16, signed=True)
UINT16: Final[IntKind] = IntKind(bits=16, signed=False)
INT32: Final[IntKind] = IntKind(bits=32, signed=True)
UINT32: Final[IntKind] = IntKind(bits=32, signed=False)
INT64: Final[IntKind] = IntKind(bits=64, signed=True)
UINT64: Final[IntKind] = IntKind(bits=64, signed=False)

INT_KINDS: Final[dict[str, IntKind]] = {
    kind.name: kind
    for kind in (INT8, UINT8, INT16, UINT16, INT32, UINT32, INT64, UINT64)
}


def parse_int_kind(name: str) -> IntKind:
    """
    Поиск IntKind по имени ('int32', 'uint64', ...).

    Raises:
        ValueError: Если имя неизвестно
    """
    key = name.strip().lower()
    if key not in INT_KINDS:
        known = ", ".join(sorted(INT_KINDS))
        raise ValueError(f"Unknown integer kind '{name}', expected one of: {known}")
    return INT_KINDS[key]
