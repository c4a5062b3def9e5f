"""
Modular Inverse Engine — обратный элемент по модулю

Расширенный алгоритм Евклида: находит x такой, что (value * x) mod |modulus| == 1.
Используется для вывода приватной экспоненты d = e^-1 mod Phi(N)
и для отрицательных степеней в mod_pow.

Отсутствие обратного элемента сигнализируется явно:
- try_mod_inverse → InverseResult(has_inverse=False, ...) без исключения
- mod_inverse → NoInverseExists

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Обратный элемент существует ⇔ gcd(|value|, |modulus|) == 1
2. Для value >= 0 результат в [0, |modulus|)
3. Для value < 0 результат — sign-flipped counterpart: -inverse(|value|) в (-|modulus|, 0]
4. O(log(min(|value|, |modulus|))) итераций
"""

from dataclasses import dataclass

from src.core.domain.int_kind import IntKind, OverflowPolicy
from src.core.math.integer_utils import int_abs, narrow, require_int, require_modulus


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NoInverseExists(ArithmeticError):
    """
    Обратный элемент не существует: value и modulus не взаимно просты.

    Ядро не восстанавливается от этой ошибки: она пробрасывается
    вызывающему mod_inverse / mod_pow.
    """

    def __init__(self, value: int, modulus: int, gcd: int):
        self.value = value
        self.modulus = modulus
        self.gcd = gcd
        super().__init__(
            f"No modular inverse of {value} modulo {modulus}: gcd={gcd} != 1"
        )


# =============================================================================
# RESULT TYPE
# =============================================================================


@dataclass(frozen=True)
class InverseResult:
    """Результат поиска обратного элемента."""

    value: int | None
    has_inverse: bool

    # Диагностика
    operand: int
    modulus: int
    gcd: int
    reason: str

    def unwrap(self) -> int:
        """
        Значение обратного элемента.

        Raises:
            NoInverseExists: Если обратного элемента нет
        """
        if not self.has_inverse or self.value is None:
            raise NoInverseExists(self.operand, self.modulus, self.gcd)
        return self.value


# =============================================================================
# EXTENDED EUCLID
# =============================================================================


def try_mod_inverse(
    value: int,
    modulus: int,
    kind: IntKind | None = None,
    policy: OverflowPolicy = OverflowPolicy.RAISE,
) -> InverseResult:
    """
    Обратный элемент по модулю без исключения при его отсутствии.

    Алгоритм (расширенный Евклид по (|modulus|, |value|)):
        a, b = |modulus|, |value|
        y, y1 = 0, 1
        пока b != 0:
            q = a // b
            (a, b) ← (b, a mod b)
            (y, y1) ← (y1, y - y1 * q)
        a != 1 → обратного нет (a == gcd)
        y < 0 → y += |modulus|
        value < 0 → y = -y

    Args:
        value: Элемент, для которого ищется обратный
        modulus: Модуль (не ноль)
        kind: Целочисленный тип результата (None → int без ограничений)
        policy: Поведение при выходе результата за kind

    Returns:
        InverseResult с value (или None) и диагностикой

    Raises:
        ZeroModulusError: Если modulus == 0 (в том числе после wrap-around)
        IntegerOverflowError: Если операнд, |операнд| или результат
            не помещается в kind (RAISE)

    Examples:
        >>> try_mod_inverse(17, 3120).value
        2753
        >>> try_mod_inverse(2, 4).has_inverse
        False
    """
    require_int(value, "value")
    require_modulus(modulus)
    value = narrow(value, kind, policy)
    modulus = require_modulus(narrow(modulus, kind, policy))

    abs_modulus = int_abs(modulus, kind, policy)
    a = abs_modulus
    b = int_abs(value, kind, policy)
    y, y1 = 0, 1

    while b:
        q = a // b
        a, b = b, a % b
        y, y1 = y1, y - y1 * q

    if a != 1:
        return InverseResult(
            value=None,
            has_inverse=False,
            operand=value,
            modulus=modulus,
            gcd=a,
            reason=f"gcd({value}, {modulus}) = {a}, operands are not coprime",
        )

    if y < 0:
        y += abs_modulus
    if value < 0:
        y = -y

    return InverseResult(
        value=narrow(y, kind, policy),
        has_inverse=True,
        operand=value,
        modulus=modulus,
        gcd=1,
        reason="",
    )


def mod_inverse(
    value: int,
    modulus: int,
    kind: IntKind | None = None,
    policy: OverflowPolicy = OverflowPolicy.RAISE,
) -> int:
    """
    Обратный элемент по модулю: (value * x) mod |modulus| == 1.

    Raises:
        NoInverseExists: Если gcd(value, modulus) != 1
        ZeroModulusError: Если modulus == 0

    Examples:
        >>> mod_inverse(17, 3120)
        2753
        >>> mod_inverse(3, 7)
        5
    """
    return try_mod_inverse(value, modulus, kind, policy).unwrap()
