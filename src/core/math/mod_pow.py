"""
Modular Exponentiation Engine — возведение в степень по модулю

Square-and-multiply: биты экспоненты обрабатываются от младшего к старшему,
основание возводится в квадрат, аккумулятор домножается на нечётных битах.

Отрицательная экспонента: сначала обратный элемент основания, затем степень |exponent|.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. exponent == 0 → 1 (независимо от основания, включая 0)
2. modulus == 0 → ZeroModulusError (предусловие, не обрабатывается)
3. exponent < 0 без обратного элемента → NoInverseExists пробрасывается
4. Каждое произведение сразу редуцируется по модулю
5. Переполнение промежуточного произведения в kind:
   RAISE → IntegerOverflowError, WRAP → нативный wrap-around до редукции
6. Операнды приводятся к kind до вычислений (narrow)

ФОРМУЛЫ:
    mod_pow(b, n, m)  = b^n mod m
    mod_pow(b, -n, m) = (b^-1 mod m)^n mod m
"""

from src.core.domain.int_kind import IntKind, OverflowPolicy
from src.core.math.integer_utils import int_abs, is_even, narrow, require_int, require_modulus
from src.core.math.mod_inverse import mod_inverse


def mod_mul(
    a: int,
    b: int,
    modulus: int,
    kind: IntKind | None = None,
    policy: OverflowPolicy = OverflowPolicy.RAISE,
) -> int:
    """
    Умножение по модулю: (a * b) mod modulus.

    Произведение приводится к kind ДО редукции, как в нативной арифметике
    фиксированной ширины.

    Raises:
        ZeroModulusError: Если modulus == 0
        IntegerOverflowError: Если a * b не помещается в kind (RAISE)

    Examples:
        >>> mod_mul(7, 8, 5)
        1
    """
    require_modulus(modulus)
    product = narrow(a * b, kind, policy)
    return product % modulus


def mod_pow(
    base: int,
    exponent: int,
    modulus: int,
    kind: IntKind | None = None,
    policy: OverflowPolicy = OverflowPolicy.RAISE,
) -> int:
    """
    Возведение в степень по модулю: base^exponent mod modulus.

    Алгоритм:
        1. exponent == 0 → 1
        2. c = base mod modulus
        3. exponent < 0 → c = mod_inverse(c, modulus)
        4. e = |exponent|, result = 1
           пока e != 0:
               e нечётно → result = result * c mod modulus
               c = c * c mod modulus
               e >>= 1

    Args:
        base: Основание (любое целое)
        exponent: Экспонента (может быть отрицательной)
        modulus: Модуль (не ноль)
        kind: Целочисленный тип вычислений (None → int без ограничений)
        policy: Поведение при переполнении промежуточных произведений

    Returns:
        base^exponent mod modulus

    Raises:
        ZeroModulusError: Если modulus == 0 (в том числе после wrap-around)
        NoInverseExists: Если exponent < 0 и gcd(base, modulus) != 1
        IntegerOverflowError: Если операнд или промежуточное произведение
            не помещается в kind (RAISE)

    Examples:
        >>> mod_pow(65, 17, 3233)
        2790
        >>> mod_pow(2790, 2753, 3233)
        65
        >>> mod_pow(3, -1, 7)
        5
        >>> mod_pow(0, 0, 7)
        1
    """
    require_int(base, "base")
    require_int(exponent, "exponent")
    require_modulus(modulus)
    base = narrow(base, kind, policy)
    exponent = narrow(exponent, kind, policy)
    modulus = require_modulus(narrow(modulus, kind, policy))

    if exponent == 0:
        return 1

    c = base % modulus
    if exponent < 0:
        c = mod_inverse(c, modulus, kind, policy)

    e = int_abs(exponent)
    result = 1
    while e:
        if not is_even(e):
            result = mod_mul(result, c, modulus, kind, policy)
        c = mod_mul(c, c, modulus, kind, policy)
        e >>= 1

    return result
