"""
GCD Engine — наибольший общий делитель

Итеративный алгоритм Евклида по модулям операндов.
Используется для проверки взаимной простоты при выборе публичной экспоненты.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(a, b) >= 0
2. gcd(a, b) == gcd(b, a)
3. gcd(0, 0) == 0 (вырожденный случай, ответственность вызывающего)
4. Операнды приводятся к kind до алгоритма: для unsigned kind
   отрицательный операнд не проходит молча
"""

from src.core.domain.int_kind import IntKind, OverflowPolicy
from src.core.math.integer_utils import int_abs, narrow, require_int, swap


def gcd(
    a: int,
    b: int,
    kind: IntKind | None = None,
    policy: OverflowPolicy = OverflowPolicy.RAISE,
) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Алгоритм:
        1. ta, tb = |a|, |b|
        2. Если ta < tb → swap
        3. Пока tb != 0: (ta, tb) ← (tb, ta mod tb)
        4. Результат: ta

    Завершается, так как остаток строго убывает.

    Args:
        a: Первый операнд
        b: Второй операнд
        kind: Целочисленный тип операндов (None → int без ограничений)
        policy: Поведение при операнде вне kind и при |min_value| для signed

    Returns:
        Неотрицательный НОД

    Raises:
        IntegerOverflowError: Если операнд или |операнд| не помещается в kind (RAISE)

    Examples:
        >>> gcd(3120, 17)
        1
        >>> gcd(-12, 18)
        6
        >>> gcd(0, 0)
        0
    """
    require_int(a, "a")
    require_int(b, "b")
    a = narrow(a, kind, policy)
    b = narrow(b, kind, policy)

    ta = int_abs(a, kind, policy)
    tb = int_abs(b, kind, policy)
    if ta < tb:
        ta, tb = swap(ta, tb)

    while tb:
        ta, tb = swap(ta % tb, tb)

    return ta


def is_coprime(
    a: int,
    b: int,
    kind: IntKind | None = None,
    policy: OverflowPolicy = OverflowPolicy.RAISE,
) -> bool:
    """Взаимная простота: gcd(a, b) == 1."""
    return gcd(a, b, kind, policy) == 1
