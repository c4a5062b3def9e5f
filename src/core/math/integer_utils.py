"""
Integer Utilities — базовые целочисленные примитивы

Фундамент арифметического ядра (gcd, mod_inverse, mod_pow):
- swap: обмен значений (возвращает пару, без мутации)
- int_abs: модуль числа с учётом знаковости IntKind
- is_even: чётность по младшему биту
- narrow: приведение значения к IntKind согласно OverflowPolicy
- require_modulus: проверка предусловия modulus != 0

Все функции принимают опциональный kind: None означает неограниченный int.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции чистые и детерминированные (нет состояния, нет I/O)
2. Переполнение никогда не происходит молча при OverflowPolicy.RAISE
3. Операнды вне kind приводятся через narrow до вычислений;
   для unsigned kind int_abs возвращает приведённое значение
"""

from src.core.domain.int_kind import IntKind, OverflowPolicy


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerOverflowError(OverflowError):
    """
    Значение не помещается в запрошенный IntKind.

    Возникает только при OverflowPolicy.RAISE. Типичные источники:
    - int_abs(min_value) для signed типа
    - промежуточное произведение в mod_mul шире типа
    """

    def __init__(self, value: int, kind: IntKind):
        self.value = value
        self.kind = kind
        super().__init__(
            f"Integer overflow: {value} does not fit {kind.name} "
            f"[{kind.min_value}, {kind.max_value}]"
        )


class ZeroModulusError(ZeroDivisionError):
    """Модуль равен нулю: модульная арифметика не определена."""

    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def require_int(value: int, name: str) -> int:
    """
    Проверка, что value целое число.

    Raises:
        TypeError: Если value не int (float, str, bool, ...)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}: {value!r}")
    return value


def require_modulus(modulus: int) -> int:
    """
    Проверка предусловия модульных операций.

    Raises:
        TypeError: Если modulus не int
        ZeroModulusError: Если modulus == 0
    """
    require_int(modulus, "modulus")
    if modulus == 0:
        raise ZeroModulusError("modulus must be non-zero")
    return modulus


def narrow(
    value: int,
    kind: IntKind | None = None,
    policy: OverflowPolicy = OverflowPolicy.RAISE,
) -> int:
    """
    Приведение значения к IntKind.

    Args:
        value: Исходное значение
        kind: Целевой тип (None → без ограничений)
        policy: RAISE → исключение при переполнении, WRAP → нативный wrap-around

    Returns:
        value, если оно помещается в kind; иначе wrap(value) при WRAP

    Raises:
        IntegerOverflowError: Если value вне диапазона и policy == RAISE

    Examples:
        >>> narrow(300, UINT8, OverflowPolicy.WRAP)
        44
        >>> narrow(300)
        300
    """
    if kind is None or kind.contains(value):
        return value
    if policy == OverflowPolicy.WRAP:
        return kind.wrap(value)
    raise IntegerOverflowError(value, kind)


# =============================================================================
# ПРИМИТИВЫ
# =============================================================================


def swap(a: int, b: int) -> tuple[int, int]:
    """Обмен значений: возвращает (b, a)."""
    return b, a


def int_abs(
    x: int,
    kind: IntKind | None = None,
    policy: OverflowPolicy = OverflowPolicy.RAISE,
) -> int:
    """
    Модуль числа с учётом знаковости типа.

    - x сначала приводится к kind (narrow): отрицательный x для unsigned
      типа это переполнение при RAISE и wrap-around при WRAP
    - unsigned kind: приведённый x возвращается без изменений
    - signed kind / None: x если x >= 0, иначе 0 - x

    Известное ограничение: для минимального значения signed типа
    отрицание переполняется. При RAISE это IntegerOverflowError,
    при WRAP результат равен самому минимальному значению (как в нативной арифметике).

    Examples:
        >>> int_abs(-5)
        5
        >>> int_abs(-128, INT8, OverflowPolicy.WRAP)
        -128
    """
    require_int(x, "x")
    x = narrow(x, kind, policy)
    if kind is not None and not kind.signed:
        return x
    result = x if x >= 0 else 0 - x
    return narrow(result, kind, policy)


def is_even(a: int) -> bool:
    """
    Чётность по младшему биту.

    Python int использует two's complement семантику для битовых операций,
    поэтому результат корректен и для отрицательных значений.
    """
    require_int(a, "a")
    return not (a & 1)
