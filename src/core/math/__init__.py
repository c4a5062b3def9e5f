"""
Core math modules для RSA

Арифметическое ядро: целочисленные примитивы, НОД, обратный элемент
и возведение в степень по модулю. Все функции чистые и детерминированные.
"""

# Integer Utilities
from src.core.math.integer_utils import (
    IntegerOverflowError,
    ZeroModulusError,
    int_abs,
    is_even,
    narrow,
    require_int,
    require_modulus,
    swap,
)

# GCD Engine
from src.core.math.gcd import gcd, is_coprime

# Modular Inverse Engine
from src.core.math.mod_inverse import (
    InverseResult,
    NoInverseExists,
    mod_inverse,
    try_mod_inverse,
)

# Modular Exponentiation Engine
from src.core.math.mod_pow import mod_mul, mod_pow

__all__ = [
    # Integer Utilities — Exceptions
    "IntegerOverflowError",
    "ZeroModulusError",
    # Integer Utilities — Functions
    "int_abs",
    "is_even",
    "narrow",
    "require_int",
    "require_modulus",
    "swap",
    # GCD Engine
    "gcd",
    "is_coprime",
    # Modular Inverse Engine
    "InverseResult",
    "NoInverseExists",
    "mod_inverse",
    "try_mod_inverse",
    # Modular Exponentiation Engine
    "mod_mul",
    "mod_pow",
]
