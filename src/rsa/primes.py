"""
Small Primes — таблица простых чисел для демонстрационных ключей

Все простые < 256. Произведение двух таких простых < 65536, а квадрат
любого вычета по такому модулю помещается в uint32, поэтому шифрование
и расшифрование с UINT32 не переполняются.
"""

import random
from typing import Final, Sequence

SMALL_PRIMES: Final[tuple[int, ...]] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
    53, 59, 61, 67, 71, 73, 79, 83, 89, 97, 101, 103, 107, 109, 113,
    127, 131, 137, 139, 149, 151, 157, 163, 167, 173, 179, 181, 191, 193, 197,
    199, 211, 223, 227, 229, 233, 239, 241, 251,
)


def pick_prime(rng: random.Random, primes: Sequence[int] = SMALL_PRIMES) -> int:
    """
    Случайный выбор простого из таблицы.

    Raises:
        ValueError: Если таблица пуста
    """
    if not primes:
        raise ValueError("prime table is empty")
    return rng.choice(primes)
