"""
Fixed-Point Helpers — масштабирование целых и проверки float

Модуль содержит примитивы, общие для сканера и price gate:
- Интерпретация целого как fixed-point числа (raw / 10^decimals)
- Представление цены в "implied cents" (два знака после запятой)
- Конверсия basis points в дробь
- Конверсия on-chain base units (10^9) в целые единицы
- Проверка конечности float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление целого на 10^decimals выполняется как int / int (без потери точности до float)
2. deviation всегда >= 0
3. NaN/Inf никогда не считаются совпадением
"""

import math
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Число знаков после запятой для "цены в центах"
CENTS_DECIMALS: Final[int] = 2

# Base units на одну единицу токена (lamport-style, 9 знаков)
BASE_UNIT_DECIMALS_DEFAULT: Final[int] = 9

# Basis points в одной единице
BPS_PER_UNIT: Final[float] = 10000.0


# =============================================================================
# FLOAT SANITY
# =============================================================================


def is_finite(value: float) -> bool:
    """Проверка, что значение конечно (не NaN, не Inf)."""
    return math.isfinite(value)


def deviation(value: float, target: float) -> float:
    """
    Абсолютное отклонение |value - target|.

    Returns:
        Отклонение >= 0, либо math.inf если value/target не конечны
    """
    if not (is_finite(value) and is_finite(target)):
        return math.inf
    return abs(value - target)


# =============================================================================
# FIXED-POINT
# =============================================================================


def scale_integer(raw: int, decimals: int) -> float:
    """
    Интерпретация целого как fixed-point числа.

    Args:
        raw: Исходное целое (например, прочитанное int64)
        decimals: Число подразумеваемых знаков после запятой (>= 0)

    Returns:
        raw / 10^decimals

    Examples:
        >>> scale_integer(999, 2)
        9.99
        >>> scale_integer(9990000, 6)
        9.99
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    return raw / (10 ** decimals)


def to_implied_integer(value: float, decimals: int = CENTS_DECIMALS) -> int:
    """
    Представление значения как целого с подразумеваемыми знаками.

    Examples:
        >>> to_implied_integer(9.99)
        999
        >>> to_implied_integer(1.5, 3)
        1500

    Raises:
        ValueError: если value не конечно или value * 10^decimals переполняет float
    """
    if not is_finite(value):
        raise ValueError(f"value must be finite, got {value}")
    try:
        scaled = value * (10 ** decimals)
    except OverflowError as e:
        raise ValueError(f"{decimals} decimals overflow float") from e
    if not is_finite(scaled):
        raise ValueError(f"value {value} overflows at {decimals} decimals")
    return round(scaled)


def bps_to_fraction(bps: float) -> float:
    """
    Конверсия basis points в дробь.

    Examples:
        >>> bps_to_fraction(500)
        0.05
    """
    return bps / BPS_PER_UNIT


def base_units_to_whole(amount: int, decimals: int = BASE_UNIT_DECIMALS_DEFAULT) -> int:
    """
    Конверсия on-chain base units в целые единицы токена.

    Деление целочисленное (дробная часть отбрасывается).

    Examples:
        >>> base_units_to_whole(1_000_000_000_000)
        1000
        >>> base_units_to_whole(1_999_999_999)
        1
    """
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    return amount // (10 ** decimals)
