"""
Core math modules

Fixed-point масштабирование и проверки float.
"""

from src.core.math.fixed_point import (
    BASE_UNIT_DECIMALS_DEFAULT,
    BPS_PER_UNIT,
    CENTS_DECIMALS,
    base_units_to_whole,
    bps_to_fraction,
    deviation,
    is_finite,
    scale_integer,
    to_implied_integer,
)

__all__ = [
    # Constants
    "BASE_UNIT_DECIMALS_DEFAULT",
    "BPS_PER_UNIT",
    "CENTS_DECIMALS",
    # Functions
    "base_units_to_whole",
    "bps_to_fraction",
    "deviation",
    "is_finite",
    "scale_integer",
    "to_implied_integer",
]
