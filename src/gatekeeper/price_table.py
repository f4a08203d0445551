"""FixedPriceTable: явная таблица фиксированных reference prices.

Таблица передаётся при создании (нет глобального изменяемого состояния).
Для неизвестного product id возвращается fallback price с WARNING в лог,
либо KeyError в strict режиме.
"""

import logging
import math
from typing import Final, Mapping, Optional

from src.core.domain.price_band import ToleranceBand
from src.core.errors import InvalidInput
from src.gatekeeper.gates.price_gate import band_from_bps

logger = logging.getLogger(__name__)

# Fallback price для неизвестного товара
FALLBACK_PRICE_DEFAULT: Final[float] = 100.0

# Толерантность по умолчанию: 500 bps = 5%
DEFAULT_TOLERANCE_BPS: Final[float] = 500.0


class FixedPriceTable:
    """Неизменяемая таблица цен product_id -> price."""

    def __init__(
        self,
        prices: Mapping[str, float],
        fallback_price: float = FALLBACK_PRICE_DEFAULT,
        default_tolerance_bps: float = DEFAULT_TOLERANCE_BPS,
        strict: bool = False,
    ):
        for product_id, price in prices.items():
            if not math.isfinite(price) or price <= 0:
                raise InvalidInput(f"price for {product_id!r} must be finite and > 0, got {price}")
        if not math.isfinite(fallback_price) or fallback_price <= 0:
            raise InvalidInput(f"fallback_price must be finite and > 0, got {fallback_price}")
        if default_tolerance_bps < 0:
            raise InvalidInput(f"default_tolerance_bps must be >= 0, got {default_tolerance_bps}")

        self._prices: dict[str, float] = dict(prices)
        self.fallback_price = fallback_price
        self.default_tolerance_bps = default_tolerance_bps
        self.strict = strict

    def __contains__(self, product_id: str) -> bool:
        return product_id in self._prices

    def get_price(self, product_id: str) -> float:
        """Цена товара.

        Raises:
            KeyError: в strict режиме, если товара нет в таблице
        """
        price = self._prices.get(product_id)
        if price is not None:
            return price
        if self.strict:
            raise KeyError(product_id)
        logger.warning(
            "no fixed price for %r, using fallback %s", product_id, self.fallback_price
        )
        return self.fallback_price

    def price_band(self, product_id: str, tolerance_bps: Optional[float] = None) -> ToleranceBand:
        """Полоса допуска вокруг цены товара."""
        bps = self.default_tolerance_bps if tolerance_bps is None else tolerance_bps
        return band_from_bps(self.get_price(product_id), bps)

    def is_within_tolerance(
        self,
        amount: float,
        product_id: str,
        tolerance_bps: Optional[float] = None,
    ) -> bool:
        """amount внутри полосы вокруг цены товара (включительно)."""
        return self.price_band(product_id, tolerance_bps).contains(amount)
