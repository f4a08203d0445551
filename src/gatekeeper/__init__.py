"""Gatekeeper — допуск сумм переводов по reference price.

- PriceGate: включительная симметричная полоса толерантности
- derive_feed_id: ключ фида по товару и варианту
- FixedPriceTable: явная таблица фиксированных цен
"""

from .feed_id import derive_feed_id, variant_config
from .gates.price_gate import PriceGate, PriceGateConfig, evaluate
from .price_table import FixedPriceTable

__all__ = [
    "PriceGate",
    "PriceGateConfig",
    "evaluate",
    "derive_feed_id",
    "variant_config",
    "FixedPriceTable",
]
