"""Gates — индивидуальные гейты Gatekeeper.

- PriceGate: полоса толерантности вокруг reference price
"""

from .price_gate import (
    DEFAULT_TOLERANCE_FRACTION,
    PriceGate,
    PriceGateConfig,
    band_from_bps,
    build_band,
    evaluate,
)

__all__ = [
    "DEFAULT_TOLERANCE_FRACTION",
    "PriceGate",
    "PriceGateConfig",
    "band_from_bps",
    "build_band",
    "evaluate",
]
