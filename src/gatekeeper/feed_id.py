"""Feed identity: канонический ключ фида по product id и варианту товара.

derive_feed_id("iphone-x", {"ram": "8 GB", "storage": "256 GB"}) -> "iphone-x-8-GB-256-GB"
derive_feed_id("iphone-x") -> "iphone-x"
"""

from typing import Mapping, Optional, Union

from pydantic import ValidationError

from src.core.domain.price_band import ProductVariant
from src.core.errors import InvalidInput

VariantLike = Union[ProductVariant, Mapping[str, Optional[str]]]


def _coerce_variant(variant: Optional[VariantLike]) -> Optional[ProductVariant]:
    if variant is None or isinstance(variant, ProductVariant):
        return variant
    try:
        return ProductVariant(ram=variant.get("ram"), storage=variant.get("storage"))
    except ValidationError as e:
        raise InvalidInput(f"invalid variant {dict(variant)!r}: {e}") from e


def derive_feed_id(product_id: str, variant: Optional[VariantLike] = None) -> str:
    """Канонический идентификатор фида.

    Если у варианта заданы и ram, и storage: product-ram-storage,
    все пробелы заменены на '-'. Иначе product_id без изменений.

    Raises:
        InvalidInput: если product_id пуст или variant не валиден
    """
    if not product_id:
        raise InvalidInput("product_id must be non-empty")
    v = _coerce_variant(variant)
    if v is None or not v.is_complete:
        return product_id
    return f"{product_id}-{v.ram}-{v.storage}".replace(" ", "-")


def variant_config(variant: Optional[VariantLike]) -> Optional[str]:
    """Строка конфигурации варианта для price API: 'ram=8 GB,storage=256 GB'."""
    v = _coerce_variant(variant)
    if v is None:
        return None
    return f"ram={v.ram},storage={v.storage}"
