"""
ToleranceBand / ValidationOutcome — решение PriceGate

Immutable Pydantic модели:
- ToleranceBand: симметричная процентная полоса вокруг reference price
- Accepted / Rejected: tagged variant результата проверки (discriminator = status)
- ProductVariant: конфигурация товара (ram, storage) для вывода feed id

ИНВАРИАНТЫ:
1. low <= reference <= high при width_fraction >= 0
2. Границы полосы включительные с обеих сторон
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# TOLERANCE BAND
# =============================================================================


class ToleranceBand(BaseModel):
    """
    Полоса допустимых значений [low, high].

    low = reference * (1 - width_fraction)
    high = reference * (1 + width_fraction)
    """

    low: float = Field(..., description="Нижняя граница (включительно)")
    high: float = Field(..., description="Верхняя граница (включительно)")
    width_fraction: float = Field(..., ge=0, description="Полуширина полосы как доля reference")

    model_config = {"frozen": True}

    @field_validator("high")
    @classmethod
    def validate_high_not_below_low(cls, v: float, info) -> float:
        """Проверка, что high >= low"""
        if "low" in info.data and v < info.data["low"]:
            raise ValueError(f"high {v} must be >= low {info.data['low']}")
        return v

    @classmethod
    def around(cls, reference_price: float, width_fraction: float) -> "ToleranceBand":
        """Построение полосы вокруг reference price."""
        return cls(
            low=reference_price * (1.0 - width_fraction),
            high=reference_price * (1.0 + width_fraction),
            width_fraction=width_fraction,
        )

    def contains(self, amount: float) -> bool:
        """Включительная проверка low <= amount <= high."""
        return self.low <= amount <= self.high


# =============================================================================
# VALIDATION OUTCOME
# =============================================================================


class Accepted(BaseModel):
    """Сумма внутри полосы."""

    status: Literal["ACCEPTED"] = "ACCEPTED"
    band: ToleranceBand

    model_config = {"frozen": True}

    @property
    def accepted(self) -> bool:
        return True


class Rejected(BaseModel):
    """Сумма вне полосы; amount сохраняется для отображения вызывающей стороной."""

    status: Literal["REJECTED"] = "REJECTED"
    band: ToleranceBand
    amount: float

    model_config = {"frozen": True}

    @property
    def accepted(self) -> bool:
        return False


ValidationOutcome = Annotated[Union[Accepted, Rejected], Field(discriminator="status")]


# =============================================================================
# PRODUCT VARIANT
# =============================================================================


class ProductVariant(BaseModel):
    """Конфигурация товара, определяющая, какой feed использовать."""

    ram: Optional[str] = Field(None, description="Объём RAM, например '8 GB'")
    storage: Optional[str] = Field(None, description="Объём памяти, например '256 GB'")

    model_config = {"frozen": True}

    @property
    def is_complete(self) -> bool:
        """Оба поля заданы и непусты."""
        return bool(self.ram) and bool(self.storage)
