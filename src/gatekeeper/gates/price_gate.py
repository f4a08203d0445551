"""PriceGate: допуск суммы перевода по полосе толерантности вокруг reference price

Проверяет предложенную сумму перевода:
- Полоса: [reference * (1 - f), reference * (1 + f)], включительно с обеих сторон
- Одна доверенная reference price на входе, одно решение на выходе
- Без усреднения истории, без отбрасывания выбросов, без консенсуса источников

Предусловия (иначе InvalidInput):
- reference_price > 0 и конечна
- tolerance_fraction >= 0 и конечна
- amount конечна

Интеграция:
- reference price разрешает вызывающая сторона (см. derive_feed_id, FixedPriceTable)
- Ядро возвращает структурированный результат, форматирование сообщений:
  ответственность вызывающей стороны
"""

from dataclasses import dataclass
from typing import Final

from src.core.domain.price_band import Accepted, Rejected, ToleranceBand, ValidationOutcome
from src.core.errors import InvalidInput
from src.core.math.fixed_point import (
    BASE_UNIT_DECIMALS_DEFAULT,
    base_units_to_whole,
    bps_to_fraction,
    is_finite,
)


# =============================================================================
# CONSTANTS
# =============================================================================

# Толерантность по умолчанию: 10%
DEFAULT_TOLERANCE_FRACTION: Final[float] = 0.1


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PriceGateConfig:
    """Конфигурация PriceGate.

    tolerance_fraction расширяет/сужает полосу допуска.
    """

    tolerance_fraction: float = DEFAULT_TOLERANCE_FRACTION

    # Знаки on-chain base units для evaluate_base_units
    base_unit_decimals: int = BASE_UNIT_DECIMALS_DEFAULT

    def __post_init__(self):
        _check_tolerance(self.tolerance_fraction)
        if self.base_unit_decimals < 0:
            raise InvalidInput(
                f"base_unit_decimals must be non-negative, got {self.base_unit_decimals}"
            )


# =============================================================================
# GATE
# =============================================================================


class PriceGate:
    """Gate допуска суммы перевода.

    Чистое синхронное вычисление, без состояния между вызовами.
    """

    def __init__(self, config: PriceGateConfig | None = None):
        self.config = config or PriceGateConfig()

    def evaluate(
        self,
        amount: float,
        reference_price: float,
        tolerance_fraction: float | None = None,
    ) -> ValidationOutcome:
        """Оценка суммы перевода.

        Args:
            amount: предложенная сумма
            reference_price: доверенная reference price (> 0)
            tolerance_fraction: полуширина полосы (default: config.tolerance_fraction)

        Returns:
            Accepted{band} если band.low <= amount <= band.high, иначе Rejected{band, amount}

        Raises:
            InvalidInput: при нарушении предусловий
        """
        fraction = self.config.tolerance_fraction if tolerance_fraction is None else tolerance_fraction
        band = build_band(reference_price, fraction)

        if not is_finite(amount):
            raise InvalidInput(f"amount must be finite, got {amount}")

        if band.contains(amount):
            return Accepted(band=band)
        return Rejected(band=band, amount=amount)

    def evaluate_bps(
        self,
        amount: float,
        reference_price: float,
        tolerance_bps: float,
    ) -> ValidationOutcome:
        """Оценка с толерантностью в basis points (500 bps = 5%)."""
        return self.evaluate(amount, reference_price, bps_to_fraction(tolerance_bps))

    def evaluate_base_units(
        self,
        amount_base_units: int,
        reference_price: float,
        tolerance_fraction: float | None = None,
    ) -> ValidationOutcome:
        """Оценка on-chain суммы в base units.

        Сумма переводится в целые единицы целочисленным делением
        на 10^base_unit_decimals, дробная часть отбрасывается.

        Raises:
            InvalidInput: если amount_base_units отрицательна
        """
        if amount_base_units < 0:
            raise InvalidInput(f"amount_base_units must be non-negative, got {amount_base_units}")
        whole = base_units_to_whole(amount_base_units, self.config.base_unit_decimals)
        return self.evaluate(float(whole), reference_price, tolerance_fraction)


# =============================================================================
# HELPERS
# =============================================================================


def _check_tolerance(tolerance_fraction: float) -> None:
    if not is_finite(tolerance_fraction) or tolerance_fraction < 0:
        raise InvalidInput(
            f"tolerance_fraction must be finite and >= 0, got {tolerance_fraction}"
        )


def build_band(reference_price: float, tolerance_fraction: float) -> ToleranceBand:
    """Построение полосы с проверкой предусловий.

    Raises:
        InvalidInput: reference_price <= 0 / не конечна, tolerance_fraction < 0 / не конечна
    """
    if not is_finite(reference_price) or reference_price <= 0:
        raise InvalidInput(f"reference_price must be finite and > 0, got {reference_price}")
    _check_tolerance(tolerance_fraction)
    return ToleranceBand.around(reference_price, tolerance_fraction)


def band_from_bps(reference_price: float, tolerance_bps: float) -> ToleranceBand:
    """Полоса по толерантности в basis points."""
    return build_band(reference_price, bps_to_fraction(tolerance_bps))


def evaluate(
    amount: float,
    reference_price: float,
    tolerance_fraction: float = DEFAULT_TOLERANCE_FRACTION,
) -> ValidationOutcome:
    """Однократная оценка без явного создания PriceGate.

    Raises:
        InvalidInput: при нарушении предусловий
    """
    return PriceGate().evaluate(amount, reference_price, tolerance_fraction)
