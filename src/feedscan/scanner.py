"""FeedScanner: перебор смещений и кодировок в непрозрачном бинарном буфере

Best-effort диагностический инструмент (reverse engineering), НЕ кодек схемы.
Раскладка аккаунта оракула не документирована и меняется между версиями,
поэтому сканер не предполагает никакой структуры: для каждого смещения
пробует все кодировки и возвращает все правдоподобные декодирования,
ранжированные по близости к целевому значению.

Для каждого смещения i (0 <= i < N):
- i + 8 <= N: int64 LE, масштабированный каждым decimals из decimal_candidates
  (каждая удачная пара даёт отдельный SCALED_INT64 кандидат), плюс float64 LE
- i + 4 <= N: float32 LE, плюс int32 LE на точное равенство цели в центах

Кандидат сохраняется, если deviation < tolerance.
Сложность O(N * |decimal_candidates|).
"""

import logging
import struct
from dataclasses import dataclass
from typing import Final, Iterable, Optional

from src.core.domain.candidate import Candidate, Encoding, ScanResult
from src.core.errors import InvalidInput
from src.core.math.fixed_point import (
    CENTS_DECIMALS,
    deviation,
    is_finite,
    scale_integer,
    to_implied_integer,
)
from src.feedscan.hexdump import BufferLike, hex_dump

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Абсолютная толерантность по умолчанию
DEFAULT_TOLERANCE: Final[float] = 0.01

# Гипотезы масштаба для int64: 0..9 знаков
DEFAULT_DECIMAL_CANDIDATES: Final[tuple[int, ...]] = tuple(range(10))

_INT32: Final[struct.Struct] = struct.Struct("<i")
_INT64: Final[struct.Struct] = struct.Struct("<q")
_FLOAT32: Final[struct.Struct] = struct.Struct("<f")
_FLOAT64: Final[struct.Struct] = struct.Struct("<d")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FeedScannerConfig:
    """Конфигурация FeedScanner.

    decimal_candidates расширяет/сужает пространство гипотез масштаба.
    """

    tolerance: float = DEFAULT_TOLERANCE
    decimal_candidates: tuple[int, ...] = DEFAULT_DECIMAL_CANDIDATES

    # Число знаков для точной проверки int32 ("цена в центах")
    cents_decimals: int = CENTS_DECIMALS

    def __post_init__(self):
        object.__setattr__(
            self, "decimal_candidates", normalize_decimal_candidates(self.decimal_candidates)
        )
        if self.cents_decimals < 0:
            raise InvalidInput(f"cents_decimals must be non-negative, got {self.cents_decimals}")


def normalize_decimal_candidates(decimals: Iterable[int]) -> tuple[int, ...]:
    """Упорядоченное множество неотрицательных целых (дубликаты схлопываются).

    Raises:
        InvalidInput: если элемент не целое или отрицательный
    """
    seen: dict[int, None] = {}
    for d in decimals:
        if isinstance(d, bool) or not isinstance(d, int):
            raise InvalidInput(f"decimal candidate must be an int, got {d!r}")
        if d < 0:
            raise InvalidInput(f"decimal candidate must be non-negative, got {d}")
        seen.setdefault(d, None)
    return tuple(seen)


# =============================================================================
# SCANNER
# =============================================================================


class FeedScanner:
    """Сканер бинарного буфера фида.

    Чистая функция над входом: без I/O, без состояния между вызовами.
    Безопасен для конкурентного использования.
    """

    def __init__(self, config: FeedScannerConfig | None = None):
        self.config = config or FeedScannerConfig()

    def scan(
        self,
        buffer: Optional[BufferLike],
        target: float,
        tolerance: float | None = None,
    ) -> ScanResult:
        """Поиск окон буфера, декодирующихся в значение около target.

        Args:
            buffer: сырые байты аккаунта; None трактуется как пустой буфер
            target: искомое значение (например, известная reference price)
            tolerance: абсолютная толерантность (default: config.tolerance)

        Returns:
            ScanResult, отсортированный по (deviation, offset, width); может быть пустым
        """
        tol = self.config.tolerance if tolerance is None else tolerance
        data = bytes(buffer) if buffer is not None else b""
        n = len(data)

        found: list[Candidate] = []
        if is_finite(target) and tol > 0:
            try:
                cents_target = to_implied_integer(target, self.config.cents_decimals)
            except ValueError:
                # Цель вне диапазона центов: int32 проверка невозможна
                cents_target = None
            for offset in range(n):
                if offset + 8 <= n:
                    found.extend(self._scan_wide(data, offset, target, tol))
                if offset + 4 <= n:
                    found.extend(self._scan_narrow(data, offset, target, tol, cents_target))

        # list.sort стабилен: равные ключи сохраняют порядок генерации
        found.sort(key=Candidate.sort_key)

        logger.debug(
            "feed scan: %d bytes, target=%s, tolerance=%s, %d candidates",
            n,
            target,
            tol,
            len(found),
        )
        return ScanResult(target=target, tolerance=tol, buffer_size=n, candidates=tuple(found))

    def _scan_wide(self, data: bytes, offset: int, target: float, tol: float) -> list[Candidate]:
        """8-байтовое окно: int64 во всех масштабах + float64."""
        out: list[Candidate] = []
        try:
            (raw,) = _INT64.unpack_from(data, offset)
        except struct.error:
            raw = None
        if raw is not None:
            for decimals in self.config.decimal_candidates:
                value = scale_integer(raw, decimals)
                dev = deviation(value, target)
                if dev < tol:
                    out.append(
                        Candidate(
                            offset=offset,
                            width=8,
                            encoding=Encoding.SCALED_INT64,
                            decimals=decimals,
                            decoded_value=value,
                            raw_integer=raw,
                            deviation=dev,
                            hex=hex_dump(data, offset, 8),
                        )
                    )

        try:
            (value,) = _FLOAT64.unpack_from(data, offset)
        except struct.error:
            return out
        dev = deviation(value, target)
        if dev < tol:
            out.append(
                Candidate(
                    offset=offset,
                    width=8,
                    encoding=Encoding.FLOAT64,
                    decoded_value=value,
                    deviation=dev,
                    hex=hex_dump(data, offset, 8),
                )
            )
        return out

    def _scan_narrow(
        self,
        data: bytes,
        offset: int,
        target: float,
        tol: float,
        cents_target: Optional[int],
    ) -> list[Candidate]:
        """4-байтовое окно: float32 + int32 на точное равенство в центах."""
        out: list[Candidate] = []
        try:
            (value,) = _FLOAT32.unpack_from(data, offset)
        except struct.error:
            value = None
        if value is not None:
            dev = deviation(value, target)
            if dev < tol:
                out.append(
                    Candidate(
                        offset=offset,
                        width=4,
                        encoding=Encoding.FLOAT32,
                        decoded_value=value,
                        deviation=dev,
                        hex=hex_dump(data, offset, 4),
                    )
                )

        try:
            (raw,) = _INT32.unpack_from(data, offset)
        except struct.error:
            return out
        if cents_target is not None and raw == cents_target:
            value = scale_integer(raw, self.config.cents_decimals)
            dev = deviation(value, target)
            if dev < tol:
                out.append(
                    Candidate(
                        offset=offset,
                        width=4,
                        encoding=Encoding.INT32,
                        decimals=self.config.cents_decimals,
                        decoded_value=value,
                        raw_integer=raw,
                        deviation=dev,
                        hex=hex_dump(data, offset, 4),
                    )
                )
        return out


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================


def scan(
    buffer: Optional[BufferLike],
    target: float,
    tolerance: float = DEFAULT_TOLERANCE,
    decimal_candidates: Iterable[int] = DEFAULT_DECIMAL_CANDIDATES,
) -> ScanResult:
    """Однократное сканирование без явного создания FeedScanner.

    Raises:
        InvalidInput: если decimal_candidates содержит отрицательные значения
    """
    config = FeedScannerConfig(
        tolerance=tolerance,
        decimal_candidates=tuple(decimal_candidates),
    )
    return FeedScanner(config).scan(buffer, target)
