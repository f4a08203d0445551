"""Probe: декодирование полей буфера по смещениям, заданным вызывающей стороной

В отличие от FeedScanner, probe не перебирает смещения: он читает
конкретные (name, offset, size) поля и показывает все правдоподобные
интерпретации каждого. Раскладка полей в ядре не зашита.

Интерпретации по размеру:
- 1 байт: u8
- 4 байта: int32 LE + float32 LE
- 8 байт: int64 LE в масштабах PROBE_DECIMALS + float64 LE
- иначе: hex
"""

import math
import struct
from dataclasses import dataclass, field
from typing import Any, Final, Iterable, Optional

from src.core.math.fixed_point import scale_integer
from src.feedscan.hexdump import BufferLike, hex_dump


# =============================================================================
# CONSTANTS
# =============================================================================

# Масштабы, в которых показывается int64 поле
PROBE_DECIMALS: Final[tuple[int, ...]] = (0, 3, 6, 9)


# =============================================================================
# TYPES
# =============================================================================


@dataclass(frozen=True)
class ProbeField:
    """Поле для чтения."""

    name: str
    offset: int
    size: int


@dataclass(frozen=True)
class ProbeReading:
    """Результат чтения одного поля."""

    name: str
    offset: int
    size: int
    hex: str

    # Основное значение: u8 / {"int32", "float32"} / str(int64) / hex
    value: Any

    # Интерпретации int64 по масштабам: decimals -> value
    scaled: dict[int, float] = field(default_factory=dict)
    float_value: Optional[float] = None
    display: str = ""


# =============================================================================
# PROBE
# =============================================================================


def probe_offsets(buffer: Optional[BufferLike], fields: Iterable[ProbeField]) -> list[ProbeReading]:
    """Чтение полей; поля, выходящие за границу буфера, пропускаются.

    Args:
        buffer: сырые байты (None = пустой буфер)
        fields: поля в порядке вывода

    Returns:
        Список ProbeReading в порядке fields
    """
    data = bytes(buffer) if buffer is not None else b""
    readings = []
    for f in fields:
        if f.offset < 0 or f.size <= 0 or f.offset + f.size > len(data):
            continue
        readings.append(_read_field(data, f))
    return readings


def _read_field(data: bytes, f: ProbeField) -> ProbeReading:
    chunk = data[f.offset : f.offset + f.size]
    hex_view = hex_dump(data, f.offset, f.size)

    if f.size == 1:
        value = chunk[0]
        return ProbeReading(
            name=f.name,
            offset=f.offset,
            size=f.size,
            hex=hex_view,
            value=value,
            display=f"{value} (0x{chunk.hex()})",
        )

    if f.size == 4:
        (as_int,) = struct.unpack("<i", chunk)
        (as_float,) = struct.unpack("<f", chunk)
        return ProbeReading(
            name=f.name,
            offset=f.offset,
            size=f.size,
            hex=hex_view,
            value={"int32": as_int, "float32": as_float},
            float_value=as_float,
            display=f"int32: {as_int}, float: {as_float:.6f}, hex: 0x{chunk.hex()}",
        )

    if f.size == 8:
        (as_int,) = struct.unpack("<q", chunk)
        (as_float,) = struct.unpack("<d", chunk)
        scaled = {d: scale_integer(as_int, d) for d in PROBE_DECIMALS}
        parts = [f"{v:.{d}f} (decimal: {d})" for d, v in scaled.items()]
        float_value: Optional[float] = None
        if not math.isnan(as_float):
            float_value = as_float
            parts.append(f"{as_float:.6f} (f64)")
        return ProbeReading(
            name=f.name,
            offset=f.offset,
            size=f.size,
            hex=hex_view,
            value=str(as_int),
            scaled=scaled,
            float_value=float_value,
            display=", ".join(parts),
        )

    return ProbeReading(
        name=f.name,
        offset=f.offset,
        size=f.size,
        hex=hex_view,
        value=chunk.hex(),
        display=f"0x{chunk.hex()}",
    )
