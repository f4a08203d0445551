"""Hex/ASCII дамп участков буфера для диагностического вывода.

Чистое форматирование: ни один компонент не зависит от формата строк.
"""

from typing import Final, Optional, Union

BufferLike = Union[bytes, bytearray, memoryview]

# Ширина строки дампа в байтах
ROW_WIDTH_DEFAULT: Final[int] = 16

# Размер "хвоста" буфера для tail_rows
TAIL_SPAN_DEFAULT: Final[int] = 1000

# Печатаемый ASCII диапазон
_PRINTABLE_MIN: Final[int] = 32
_PRINTABLE_MAX: Final[int] = 126


def hex_dump(buffer: Optional[BufferLike], offset: int = 0, length: int = 8) -> str:
    """Hex-байты участка через пробел; участок обрезается по границе буфера.

    Examples:
        >>> hex_dump(b"\\xe7\\x03\\x00\\x00", 0, 4)
        'e7 03 00 00'
        >>> hex_dump(b"\\x01\\x02", 1, 8)
        '02'
    """
    if buffer is None or offset < 0 or length <= 0:
        return ""
    chunk = bytes(buffer[offset : offset + length])
    return " ".join(f"{b:02x}" for b in chunk)


def ascii_view(chunk: bytes) -> str:
    """Печатаемые символы как есть, остальные как '.'."""
    return "".join(
        chr(b) if _PRINTABLE_MIN <= b <= _PRINTABLE_MAX else "." for b in chunk
    )


def hex_ascii_rows(
    buffer: Optional[BufferLike],
    start: int = 0,
    end: Optional[int] = None,
    row_width: int = ROW_WIDTH_DEFAULT,
) -> list[str]:
    """Строки вида `0x0000: aa bb ... | ascii` для диапазона [start, end).

    Raises:
        ValueError: если row_width <= 0
    """
    if row_width <= 0:
        raise ValueError(f"row_width must be positive, got {row_width}")
    if buffer is None:
        return []
    data = bytes(buffer)
    stop = len(data) if end is None else min(end, len(data))
    rows = []
    for row_start in range(max(start, 0), stop, row_width):
        chunk = data[row_start : min(row_start + row_width, stop)]
        hex_part = " ".join(f"{b:02x}" for b in chunk)
        rows.append(f"0x{row_start:04x}: {hex_part.ljust(row_width * 3)} | {ascii_view(chunk)}")
    return rows


def tail_rows(
    buffer: Optional[BufferLike],
    span: int = TAIL_SPAN_DEFAULT,
    row_width: int = ROW_WIDTH_DEFAULT,
) -> list[str]:
    """Дамп последних span байт буфера."""
    if buffer is None:
        return []
    size = len(buffer)
    return hex_ascii_rows(buffer, start=max(size - span, 0), end=size, row_width=row_width)
