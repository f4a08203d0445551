"""FeedScan — exploratory поиск цены в недокументированном бинарном буфере оракула.

Компоненты:
- FeedScanner / scan: перебор смещений и кодировок, ранжирование по отклонению
- hex_dump / hex_ascii_rows / tail_rows: диагностический дамп
- probe_offsets: чтение полей по заданным смещениям
- build_scan_report: JSON-совместимый отчёт
"""

from .hexdump import hex_ascii_rows, hex_dump, tail_rows
from .probe import PROBE_DECIMALS, ProbeField, ProbeReading, probe_offsets
from .report import build_scan_report, candidate_to_dict
from .scanner import (
    DEFAULT_DECIMAL_CANDIDATES,
    DEFAULT_TOLERANCE,
    FeedScanner,
    FeedScannerConfig,
    normalize_decimal_candidates,
    scan,
)

__all__ = [
    "FeedScanner",
    "FeedScannerConfig",
    "DEFAULT_DECIMAL_CANDIDATES",
    "DEFAULT_TOLERANCE",
    "normalize_decimal_candidates",
    "scan",
    "hex_dump",
    "hex_ascii_rows",
    "tail_rows",
    "ProbeField",
    "ProbeReading",
    "PROBE_DECIMALS",
    "probe_offsets",
    "build_scan_report",
    "candidate_to_dict",
]
