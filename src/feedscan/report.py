"""Scan report: JSON-совместимое представление ScanResult.

Формат соответствует схеме scan_report.json (src/core/contracts/schema/).
raw_value сериализуется строкой (int64 не помещается в JSON number без потерь).
"""

from typing import Any, Dict, Final, Optional

from src.core.domain.candidate import Candidate, ScanResult
from src.feedscan.hexdump import BufferLike, hex_dump

SCAN_REPORT_SCHEMA_VERSION: Final[str] = "1"

# Длина заголовка аккаунта (discriminator), показываемого в отчёте
HEADER_SIZE: Final[int] = 8


def candidate_to_dict(candidate: Candidate) -> Dict[str, Any]:
    """Сериализация кандидата."""
    return {
        "offset": candidate.offset,
        "offset_hex": candidate.offset_hex,
        "width": candidate.width,
        "encoding": candidate.encoding.value,
        "decimals": candidate.decimals,
        "value": candidate.decoded_value,
        "raw_value": None if candidate.raw_integer is None else str(candidate.raw_integer),
        "diff": candidate.deviation,
        "exact": candidate.is_exact,
        "hex": candidate.hex,
    }


def build_scan_report(
    result: ScanResult,
    buffer: Optional[BufferLike] = None,
    feed_id: Optional[str] = None,
    owner: Optional[str] = None,
) -> Dict[str, Any]:
    """Построение отчёта сканирования.

    Args:
        result: результат FeedScanner.scan
        buffer: исходный буфер (для header_hex); опционально
        feed_id: идентификатор фида/аккаунта для отчёта
        owner: владелец аккаунта для отчёта

    Returns:
        dict, пригодный для json.dumps и validate_scan_report
    """
    candidates = [candidate_to_dict(c) for c in result.candidates]
    return {
        "schema_version": SCAN_REPORT_SCHEMA_VERSION,
        "feed_id": feed_id,
        "owner": owner,
        "data_size": result.buffer_size,
        "header_hex": hex_dump(buffer, 0, HEADER_SIZE) if buffer is not None else "",
        "target": result.target,
        "tolerance": result.tolerance,
        "candidate_count": len(candidates),
        "candidates": candidates,
        "best_match": candidates[0] if candidates else None,
    }
