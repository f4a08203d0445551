"""
Candidate / ScanResult — результаты сканирования бинарного буфера

Immutable Pydantic модели, описывающие гипотезы декодирования
(offset, width, encoding), найденные FeedScanner.

ИНВАРИАНТЫ:
1. deviation >= 0; deviation == 0 означает точное совпадение
2. ScanResult.candidates отсортированы по (deviation, offset, width)
3. Пустой ScanResult: валидный результат (цель не найдена), не ошибка
"""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class Encoding(str, Enum):
    """Численная кодировка окна байт (все little-endian).

    FeedScanner сообщает int64 только как SCALED_INT64: немасштабированное
    чтение это SCALED_INT64 с decimals=0. INT64 зарезервирован для кандидатов,
    которые строит вызывающая сторона (например, из известной раскладки).
    """

    INT32 = "INT32"
    INT64 = "INT64"
    FLOAT32 = "FLOAT32"
    FLOAT64 = "FLOAT64"
    SCALED_INT64 = "SCALED_INT64"

    @property
    def is_integer(self) -> bool:
        return self in (Encoding.INT32, Encoding.INT64, Encoding.SCALED_INT64)


# =============================================================================
# CANDIDATE
# =============================================================================


class Candidate(BaseModel):
    """
    Одна гипотеза декодирования буфера, близкая к целевому значению.

    Для целочисленных кодировок заполнены raw_integer и decimals
    (число подразумеваемых знаков, по которым raw_integer приведён к decoded_value).
    """

    offset: int = Field(..., ge=0, description="Смещение начала окна в буфере")
    width: Literal[4, 8] = Field(..., description="Ширина окна в байтах")
    encoding: Encoding = Field(..., description="Кодировка окна")
    decimals: Optional[int] = Field(
        None, ge=0, description="Подразумеваемые знаки для целочисленных кодировок"
    )
    decoded_value: float = Field(..., description="Декодированное значение")
    raw_integer: Optional[int] = Field(None, description="Сырое целое (только int-кодировки)")
    deviation: float = Field(..., ge=0, description="|decoded_value - target|")
    hex: str = Field("", description="Hex-представление окна")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_integer_fields(self) -> "Candidate":
        """raw_integer присутствует тогда и только тогда, когда кодировка целочисленная"""
        if self.encoding.is_integer and self.raw_integer is None:
            raise ValueError(f"raw_integer is required for {self.encoding.value}")
        if not self.encoding.is_integer and self.raw_integer is not None:
            raise ValueError(f"raw_integer must be None for {self.encoding.value}")
        return self

    @property
    def is_exact(self) -> bool:
        """Точное совпадение с целевым значением."""
        return self.deviation == 0.0

    @property
    def offset_hex(self) -> str:
        """Смещение в формате 0x0000."""
        return f"0x{self.offset:04x}"

    def sort_key(self) -> tuple[float, int, int]:
        """Ключ ранжирования: отклонение, затем offset, затем width."""
        return (self.deviation, self.offset, self.width)


# =============================================================================
# SCAN RESULT
# =============================================================================


class ScanResult(BaseModel):
    """
    Упорядоченный набор кандидатов одного вызова scan().

    Порядок: deviation по возрастанию, затем меньший offset, затем меньший width.
    Сортировка стабильная: равные по ключу кандидаты сохраняют порядок генерации.
    """

    target: float = Field(..., description="Искомое значение")
    tolerance: float = Field(..., description="Абсолютная толерантность")
    buffer_size: int = Field(..., ge=0, description="Длина просканированного буфера")
    candidates: tuple[Candidate, ...] = Field(default=(), description="Найденные кандидаты")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_ordering(self) -> "ScanResult":
        """Кандидаты должны быть отсортированы по sort_key"""
        keys = [c.sort_key() for c in self.candidates]
        if keys != sorted(keys):
            raise ValueError("candidates must be sorted by (deviation, offset, width)")
        for c in self.candidates:
            if c.offset >= self.buffer_size:
                raise ValueError(
                    f"candidate offset {c.offset} out of buffer of size {self.buffer_size}"
                )
        return self

    @property
    def is_empty(self) -> bool:
        return not self.candidates

    @property
    def best(self) -> Optional[Candidate]:
        """Лучший кандидат (минимальное отклонение) или None."""
        return self.candidates[0] if self.candidates else None

    def exact_matches(self) -> list[Candidate]:
        return [c for c in self.candidates if c.is_exact]

    def __len__(self) -> int:
        return len(self.candidates)
