"""Тесты для domain моделей: Candidate, ScanResult, ToleranceBand, ProductVariant"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    Accepted,
    Candidate,
    Encoding,
    ProductVariant,
    Rejected,
    ScanResult,
    ToleranceBand,
)


def make_candidate(offset: int = 0, width: int = 4, dev: float = 0.0) -> Candidate:
    return Candidate(
        offset=offset,
        width=width,
        encoding=Encoding.FLOAT32,
        decoded_value=9.99 + dev,
        deviation=dev,
    )


# =============================================================================
# CANDIDATE
# =============================================================================


def test_candidate_frozen():
    c = make_candidate()

    with pytest.raises(ValidationError):
        c.offset = 5


def test_candidate_negative_deviation_invalid():
    with pytest.raises(ValidationError):
        make_candidate(dev=-0.1)


def test_candidate_invalid_width():
    with pytest.raises(ValidationError):
        make_candidate(width=2)


def test_candidate_integer_encoding_requires_raw():
    with pytest.raises(ValidationError):
        Candidate(
            offset=0,
            width=8,
            encoding=Encoding.SCALED_INT64,
            decimals=2,
            decoded_value=9.99,
            deviation=0.0,
        )


def test_candidate_float_encoding_forbids_raw():
    with pytest.raises(ValidationError):
        Candidate(
            offset=0,
            width=8,
            encoding=Encoding.FLOAT64,
            decoded_value=9.99,
            raw_integer=999,
            deviation=0.0,
        )


def test_candidate_caller_built_int64():
    c = Candidate(
        offset=0,
        width=8,
        encoding=Encoding.INT64,
        decoded_value=42.0,
        raw_integer=42,
        deviation=0.0,
    )

    assert c.encoding.is_integer
    assert c.raw_integer == 42


def test_candidate_helpers():
    c = make_candidate(offset=2152)

    assert c.is_exact
    assert c.offset_hex == "0x0868"
    assert c.sort_key() == (0.0, 2152, 4)


# =============================================================================
# SCAN RESULT
# =============================================================================


def test_scan_result_requires_sorted_candidates():
    with pytest.raises(ValidationError):
        ScanResult(
            target=9.99,
            tolerance=0.01,
            buffer_size=32,
            candidates=(make_candidate(offset=8), make_candidate(offset=4)),
        )


def test_scan_result_offset_within_buffer():
    with pytest.raises(ValidationError):
        ScanResult(target=9.99, tolerance=0.01, buffer_size=4, candidates=(make_candidate(offset=4),))


def test_scan_result_helpers():
    exact = make_candidate(offset=4)
    near = make_candidate(offset=0, dev=0.001)
    result = ScanResult(target=9.99, tolerance=0.01, buffer_size=16, candidates=(exact, near))

    assert result.best == exact
    assert result.exact_matches() == [exact]
    assert len(result) == 2
    assert not result.is_empty


# =============================================================================
# TOLERANCE BAND / OUTCOMES
# =============================================================================


def test_band_around_contains_reference():
    band = ToleranceBand.around(9.99, 0.1)

    assert band.contains(9.99)
    assert band.contains(band.low)
    assert band.contains(band.high)
    assert not band.contains(band.high + 0.01)


def test_band_high_below_low_invalid():
    with pytest.raises(ValidationError):
        ToleranceBand(low=10.0, high=9.0, width_fraction=0.1)


def test_band_negative_width_invalid():
    with pytest.raises(ValidationError):
        ToleranceBand(low=9.0, high=10.0, width_fraction=-0.1)


def test_outcome_tags():
    band = ToleranceBand.around(100.0, 0.1)

    assert Accepted(band=band).status == "ACCEPTED"
    assert Rejected(band=band, amount=1.0).status == "REJECTED"


def test_product_variant_completeness():
    assert ProductVariant(ram="8 GB", storage="256 GB").is_complete
    assert not ProductVariant(ram="8 GB").is_complete
