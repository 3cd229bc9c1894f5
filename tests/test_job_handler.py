"""
Tests for handler-level parameter normalization.
"""

import pytest
from fastapi import HTTPException

from job_postings.handlers import normalize_pagination, parse_job_id
from job_postings.handlers.job_handler import MAX_INT


@pytest.mark.parametrize(
    "page,limit,expected",
    [
        (None, None, (1, 10, 0)),
        ("1", "10", (1, 10, 0)),
        ("3", "20", (3, 20, 40)),
        (2, 5, (2, 5, 5)),
        ("abc", "xyz", (1, 10, 0)),
        ("0", "0", (1, 10, 0)),
        ("-4", "-1", (1, 10, 0)),
        ("2", "", (2, 10, 10)),
        ("99999999999999999999", "10", (1, 10, 0)),
        ("2", "99999999999999999999", (2, 10, 10)),
        ("-99999999999999999999", None, (1, 10, 0)),
    ],
)
def test_normalize_pagination(page, limit, expected):
    """Test defaults, clamping and offset = (page - 1) * limit."""
    assert normalize_pagination(page, limit, max_limit=100) == expected


def test_normalize_pagination_caps_limit():
    """Test limit is capped at the configured maximum page size."""
    assert normalize_pagination("2", "500", max_limit=50) == (2, 50, 50)


def test_normalize_pagination_keeps_offset_in_64_bit_range():
    """Test a huge but in-range page is capped so the offset still fits a 64-bit integer."""
    page, limit, offset = normalize_pagination(str(2**62), "10", max_limit=100)

    assert limit == 10
    assert page == MAX_INT // 10 + 1
    assert 0 <= offset <= MAX_INT
    assert offset == (page - 1) * limit


@pytest.mark.parametrize("raw,expected", [("1", 1), ("42", 42), (7, 7), (str(2**63 - 1), 2**63 - 1)])
def test_parse_job_id(raw, expected):
    """Test valid ids are parsed."""
    assert parse_job_id(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "0", "-3", "1.5", "", "99999999999999999999", str(2**63)])
def test_parse_job_id_rejects_invalid(raw):
    """Test malformed ids are a 400."""
    with pytest.raises(HTTPException) as exc_info:
        parse_job_id(raw)
    assert exc_info.value.status_code == 400
