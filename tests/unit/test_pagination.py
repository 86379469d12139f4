"""
Unit tests for page/limit parsing.
"""
import pytest

from placeholder_api.application.dto.pagination_dto import PageRequest


def test_defaults():
    page_request = PageRequest.from_query(None, None)
    assert page_request == PageRequest(page=1, limit=10)
    assert page_request.offset == 0


def test_offset_is_page_minus_one_times_limit():
    assert PageRequest.from_query("3", "25").offset == 50


@pytest.mark.parametrize("raw", ["abc", "0", "-4", "", "1.5"])
def test_invalid_values_fall_back_to_defaults(raw):
    page_request = PageRequest.from_query(raw, raw)
    assert page_request.page == 1
    assert page_request.limit == 10


@pytest.mark.parametrize("raw", [str(2**63), str(10**20), "9" * 5000])
def test_values_beyond_store_integer_range_fall_back_to_defaults(raw):
    page_request = PageRequest.from_query(raw, raw)
    assert page_request == PageRequest(page=1, limit=10)


def test_largest_storable_values_are_kept():
    page_request = PageRequest.from_query(str(2**63 - 1), str(2**63 - 1))
    assert page_request.page == 2**63 - 1
    assert page_request.limit == 2**63 - 1


def test_offset_is_capped_at_store_integer_range():
    assert PageRequest.from_query(str(2**62), "10").offset == 2**63 - 1
