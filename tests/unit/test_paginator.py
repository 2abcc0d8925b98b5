"""Tests for offset pagination."""

import pytest

from neo_docs.features.pagination import paginate, resolve_limit
from neo_docs.utils.numbers import to_natural_number


class TestPaginate:
    """Test skip and page metadata computation."""

    def test_first_page(self):
        pagination = paginate(1, 10, 25)

        assert pagination.skip == 0
        assert pagination.limit == 10
        assert pagination.page_data.total_pages == 3
        assert pagination.page_data.has_next is True
        assert pagination.page_data.has_prev is False

    def test_last_page(self):
        pagination = paginate(3, 10, 25)

        assert pagination.skip == 20
        assert pagination.page_data.has_next is False
        assert pagination.page_data.has_prev is True
        assert pagination.page_data.next_page is None
        assert pagination.page_data.prev_page == 2

    def test_empty_collection(self):
        page_data = paginate(1, 10, 0).page_data

        assert page_data.total == 0
        assert page_data.total_pages == 0
        assert page_data.has_next is False
        assert page_data.has_prev is False

    def test_page_past_the_end(self):
        pagination = paginate(5, 10, 25)

        assert pagination.skip == 40
        assert pagination.page_data.has_next is False
        assert pagination.page_data.has_prev is True

    @pytest.mark.parametrize("page", [0, -3, "abc", None, 1.5, True])
    def test_invalid_page_falls_back_to_first(self, page):
        pagination = paginate(page, 10, 5)

        assert pagination.page_data.page == 1
        assert pagination.skip == 0

    def test_numeric_strings_are_accepted(self):
        pagination = paginate("2", "5", 12)

        assert pagination.skip == 5
        assert pagination.limit == 5
        assert pagination.page_data.total_pages == 3

    def test_page_data_to_dict(self):
        data = paginate(2, 10, 25).page_data.to_dict()

        assert data["current_page"] == 2
        assert data["total_items"] == 25
        assert data["next_page"] == 3
        assert data["prev_page"] == 1


class TestResolveLimit:
    """Test default and maximum page sizes."""

    def test_missing_limit_uses_default(self):
        assert resolve_limit(None, 20, 100) == 20

    def test_oversized_limit_is_capped(self):
        assert resolve_limit(500, 20, 100) == 100

    def test_invalid_limit_falls_back_to_one(self):
        assert resolve_limit("many", 20, 100) == 1


def test_to_natural_number():
    """Test page and limit coercion."""
    assert to_natural_number(7) == 7
    assert to_natural_number(" 12 ") == 12
    assert to_natural_number("0") == 1
    assert to_natural_number(-4) == 1
    assert to_natural_number(False) == 1
