import math

import pytest

from tasks_back.features.tasks.services import build_pagination_meta


def test_second_and_last_page_of_fifteen_items():
    meta = build_pagination_meta(page=2, limit=10, total_items=15)
    assert meta.model_dump(by_alias=True) == {
        "currentPage": 2,
        "totalPages": 2,
        "totalItems": 15,
        "itemsPerPage": 10,
        "hasNext": False,
        "hasPrevious": True,
        "nextPage": None,
        "previousPage": 1,
    }


def test_first_page_has_next_only():
    meta = build_pagination_meta(page=1, limit=10, total_items=15)
    assert meta.has_next is True
    assert meta.next_page == 2
    assert meta.has_previous is False
    assert meta.previous_page is None


def test_empty_collection_has_zero_pages():
    meta = build_pagination_meta(page=1, limit=10, total_items=0)
    assert meta.total_pages == 0
    assert meta.has_next is False
    assert meta.has_previous is False


def test_page_beyond_last_still_reports_previous():
    meta = build_pagination_meta(page=5, limit=10, total_items=15)
    assert meta.current_page == 5
    assert meta.total_pages == 2
    assert meta.has_next is False
    assert meta.previous_page == 4


def test_non_positive_limit_does_not_divide_by_zero():
    meta = build_pagination_meta(page=1, limit=0, total_items=3)
    assert meta.total_pages == 0


@pytest.mark.parametrize("total_items", [1, 9, 10, 11, 20, 21, 99])
@pytest.mark.parametrize("limit", [1, 3, 10])
def test_total_pages_and_flags_are_consistent(total_items, limit):
    total_pages = math.ceil(total_items / limit)
    for page in range(1, total_pages + 2):
        meta = build_pagination_meta(page=page, limit=limit, total_items=total_items)
        assert meta.total_pages == total_pages
        assert meta.has_next == (page < total_pages)
        assert meta.has_previous == (page > 1)
