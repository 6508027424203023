import sys

import pytest

from storefront.database.catalog import normalize_catalog
from storefront.database.pagination import PER_PAGE, paginate, parse_category_id, parse_page

from .conftest import make_raw_products


@pytest.fixture
def products(raw_products):
    _, normalized = normalize_catalog(raw_products)
    return normalized


def test_last_page_of_25_products(products):
    page = paginate(products, 3)

    assert len(page.data) == 5
    assert page.meta.model_dump(by_alias=True) == {
        "perPage": 10,
        "totalPages": 3,
        "currentPage": 3,
        "totalElements": 25,
    }
    assert [p.id for p in page.data] == [21, 22, 23, 24, 25]


def test_first_page(products):
    page = paginate(products, 1)

    assert [p.id for p in page.data] == list(range(1, 11))
    assert page.meta.current_page == 1


@pytest.mark.parametrize("count", [0, 1, 9, 10, 11, 25, 30])
def test_pages_cover_collection(count):
    _, products = normalize_catalog(make_raw_products(count))
    total_pages = paginate(products, 1).meta.total_pages

    seen = []
    for number in range(1, total_pages + 1):
        page = paginate(products, number)
        assert len(page.data) <= PER_PAGE
        if number < total_pages:
            assert len(page.data) == PER_PAGE
        seen.extend(p.id for p in page.data)

    assert seen == [p.id for p in products]


@pytest.mark.parametrize("requested", [0, -1, -100])
def test_page_below_one_is_clamped_to_first(products, requested):
    page = paginate(products, requested)

    assert page.meta.current_page == 1
    assert [p.id for p in page.data] == list(range(1, 11))


def test_page_past_end_is_clamped_to_last(products):
    page = paginate(products, 9999)

    assert page.meta.current_page == page.meta.total_pages == 3
    assert len(page.data) == 5


def test_empty_collection_has_page_zero():
    page = paginate([], 1)

    assert page.data == []
    assert page.meta.current_page == 0
    assert page.meta.total_pages == 0
    assert page.meta.total_elements == 0


def test_category_filter(products):
    page = paginate(products, 1, category_id=2)

    assert page.data
    assert all(p.category_id == 2 for p in page.data)
    assert page.meta.total_elements == 8
    assert page.meta.total_pages == 1


def test_unknown_category_gives_empty_page(products):
    page = paginate(products, 1, category_id=99)

    assert page.data == []
    assert page.meta.total_elements == 0
    assert page.meta.current_page == 0


def test_category_zero_means_unfiltered(products):
    assert paginate(products, 1, category_id=0).meta.total_elements == 25


def test_input_is_not_mutated(products):
    before = list(products)
    paginate(products, 2, category_id=1)

    assert products == before


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 1),
        ("", 1),
        ("abc", 1),
        ("3", 3),
        (" 3 ", 3),
        ("2.9", 2),
        ("0", 0),
        ("-4", -4),
        ("+2", 2),
        ("9999", 9999),
        ("2abc", 1),
        ("007", 7),
        ("9" * 5000, sys.maxsize),
        ("-" + "9" * 5000, -sys.maxsize),
    ],
)
def test_parse_page(raw, expected):
    assert parse_page(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [(None, None), ("", None), ("x", None), ("0", None), ("2", 2), ("3.5", 3), ("9" * 5000, sys.maxsize)],
)
def test_parse_category_id(raw, expected):
    assert parse_category_id(raw) == expected
