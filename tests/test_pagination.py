"""Tests for pagination and page range selection."""

import pytest

from compositor.pagination import paginate, parse_page_range, select_pages


def test_paginate_splits_into_fixed_chunks():
    assert paginate("abcdefg", 3) == ["abc", "def", "g"]


def test_paginate_exact_multiple_has_no_empty_tail():
    assert paginate("abcdef", 3) == ["abc", "def"]


def test_paginate_empty_text():
    assert paginate("", 5) == []


def test_paginate_page_larger_than_text():
    assert paginate("abc", 100) == ["abc"]


def test_paginate_rejects_non_positive_size():
    with pytest.raises(ValueError):
        paginate("abc", 0)
    with pytest.raises(ValueError):
        paginate("abc", -2)


def test_pages_concatenate_back_to_text():
    text = "The quick brown fox jumps over the lazy dog" * 7
    pages = paginate(text, 17)
    assert "".join(pages) == text
    assert all(len(p) == 17 for p in pages[:-1])
    assert 1 <= len(pages[-1]) <= 17


def test_select_all_when_range_empty():
    pages = ["a", "b", "c"]
    assert select_pages(pages, "") == pages
    assert select_pages(pages, "   ") == pages


def test_select_keeps_requested_order_with_duplicates():
    pages = ["p1", "p2", "p3"]
    assert select_pages(pages, "2,1-1") == ["p2", "p1"]
    assert select_pages(pages, "1,1") == ["p1", "p1"]
    assert select_pages(pages, "3,1-2,2") == ["p3", "p1", "p2", "p2"]


def test_select_skips_invalid_tokens():
    pages = ["p1", "p2", "p3"]
    assert select_pages(pages, "x,2,,1-a,-1,0") == ["p2"]


def test_select_skips_pages_past_the_end():
    pages = ["p1", "p2", "p3"]
    assert select_pages(pages, "5,2-6") == ["p2", "p3"]


def test_reversed_range_selects_nothing():
    assert parse_page_range("3-1", 5) == []


def test_parse_page_range_allows_spaces():
    assert parse_page_range(" 1 , 2 - 3 ", 4) == [0, 1, 2]


def test_parse_page_range_with_no_pages():
    assert parse_page_range("", 0) == []
    assert parse_page_range("1", 0) == []
