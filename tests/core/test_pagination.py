# tests/core/test_pagination.py

import pytest

from restobar.core.exceptions import ValidationFailed
from restobar.core.pagination import Page, parse_list_params


def test_defaults():
    params = parse_list_params({}, "es")
    assert params.per_page == 15
    assert params.page == 1
    assert params.search is None and params.state is None


def test_blank_query_values_are_ignored():
    params = parse_list_params({"per_page": "", "page": " ", "search": "", "state": "true"}, "es")
    assert params.per_page == 15
    assert params.page == 1
    assert params.state is True


def test_invalid_values_raise_field_errors():
    with pytest.raises(ValidationFailed) as excinfo:
        parse_list_params({"per_page": "0", "page": "abc"}, "en")
    assert set(excinfo.value.errors) == {"per_page", "page"}

    with pytest.raises(ValidationFailed):
        parse_list_params({"per_page": "101"}, "en")


@pytest.mark.parametrize(
    "total, per_page, last_page",
    [(0, 15, 1), (15, 15, 1), (16, 15, 2), (31, 10, 4)],
)
def test_last_page(total, per_page, last_page):
    assert Page(items=[], total=total, per_page=per_page, current_page=1).last_page == last_page
