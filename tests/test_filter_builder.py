"""Tests for filter construction and its SCIM encoding"""

import pytest

from scim_plugin.models.filters import FilterComparison, FilterOperator
from scim_plugin.services.filter_builder import DEFAULT_FILTER_ATTRIBUTE, build_filter


@pytest.mark.parametrize("override, expected", [
    (None, "displayName"),
    ("externalId", "externalId"),
    ("", ""),
    ("Non-existent", "Non-existent"),
])
def test_override_wins_when_set(override, expected):
    f = build_filter(DEFAULT_FILTER_ATTRIBUTE, "KeyAdmin", override)
    assert f.attribute == expected
    assert f.operator is FilterOperator.EQ


@pytest.mark.parametrize("value", ["", "KeyAdmin", 'a "quoted" \\ value', "  padded  ", "Ünïcödé"])
def test_value_is_kept_verbatim(value):
    assert build_filter("displayName", value).value == value


def test_default_override_is_unset():
    assert build_filter("userName", "jdoe").attribute == "userName"


def test_query_encoding():
    f = FilterComparison(attribute="displayName", value="KeyAdmin")
    assert f.to_query() == 'displayName eq "KeyAdmin"'
    assert str(f) == f.to_query()


def test_query_encoding_escapes_quotes_and_backslashes():
    f = build_filter("displayName", 'say "hi" \\o/')
    assert f.to_query() == 'displayName eq "say \\"hi\\" \\\\o/"'
