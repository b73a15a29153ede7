"""SCIM filter construction from host requests"""

from typing import Optional

from ..models.filters import FilterComparison, FilterOperator


DEFAULT_FILTER_ATTRIBUTE = "displayName"
DEFAULT_USERS_FILTER_ATTRIBUTE = DEFAULT_FILTER_ATTRIBUTE
DEFAULT_GROUPS_FILTER_ATTRIBUTE = DEFAULT_FILTER_ATTRIBUTE


def build_filter(
    default_attribute: str,
    value: str,
    override: Optional[str] = None
) -> FilterComparison:
    """
    Builds an equality filter on a single attribute.

    The override wins whenever it is set, including the empty string; it is
    not checked against the backend schema. The value is passed through
    verbatim, encoding happens when the filter is sent.
    """
    attribute = default_attribute if override is None else override
    return FilterComparison(
        attribute=attribute,
        operator=FilterOperator.EQ,
        value=value
    )
