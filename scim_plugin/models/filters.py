"""SCIM filter models"""

from pydantic import BaseModel, ConfigDict
from enum import Enum


class FilterOperator(str, Enum):
    """SCIM comparison operators supported by the plugin"""
    EQ = "eq"  # equal


class FilterComparison(BaseModel):
    """Single attribute comparison: attribute operator value"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    attribute: str
    operator: FilterOperator = FilterOperator.EQ
    value: str

    def to_query(self) -> str:
        """Encodes the comparison per the SCIM filter grammar (RFC 7644 §3.4.2.2)"""
        escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
        return f'{self.attribute} {self.operator.value} "{escaped}"'

    def __str__(self):
        return self.to_query()
