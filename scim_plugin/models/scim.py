"""SCIM data models per RFC 7643/7644"""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from typing import Optional, List, Dict, Any, Generic, Literal, TypeVar
from datetime import datetime
from enum import Enum


def _default_if_null(model: type, value: Any, info: ValidationInfo) -> Any:
    """Replaces an explicit JSON null with the field default"""
    if value is None:
        return model.model_fields[info.field_name].get_default(call_default_factory=True)
    return value


class SCIMSchema(str, Enum):
    """SCIM schemas"""
    USER = "urn:ietf:params:scim:schemas:core:2.0:User"
    GROUP = "urn:ietf:params:scim:schemas:core:2.0:Group"
    LIST_RESPONSE = "urn:ietf:params:scim:api:messages:2.0:ListResponse"
    SEARCH_REQUEST = "urn:ietf:params:scim:api:messages:2.0:SearchRequest"
    ERROR = "urn:ietf:params:scim:api:messages:2.0:Error"


class Email(BaseModel):
    """User email address"""
    value: Optional[str] = None
    type: Optional[str] = None
    primary: Optional[bool] = False


class Name(BaseModel):
    """User name"""
    formatted: Optional[str] = None
    familyName: Optional[str] = None
    givenName: Optional[str] = None
    middleName: Optional[str] = None
    honorificPrefix: Optional[str] = None
    honorificSuffix: Optional[str] = None


class Meta(BaseModel):
    """Resource metadata"""
    resourceType: Optional[str] = None
    created: Optional[datetime] = None
    lastModified: Optional[datetime] = None
    location: Optional[str] = None
    version: Optional[str] = None


class GroupMember(BaseModel):
    """SCIM group member"""
    model_config = ConfigDict(populate_by_name=True)

    value: Optional[str] = None  # user or group id
    ref: Optional[str] = Field(None, alias="$ref")
    type: Optional[str] = None  # User or Group
    display: Optional[str] = None


class User(BaseModel):
    """SCIM user; provider-specific fields and schema extensions are kept as extras"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = None
    externalId: Optional[str] = None
    userName: Optional[str] = None
    displayName: Optional[str] = None
    active: Optional[bool] = None
    emails: List[Email] = Field(default_factory=list)
    name: Optional[Name] = None
    userType: Optional[str] = None
    meta: Optional[Meta] = None
    schemas: List[str] = Field(default_factory=lambda: [SCIMSchema.USER.value])

    @field_validator("emails", "schemas", mode="before")
    @classmethod
    def _null_lists(cls, value, info: ValidationInfo):
        return _default_if_null(cls, value, info)


class Group(BaseModel):
    """SCIM group"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = None
    externalId: Optional[str] = None
    displayName: Optional[str] = None
    members: List[GroupMember] = Field(default_factory=list)
    meta: Optional[Meta] = None
    schemas: List[str] = Field(default_factory=lambda: [SCIMSchema.GROUP.value])

    @field_validator("members", "schemas", mode="before")
    @classmethod
    def _null_lists(cls, value, info: ValidationInfo):
        return _default_if_null(cls, value, info)


ResourceT = TypeVar("ResourceT")


class ListResponse(BaseModel, Generic[ResourceT]):
    """SCIM list response; only Resources is consumed, the paging fields are informational"""
    model_config = ConfigDict(extra="allow")

    schemas: List[str] = Field(default_factory=lambda: [SCIMSchema.LIST_RESPONSE.value])
    totalResults: int = 0
    startIndex: int = 1
    itemsPerPage: Optional[int] = None
    Resources: List[ResourceT] = Field(default_factory=list)

    @field_validator("schemas", "totalResults", "startIndex", "Resources", mode="before")
    @classmethod
    def _null_fields(cls, value, info: ValidationInfo):
        return _default_if_null(cls, value, info)


class PageParams(BaseModel):
    """Index-based pagination (RFC 7644 §3.4.2.4)"""
    model_config = ConfigDict(frozen=True)

    start_index: int = Field(1, ge=1)
    count: int = Field(100, ge=0)

    def to_query(self) -> Dict[str, Any]:
        return {"startIndex": self.start_index, "count": self.count}


class SortParams(BaseModel):
    """Sorting (RFC 7644 §3.4.2.3)"""
    model_config = ConfigDict(frozen=True)

    sort_by: str
    sort_order: Literal["ascending", "descending"] = "ascending"

    def to_query(self) -> Dict[str, Any]:
        return {"sortBy": self.sort_by, "sortOrder": self.sort_order}


class SCIMError(BaseModel):
    """SCIM error"""
    schemas: List[str] = Field(default_factory=lambda: [SCIMSchema.ERROR.value])
    status: int
    scimType: Optional[str] = None
    detail: Optional[str] = None
