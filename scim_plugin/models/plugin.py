"""Plugin configuration and host request/response models"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, field_validator
from typing import List, Literal, Optional


class ConnectionParams(BaseModel):
    """Connection parameters of the SCIM backend"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    host: str
    client_id: str = Field(
        "",
        validation_alias=AliasChoices("clientId", "clientid", "client_id")
    )
    client_secret: SecretStr = Field(
        SecretStr(""),
        validation_alias=AliasChoices("clientSecret", "clientsecret", "client_secret")
    )
    search_method: Literal["POST", "GET"] = Field(
        "POST",
        validation_alias=AliasChoices("searchMethod", "searchmethod", "search_method")
    )

    @field_validator("search_method", mode="before")
    @classmethod
    def _upper_method(cls, value):
        return value.upper() if isinstance(value, str) else value


class RequestParams(BaseModel):
    """Filter attribute overrides; None means the default attribute is used"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    group_attribute: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("groupAttribute", "groupattribute", "group_attribute")
    )
    user_attribute: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("userAttribute", "userattribute", "user_attribute")
    )


class PluginConfig(BaseModel):
    """Plugin configuration as delivered by the host"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    connect_cfg: ConnectionParams = Field(
        validation_alias=AliasChoices("connectCfg", "connectcfg", "connect_cfg")
    )
    request_params: RequestParams = Field(
        default_factory=RequestParams,
        validation_alias=AliasChoices("requestParams", "requestparams", "request_params")
    )

    @field_validator("request_params", mode="before")
    @classmethod
    def _empty_request_params(cls, value):
        # "requestParams:" with no children parses as null
        return {} if value is None else value


class ConfigureRequest(BaseModel):
    """Host request carrying the YAML plugin configuration"""
    model_config = ConfigDict(populate_by_name=True)

    yaml_configuration: str = Field(alias="yamlConfiguration")


class ConfigureResponse(BaseModel):
    """Empty acknowledgement of a successful configuration"""


class IdentityUser(BaseModel):
    """User as exposed to the host"""
    name: str


class IdentityGroup(BaseModel):
    """Group as exposed to the host"""
    name: str


class GetUsersForGroupResponse(BaseModel):
    """Users of a group, in backend order"""
    users: List[IdentityUser] = Field(default_factory=list)


class GetGroupsForUserResponse(BaseModel):
    """Groups of a user, in backend order"""
    groups: List[IdentityGroup] = Field(default_factory=list)
