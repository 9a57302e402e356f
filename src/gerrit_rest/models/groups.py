from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .accounts import AccountInfo
from .base import GerritModel, StrList, Timestamp


class GroupOptionsInfo(GerritModel):
    visible_to_all: Optional[bool] = None


class GroupBaseInfo(GerritModel):
    id: str
    name: Optional[str] = None


class GroupInfo(GerritModel):
    id: str
    name: Optional[str] = None
    url: Optional[str] = None
    options: Optional[GroupOptionsInfo] = None
    description: Optional[str] = None
    group_id: Optional[int] = None
    owner: Optional[str] = None
    owner_id: Optional[str] = None
    created_on: Optional[Timestamp] = None
    more_groups: Optional[bool] = Field(default=None, alias="_more_groups")
    members: Optional[List[AccountInfo]] = None
    includes: Optional[List["GroupInfo"]] = None


class GroupInput(GerritModel):
    name: Optional[str] = None
    uuid: Optional[str] = None
    description: Optional[str] = None
    visible_to_all: Optional[bool] = None
    owner_id: Optional[str] = None
    members: Optional[List[str]] = None


class ListGroupsOptions(GerritModel):
    limit: Optional[int] = Field(default=None, alias="n")
    skip: Optional[int] = Field(default=None, alias="S")
    additional_fields: Optional[StrList] = Field(default=None, alias="o")
    owned: Optional[bool] = None
    project: Optional[StrList] = Field(default=None, alias="p")
    user: Optional[str] = None
    substring: Optional[str] = Field(default=None, alias="m")
    regex: Optional[str] = Field(default=None, alias="r")
    suggest: Optional[str] = None


class ListGroupMembersOptions(GerritModel):
    recursive: Optional[bool] = None


__all__ = [
    "GroupBaseInfo",
    "GroupInfo",
    "GroupInput",
    "GroupOptionsInfo",
    "ListGroupMembersOptions",
    "ListGroupsOptions",
]
