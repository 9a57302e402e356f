from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field

from .base import GerritModel, StrList, WebLinkInfo
from .groups import GroupInfo
from .projects import ProjectInfo


class PermissionRuleInfo(GerritModel):
    action: str
    force: Optional[bool] = None
    min: Optional[int] = None
    max: Optional[int] = None


class PermissionInfo(GerritModel):
    label: Optional[str] = None
    exclusive: Optional[bool] = None
    rules: Dict[str, PermissionRuleInfo] = Field(default_factory=dict)


class AccessSectionInfo(GerritModel):
    permissions: Dict[str, PermissionInfo] = Field(default_factory=dict)


class ProjectAccessInfo(GerritModel):
    revision: Optional[str] = None
    inherits_from: Optional[ProjectInfo] = None
    local: Dict[str, AccessSectionInfo] = Field(default_factory=dict)
    is_owner: Optional[bool] = None
    owner_of: List[str] = Field(default_factory=list)
    can_upload: Optional[bool] = None
    can_add: Optional[bool] = None
    can_add_tags: Optional[bool] = None
    config_visible: Optional[bool] = None
    groups: Optional[Dict[str, GroupInfo]] = None
    config_web_links: Optional[List[WebLinkInfo]] = None


class ListAccessRightsOptions(GerritModel):
    project: Optional[StrList] = None


__all__ = [
    "AccessSectionInfo",
    "ListAccessRightsOptions",
    "PermissionInfo",
    "PermissionRuleInfo",
    "ProjectAccessInfo",
]
