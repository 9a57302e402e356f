from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field

from .base import GerritModel, GitPersonInfo, ListOptions, StrList, Timestamp, WebLinkInfo


class LabelTypeInfo(GerritModel):
    values: Dict[str, str] = Field(default_factory=dict)
    default_value: Optional[int] = None


class ProjectInfo(GerritModel):
    id: str
    name: Optional[str] = None
    parent: Optional[str] = None
    description: Optional[str] = None
    state: Optional[str] = None
    branches: Optional[Dict[str, str]] = None
    labels: Optional[Dict[str, LabelTypeInfo]] = None
    web_links: Optional[List[WebLinkInfo]] = None


class ProjectInput(GerritModel):
    name: Optional[str] = None
    parent: Optional[str] = None
    description: Optional[str] = None
    permissions_only: Optional[bool] = None
    create_empty_commit: Optional[bool] = None
    submit_type: Optional[str] = None
    branches: Optional[List[str]] = None
    owners: Optional[List[str]] = None
    use_contributor_agreements: Optional[str] = None
    use_signed_off_by: Optional[str] = None
    create_new_change_for_all_not_in_target: Optional[str] = None
    use_content_merge: Optional[str] = None
    require_change_id: Optional[str] = None
    max_object_size_limit: Optional[str] = None


class ProjectDescriptionInput(GerritModel):
    description: Optional[str] = None
    commit_message: Optional[str] = None


class ProjectParentInput(GerritModel):
    parent: str
    commit_message: Optional[str] = None


class HeadInput(GerritModel):
    ref: str


class BranchInfo(GerritModel):
    ref: str
    revision: Optional[str] = None
    can_delete: Optional[bool] = None
    web_links: Optional[List[WebLinkInfo]] = None


class BranchInput(GerritModel):
    ref: Optional[str] = None
    revision: Optional[str] = None


class DeleteBranchesInput(GerritModel):
    branches: List[str]


class ReflogEntryInfo(GerritModel):
    old_id: str
    new_id: str
    who: Optional[GitPersonInfo] = None
    comment: Optional[str] = None


class TagInfo(GerritModel):
    ref: str
    revision: Optional[str] = None
    object: Optional[str] = None
    message: Optional[str] = None
    tagger: Optional[GitPersonInfo] = None
    created: Optional[Timestamp] = None
    can_delete: Optional[bool] = None
    web_links: Optional[List[WebLinkInfo]] = None


class TagInput(GerritModel):
    ref: Optional[str] = None
    revision: Optional[str] = None
    message: Optional[str] = None


class DeleteTagsInput(GerritModel):
    tags: List[str]


class IncludedInInfo(GerritModel):
    branches: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    external: Optional[Dict[str, List[str]]] = None


class LabelDefinitionInfo(GerritModel):
    name: str
    description: Optional[str] = None
    project_name: Optional[str] = None
    function: Optional[str] = None
    values: Optional[Dict[str, str]] = None
    default_value: Optional[int] = None
    branches: Optional[List[str]] = None
    can_override: Optional[bool] = None
    copy_condition: Optional[str] = None
    allow_post_submit: Optional[bool] = None
    ignore_self_approval: Optional[bool] = None


class LabelDefinitionInput(GerritModel):
    name: Optional[str] = None
    commit_message: Optional[str] = None
    description: Optional[str] = None
    function: Optional[str] = None
    values: Optional[Dict[str, str]] = None
    default_value: Optional[int] = None
    branches: Optional[List[str]] = None
    can_override: Optional[bool] = None
    copy_condition: Optional[str] = None
    unset_copy_condition: Optional[bool] = None
    allow_post_submit: Optional[bool] = None
    ignore_self_approval: Optional[bool] = None


class DeleteLabelInput(GerritModel):
    commit_message: Optional[str] = None


class BatchLabelInput(GerritModel):
    commit_message: Optional[str] = None
    delete: Optional[List[str]] = None
    create: Optional[List[LabelDefinitionInput]] = None
    update: Optional[Dict[str, LabelDefinitionInput]] = None


class ProjectOptions(GerritModel):
    """Query parameters of ``GET /projects/``."""

    branch: Optional[StrList] = Field(default=None, alias="b")
    description: Optional[bool] = Field(default=None, alias="d")
    limit: Optional[int] = Field(default=None, alias="n")
    prefix: Optional[str] = Field(default=None, alias="p")
    regex: Optional[str] = Field(default=None, alias="r")
    skip: Optional[int] = Field(default=None, alias="S")
    substring: Optional[str] = Field(default=None, alias="m")
    tree: Optional[bool] = Field(default=None, alias="t")
    type: Optional[str] = None
    state: Optional[str] = None


class BranchOptions(ListOptions):
    substring: Optional[str] = Field(default=None, alias="m")
    regex: Optional[str] = Field(default=None, alias="r")


class TagOptions(BranchOptions):
    pass


__all__ = [
    "BatchLabelInput",
    "BranchInfo",
    "BranchInput",
    "BranchOptions",
    "DeleteBranchesInput",
    "DeleteLabelInput",
    "DeleteTagsInput",
    "HeadInput",
    "IncludedInInfo",
    "LabelDefinitionInfo",
    "LabelDefinitionInput",
    "LabelTypeInfo",
    "ProjectDescriptionInput",
    "ProjectInfo",
    "ProjectInput",
    "ProjectOptions",
    "ProjectParentInput",
    "ReflogEntryInfo",
    "TagInfo",
    "TagInput",
    "TagOptions",
]
