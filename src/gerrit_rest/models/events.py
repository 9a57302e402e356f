"""
Records of the events-log plugin and ``gerrit stream-events``.

These differ from the REST records: accounts carry no ``_account_id``,
timestamps are epoch seconds, and change or patch set numbers may be sent as
strings.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field, JsonValue

from .base import GerritModel, Number


class EventAccount(GerritModel):
    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None


class TrackingID(GerritModel):
    system: Optional[str] = None
    id: Optional[str] = None


class EventApproval(GerritModel):
    type: Optional[str] = None
    description: Optional[str] = None
    value: Optional[Number] = None
    old_value: Optional[Number] = Field(default=None, alias="oldValue")
    granted_on: Optional[int] = Field(default=None, alias="grantedOn")
    by: Optional[EventAccount] = None


class PatchSetComment(GerritModel):
    file: Optional[str] = None
    line: Optional[Number] = None
    reviewer: Optional[EventAccount] = None
    message: Optional[str] = None


class EventFile(GerritModel):
    file: Optional[str] = None
    file_old: Optional[str] = Field(default=None, alias="fileOld")
    type: Optional[str] = None
    insertions: Optional[int] = None
    deletions: Optional[int] = None


class EventPatchSet(GerritModel):
    number: Optional[Number] = None
    revision: Optional[str] = None
    parents: Optional[List[str]] = None
    ref: Optional[str] = None
    uploader: Optional[EventAccount] = None
    author: Optional[EventAccount] = None
    created_on: Optional[int] = Field(default=None, alias="createdOn")
    kind: Optional[str] = None
    is_draft: Optional[bool] = Field(default=None, alias="isDraft")
    approvals: Optional[List[EventApproval]] = None
    comments: Optional[List[PatchSetComment]] = None
    files: Optional[List[EventFile]] = None
    size_insertions: Optional[int] = Field(default=None, alias="sizeInsertions")
    size_deletions: Optional[int] = Field(default=None, alias="sizeDeletions")


class EventMessage(GerritModel):
    timestamp: Optional[int] = None
    reviewer: Optional[EventAccount] = None
    message: Optional[str] = None


class Dependency(GerritModel):
    id: Optional[str] = None
    number: Optional[Number] = None
    revision: Optional[str] = None
    ref: Optional[str] = None
    is_current_patch_set: Optional[bool] = Field(
        default=None, alias="isCurrentPatchSet"
    )


class SubmitLabel(GerritModel):
    label: Optional[str] = None
    status: Optional[str] = None
    by: Optional[EventAccount] = None


class SubmitRequirement(GerritModel):
    fallback_text: Optional[str] = Field(default=None, alias="fallbackText")
    type: Optional[str] = None
    data: Optional[JsonValue] = None


class SubmitRecord(GerritModel):
    status: Optional[str] = None
    labels: Optional[List[SubmitLabel]] = None
    requirements: Optional[List[SubmitRequirement]] = None


class EventChange(GerritModel):
    project: Optional[str] = None
    branch: Optional[str] = None
    topic: Optional[str] = None
    id: Optional[str] = None
    number: Optional[Number] = None
    subject: Optional[str] = None
    owner: Optional[EventAccount] = None
    url: Optional[str] = None
    commit_message: Optional[str] = Field(default=None, alias="commitMessage")
    hashtags: Optional[List[str]] = None
    created_on: Optional[int] = Field(default=None, alias="createdOn")
    last_updated: Optional[int] = Field(default=None, alias="lastUpdated")
    open: Optional[bool] = None
    status: Optional[str] = None
    private: Optional[bool] = None
    wip: Optional[bool] = None
    comments: Optional[List[EventMessage]] = None
    tracking_ids: Optional[List[TrackingID]] = Field(default=None, alias="trackingIds")
    current_patch_set: Optional[EventPatchSet] = Field(
        default=None, alias="currentPatchSet"
    )
    patch_sets: Optional[List[EventPatchSet]] = Field(default=None, alias="patchSets")
    depends_on: Optional[List[Dependency]] = Field(default=None, alias="dependsOn")
    needed_by: Optional[List[Dependency]] = Field(default=None, alias="neededBy")
    submit_records: Optional[List[SubmitRecord]] = Field(
        default=None, alias="submitRecords"
    )
    all_reviewers: Optional[List[EventAccount]] = Field(
        default=None, alias="allReviewers"
    )


class RefUpdate(GerritModel):
    old_rev: Optional[str] = Field(default=None, alias="oldRev")
    new_rev: Optional[str] = Field(default=None, alias="newRev")
    ref_name: Optional[str] = Field(default=None, alias="refName")
    project: Optional[str] = None


class EventInfo(GerritModel):
    """One event; which optional fields are set depends on ``type``."""

    type: str
    change: Optional[EventChange] = None
    patch_set: Optional[EventPatchSet] = Field(default=None, alias="patchSet")
    event_created_on: Optional[int] = Field(default=None, alias="eventCreatedOn")

    abandoner: Optional[EventAccount] = None
    adder: Optional[EventAccount] = None
    author: Optional[EventAccount] = None
    changer: Optional[EventAccount] = None
    deleter: Optional[EventAccount] = None
    editor: Optional[EventAccount] = None
    remover: Optional[EventAccount] = None
    restorer: Optional[EventAccount] = None
    reviewer: Optional[EventAccount] = None
    submitter: Optional[EventAccount] = None
    uploader: Optional[EventAccount] = None

    reason: Optional[str] = None
    new_rev: Optional[str] = Field(default=None, alias="newRev")
    approvals: Optional[List[EventApproval]] = None
    comment: Optional[str] = None
    added: Optional[List[str]] = None
    removed: Optional[List[str]] = None
    hashtags: Optional[List[str]] = None
    project: Optional[str] = None
    project_name: Optional[str] = Field(default=None, alias="projectName")
    project_head: Optional[str] = Field(default=None, alias="projectHead")
    ref_update: Optional[RefUpdate] = Field(default=None, alias="refUpdate")
    ref_updates: Optional[List[RefUpdate]] = Field(default=None, alias="refUpdates")
    old_topic: Optional[str] = Field(default=None, alias="oldTopic")
    old_head: Optional[str] = Field(default=None, alias="oldHead")
    new_head: Optional[str] = Field(default=None, alias="newHead")


class EventsLogOptions(GerritModel):
    """Time window for the events-log plugin; naive datetimes are sent as-is."""

    since: Optional[datetime] = None
    until: Optional[datetime] = None
    ignore_event_errors: bool = False


class EventsLogResult(GerritModel):
    events: List[EventInfo] = Field(default_factory=list)
    failed_lines: List[str] = Field(default_factory=list)


__all__ = [
    "Dependency",
    "EventAccount",
    "EventApproval",
    "EventChange",
    "EventFile",
    "EventInfo",
    "EventMessage",
    "EventPatchSet",
    "EventsLogOptions",
    "EventsLogResult",
    "PatchSetComment",
    "RefUpdate",
    "SubmitLabel",
    "SubmitRecord",
    "SubmitRequirement",
    "TrackingID",
]
