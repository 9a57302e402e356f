from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field, JsonValue

from .accounts import AccountInfo
from .base import CommitInfo, GerritModel, QueryOptions, StrList, Timestamp, WebLinkInfo
from .groups import GroupBaseInfo


class ActionInfo(GerritModel):
    method: Optional[str] = None
    label: Optional[str] = None
    title: Optional[str] = None
    enabled: Optional[bool] = None


class FetchInfo(GerritModel):
    url: str
    ref: str
    commands: Optional[Dict[str, str]] = None


class FileInfo(GerritModel):
    status: Optional[str] = None
    binary: Optional[bool] = None
    old_path: Optional[str] = None
    lines_inserted: Optional[int] = None
    lines_deleted: Optional[int] = None
    size_delta: Optional[int] = None
    size: Optional[int] = None


class ApprovalInfo(AccountInfo):
    value: Optional[int] = None
    permitted_voting_range: Optional[Dict[str, int]] = None
    date: Optional[Timestamp] = None
    tag: Optional[str] = None
    post_submit: Optional[bool] = None


class LabelInfo(GerritModel):
    optional: Optional[bool] = None
    approved: Optional[AccountInfo] = None
    rejected: Optional[AccountInfo] = None
    recommended: Optional[AccountInfo] = None
    disliked: Optional[AccountInfo] = None
    blocking: Optional[bool] = None
    value: Optional[int] = None
    default_value: Optional[int] = None
    all: Optional[List[ApprovalInfo]] = None
    values: Optional[Dict[str, str]] = None


class ChangeMessageInfo(GerritModel):
    id: str
    author: Optional[AccountInfo] = None
    real_author: Optional[AccountInfo] = None
    date: Optional[Timestamp] = None
    message: Optional[str] = None
    tag: Optional[str] = None
    revision_number: Optional[int] = Field(default=None, alias="_revision_number")


class RevisionInfo(GerritModel):
    kind: Optional[str] = None
    number: Optional[int] = Field(default=None, alias="_number")
    created: Optional[Timestamp] = None
    uploader: Optional[AccountInfo] = None
    ref: Optional[str] = None
    fetch: Optional[Dict[str, FetchInfo]] = None
    commit: Optional[CommitInfo] = None
    files: Optional[Dict[str, FileInfo]] = None
    actions: Optional[Dict[str, ActionInfo]] = None
    reviewed: Optional[bool] = None
    commit_with_footers: Optional[str] = None
    push_certificate: Optional[JsonValue] = None
    description: Optional[str] = None


class AttentionSetInfo(GerritModel):
    account: AccountInfo
    last_update: Optional[Timestamp] = None
    reason: Optional[str] = None


class ProblemInfo(GerritModel):
    message: str
    status: Optional[str] = None
    outcome: Optional[str] = None


class ChangeInfo(GerritModel):
    id: str
    project: Optional[str] = None
    branch: Optional[str] = None
    topic: Optional[str] = None
    attention_set: Optional[Dict[str, AttentionSetInfo]] = None
    hashtags: Optional[List[str]] = None
    change_id: Optional[str] = None
    subject: Optional[str] = None
    status: Optional[str] = None
    created: Optional[Timestamp] = None
    updated: Optional[Timestamp] = None
    submitted: Optional[Timestamp] = None
    submitter: Optional[AccountInfo] = None
    starred: Optional[bool] = None
    reviewed: Optional[bool] = None
    submit_type: Optional[str] = None
    mergeable: Optional[bool] = None
    submittable: Optional[bool] = None
    insertions: Optional[int] = None
    deletions: Optional[int] = None
    unresolved_comment_count: Optional[int] = None
    total_comment_count: Optional[int] = None
    number: Optional[int] = Field(default=None, alias="_number")
    owner: Optional[AccountInfo] = None
    actions: Optional[Dict[str, ActionInfo]] = None
    labels: Optional[Dict[str, LabelInfo]] = None
    permitted_labels: Optional[Dict[str, List[str]]] = None
    removable_reviewers: Optional[List[AccountInfo]] = None
    reviewers: Optional[Dict[str, List[AccountInfo]]] = None
    messages: Optional[List[ChangeMessageInfo]] = None
    current_revision: Optional[str] = None
    revisions: Optional[Dict[str, RevisionInfo]] = None
    more_changes: Optional[bool] = Field(default=None, alias="_more_changes")
    problems: Optional[List[ProblemInfo]] = None
    is_private: Optional[bool] = None
    work_in_progress: Optional[bool] = None
    has_review_started: Optional[bool] = None
    revert_of: Optional[int] = None
    submission_id: Optional[str] = None
    cherry_pick_of_change: Optional[int] = None
    cherry_pick_of_patch_set: Optional[int] = None


class ChangeInput(GerritModel):
    project: str
    branch: str
    subject: str
    topic: Optional[str] = None
    status: Optional[str] = None
    is_private: Optional[bool] = None
    work_in_progress: Optional[bool] = None
    base_change: Optional[str] = None
    base_commit: Optional[str] = None
    new_branch: Optional[bool] = None
    merge: Optional[Dict[str, JsonValue]] = None
    notify: Optional[str] = None


class AbandonInput(GerritModel):
    message: Optional[str] = None
    notify: Optional[str] = None


class RestoreInput(GerritModel):
    message: Optional[str] = None


class RebaseInput(GerritModel):
    base: Optional[str] = None
    allow_conflicts: Optional[bool] = None


class RevertInput(GerritModel):
    message: Optional[str] = None
    notify: Optional[str] = None
    topic: Optional[str] = None


class SubmitInput(GerritModel):
    on_behalf_of: Optional[str] = None
    notify: Optional[str] = None


class TopicInput(GerritModel):
    topic: Optional[str] = None


class CommitMessageInput(GerritModel):
    message: str
    notify: Optional[str] = None


class WorkInProgressInput(GerritModel):
    message: Optional[str] = None


class HashtagsInput(GerritModel):
    add: Optional[List[str]] = None
    remove: Optional[List[str]] = None


class AttentionSetInput(GerritModel):
    user: Optional[str] = None
    reason: str
    notify: Optional[str] = None


class CommentRange(GerritModel):
    start_line: int
    start_character: int
    end_line: int
    end_character: int


class CommentInfo(GerritModel):
    patch_set: Optional[int] = None
    id: str
    path: Optional[str] = None
    side: Optional[str] = None
    parent: Optional[int] = None
    line: Optional[int] = None
    range: Optional[CommentRange] = None
    in_reply_to: Optional[str] = None
    message: Optional[str] = None
    updated: Optional[Timestamp] = None
    author: Optional[AccountInfo] = None
    tag: Optional[str] = None
    unresolved: Optional[bool] = None
    change_message_id: Optional[str] = None
    commit_id: Optional[str] = None


class CommentInput(GerritModel):
    id: Optional[str] = None
    path: Optional[str] = None
    side: Optional[str] = None
    line: Optional[int] = None
    range: Optional[CommentRange] = None
    in_reply_to: Optional[str] = None
    message: Optional[str] = None
    unresolved: Optional[bool] = None


class ReviewerInfo(AccountInfo):
    approvals: Optional[Dict[str, str]] = None


class SuggestedReviewerInfo(GerritModel):
    account: Optional[AccountInfo] = None
    group: Optional[GroupBaseInfo] = None
    count: Optional[int] = None


class ReviewerInput(GerritModel):
    reviewer: str
    state: Optional[str] = None
    confirmed: Optional[bool] = None
    notify: Optional[str] = None


class DeleteReviewerInput(GerritModel):
    notify: Optional[str] = None


class AddReviewerResult(GerritModel):
    input: Optional[str] = None
    reviewers: Optional[List[ReviewerInfo]] = None
    ccs: Optional[List[ReviewerInfo]] = None
    error: Optional[str] = None
    confirm: Optional[bool] = None


class ReviewInput(GerritModel):
    message: Optional[str] = None
    tag: Optional[str] = None
    labels: Optional[Dict[str, int]] = None
    comments: Optional[Dict[str, List[CommentInput]]] = None
    drafts: Optional[str] = None
    notify: Optional[str] = None
    omit_duplicate_comments: Optional[bool] = None
    on_behalf_of: Optional[str] = None
    ready: Optional[bool] = None
    work_in_progress: Optional[bool] = None


class ReviewResult(GerritModel):
    labels: Optional[Dict[str, int]] = None
    reviewers: Optional[Dict[str, AddReviewerResult]] = None
    ready: Optional[bool] = None
    error: Optional[str] = None


class MergeableInfo(GerritModel):
    submit_type: Optional[str] = None
    strategy: Optional[str] = None
    mergeable: bool = False
    commit_merged: Optional[bool] = None
    content_merged: Optional[bool] = None
    conflicts: Optional[List[str]] = None
    mergeable_into: Optional[List[str]] = None


class DiffFileMetaInfo(GerritModel):
    name: str
    content_type: Optional[str] = None
    lines: Optional[int] = None
    web_links: Optional[List[WebLinkInfo]] = None


class DiffContent(GerritModel):
    a: Optional[List[str]] = None
    b: Optional[List[str]] = None
    ab: Optional[List[str]] = None
    edit_a: Optional[JsonValue] = None
    edit_b: Optional[JsonValue] = None
    skip: Optional[int] = None
    common: Optional[bool] = None


class DiffWebLinkInfo(WebLinkInfo):
    show_on_side_by_side_diff_view: Optional[bool] = None
    show_on_unified_diff_view: Optional[bool] = None


class DiffInfo(GerritModel):
    meta_a: Optional[DiffFileMetaInfo] = None
    meta_b: Optional[DiffFileMetaInfo] = None
    change_type: Optional[str] = None
    intraline_status: Optional[str] = None
    diff_header: Optional[List[str]] = None
    content: List[DiffContent] = Field(default_factory=list)
    web_links: Optional[List[DiffWebLinkInfo]] = None
    binary: Optional[bool] = None


class RelatedChangeAndCommitInfo(GerritModel):
    project: Optional[str] = None
    change_id: Optional[str] = None
    commit: Optional[CommitInfo] = None
    change_number: Optional[int] = Field(default=None, alias="_change_number")
    revision_number: Optional[int] = Field(default=None, alias="_revision_number")
    current_revision_number: Optional[int] = Field(
        default=None, alias="_current_revision_number"
    )
    status: Optional[str] = None


class RelatedChangesInfo(GerritModel):
    changes: List[RelatedChangeAndCommitInfo] = Field(default_factory=list)


class EditInfo(GerritModel):
    commit: CommitInfo
    base_patch_set_number: Optional[int] = None
    base_revision: Optional[str] = None
    ref: Optional[str] = None
    fetch: Optional[Dict[str, FetchInfo]] = None
    files: Optional[Dict[str, FileInfo]] = None


class EditFileInfo(GerritModel):
    web_links: Optional[List[WebLinkInfo]] = None


class PublishChangeEditInput(GerritModel):
    notify: Optional[str] = None


class ChangeOptions(GerritModel):
    additional_fields: Optional[StrList] = Field(default=None, alias="o")


class QueryChangeOptions(QueryOptions):
    skip: Optional[int] = Field(default=None, alias="S")
    start: Optional[int] = None
    additional_fields: Optional[StrList] = Field(default=None, alias="o")


class ChangeEditDetailOptions(GerritModel):
    list: Optional[bool] = None
    base: Optional[str] = None
    download_commands: Optional[bool] = Field(default=None, alias="download-commands")


class DiffOptions(GerritModel):
    intraline: Optional[bool] = None
    base: Optional[str] = None
    weblinks_only: Optional[bool] = Field(default=None, alias="weblinks-only")
    ignore_whitespace: Optional[str] = Field(default=None, alias="ignore-whitespace")
    context: Optional[str] = None


class CommitOptions(GerritModel):
    weblinks: Optional[bool] = Field(default=None, alias="links")


class MergeableOptions(GerritModel):
    other_branches: Optional[bool] = Field(default=None, alias="other-branches")


class FilesOptions(GerritModel):
    """``base`` and ``parent`` pick the diff base; ``query`` filters by path substring."""

    base: Optional[str] = None
    parent: Optional[int] = None
    query: Optional[str] = Field(default=None, alias="q")


class PatchOptions(GerritModel):
    zip: Optional[bool] = None
    download: Optional[bool] = None
    path: Optional[str] = None


__all__ = [
    "AbandonInput",
    "ActionInfo",
    "AddReviewerResult",
    "ApprovalInfo",
    "AttentionSetInfo",
    "AttentionSetInput",
    "ChangeEditDetailOptions",
    "ChangeInfo",
    "ChangeInput",
    "ChangeMessageInfo",
    "ChangeOptions",
    "CommentInfo",
    "CommentInput",
    "CommentRange",
    "CommitMessageInput",
    "CommitOptions",
    "DeleteReviewerInput",
    "DiffContent",
    "DiffFileMetaInfo",
    "DiffInfo",
    "DiffOptions",
    "DiffWebLinkInfo",
    "EditFileInfo",
    "EditInfo",
    "FetchInfo",
    "FileInfo",
    "FilesOptions",
    "HashtagsInput",
    "LabelInfo",
    "MergeableInfo",
    "MergeableOptions",
    "PatchOptions",
    "ProblemInfo",
    "PublishChangeEditInput",
    "QueryChangeOptions",
    "RebaseInput",
    "RelatedChangeAndCommitInfo",
    "RelatedChangesInfo",
    "RestoreInput",
    "RevertInput",
    "ReviewInput",
    "ReviewResult",
    "ReviewerInfo",
    "ReviewerInput",
    "RevisionInfo",
    "SubmitInput",
    "SuggestedReviewerInfo",
    "TopicInput",
    "WorkInProgressInput",
]
