from __future__ import annotations

import base64
import io
from typing import BinaryIO, Dict, List, Optional

from gerrit_rest.core.client import GerritClient
from gerrit_rest.core.errors import GerritParseError
from gerrit_rest.core.urls import expand_path, options_to_params
from gerrit_rest.models.base import CommitInfo
from gerrit_rest.models.changes import (
    ActionInfo,
    ChangeInfo,
    CommentInfo,
    CommitOptions,
    DiffInfo,
    DiffOptions,
    FileInfo,
    FilesOptions,
    MergeableInfo,
    MergeableOptions,
    PatchOptions,
    RelatedChangesInfo,
    ReviewInput,
    ReviewResult,
)


def _revision_path(template: str, change_id: str, revision_id: str, *rest: str) -> str:
    return expand_path(
        "changes/{}/revisions/{}/" + template, change_id, revision_id, *rest
    )


async def get_commit(
    client: GerritClient,
    change_id: str,
    revision_id: str,
    options: Optional[CommitOptions] = None,
) -> CommitInfo:
    return await client.get(
        _revision_path("commit", change_id, revision_id),
        options=options,
        result=CommitInfo,
    )


async def get_diff(
    client: GerritClient,
    change_id: str,
    revision_id: str,
    file_id: str,
    options: Optional[DiffOptions] = None,
) -> DiffInfo:
    return await client.get(
        _revision_path("files/{}/diff", change_id, revision_id, file_id),
        options=options,
        result=DiffInfo,
    )


async def get_related_changes(
    client: GerritClient, change_id: str, revision_id: str
) -> RelatedChangesInfo:
    """Changes that depend on, or are dependencies of, the revision."""
    return await client.get(
        _revision_path("related", change_id, revision_id), result=RelatedChangesInfo
    )


async def get_review(
    client: GerritClient, change_id: str, revision_id: str
) -> ChangeInfo:
    return await client.get(
        _revision_path("review", change_id, revision_id), result=ChangeInfo
    )


async def set_review(
    client: GerritClient, change_id: str, revision_id: str, review: ReviewInput
) -> ReviewResult:
    """Post a review: votes, a message and/or inline comments."""
    return await client.post(
        _revision_path("review", change_id, revision_id), review, result=ReviewResult
    )


async def get_mergeable(
    client: GerritClient,
    change_id: str,
    revision_id: str,
    options: Optional[MergeableOptions] = None,
) -> MergeableInfo:
    return await client.get(
        _revision_path("mergeable", change_id, revision_id),
        options=options,
        result=MergeableInfo,
    )


async def get_submit_type(client: GerritClient, change_id: str, revision_id: str) -> str:
    return await client.get(
        _revision_path("submit_type", change_id, revision_id), result=str
    )


async def get_revision_actions(
    client: GerritClient, change_id: str, revision_id: str
) -> Dict[str, ActionInfo]:
    return await client.get(
        _revision_path("actions", change_id, revision_id),
        result=Dict[str, ActionInfo],
    )


async def list_files(
    client: GerritClient,
    change_id: str,
    revision_id: str,
    options: Optional[FilesOptions] = None,
) -> Dict[str, FileInfo]:
    """Files touched by the revision, keyed by path."""
    return await client.get(
        _revision_path("files/", change_id, revision_id),
        options=options,
        result=Dict[str, FileInfo],
    )


async def list_files_reviewed(
    client: GerritClient,
    change_id: str,
    revision_id: str,
    options: Optional[FilesOptions] = None,
) -> List[str]:
    """Paths the caller has marked as reviewed."""
    params = options_to_params(options) if options is not None else {}
    params["reviewed"] = True
    return await client.get(
        _revision_path("files/", change_id, revision_id),
        options=params,
        result=List[str],
    )


async def list_revision_comments(
    client: GerritClient, change_id: str, revision_id: str
) -> Dict[str, List[CommentInfo]]:
    return await client.get(
        _revision_path("comments/", change_id, revision_id),
        result=Dict[str, List[CommentInfo]],
    )


async def list_revision_drafts(
    client: GerritClient, change_id: str, revision_id: str
) -> Dict[str, List[CommentInfo]]:
    """Draft comments of the calling user, keyed by file path."""
    return await client.get(
        _revision_path("drafts/", change_id, revision_id),
        result=Dict[str, List[CommentInfo]],
    )


async def get_comment(
    client: GerritClient, change_id: str, revision_id: str, comment_id: str
) -> CommentInfo:
    return await client.get(
        _revision_path("comments/{}", change_id, revision_id, comment_id),
        result=CommentInfo,
    )


async def get_draft(
    client: GerritClient, change_id: str, revision_id: str, draft_id: str
) -> CommentInfo:
    return await client.get(
        _revision_path("drafts/{}", change_id, revision_id, draft_id),
        result=CommentInfo,
    )


async def get_patch(
    client: GerritClient,
    change_id: str,
    revision_id: str,
    options: Optional[PatchOptions] = None,
    *,
    sink: Optional[BinaryIO] = None,
) -> Optional[str]:
    """
    Formatted patch of the revision.

    With ``sink`` the body is copied there verbatim (base64 text, or zip bytes
    when ``zip=True``) and None is returned. Without it the base64 body is
    decoded and the patch text returned.
    """
    path = _revision_path("patch", change_id, revision_id)
    if sink is not None:
        await client.call("GET", path, options=options, result=sink)
        return None

    buffer = io.BytesIO()
    response = await client.call("GET", path, options=options, result=buffer)
    try:
        return base64.b64decode(buffer.getvalue()).decode("utf-8")
    except ValueError as exc:
        raise GerritParseError(
            f"Patch of {change_id}/{revision_id} is not base64 encoded text",
            response=response,
        ) from exc
