from __future__ import annotations

from typing import Dict, List, Optional

from gerrit_rest.core.client import GerritClient
from gerrit_rest.core.urls import expand_path
from gerrit_rest.models.base import QueryOptions
from gerrit_rest.models.changes import (
    AbandonInput,
    AddReviewerResult,
    AttentionSetInput,
    ChangeEditDetailOptions,
    ChangeInfo,
    ChangeInput,
    ChangeOptions,
    CommentInfo,
    CommitMessageInput,
    DeleteReviewerInput,
    EditFileInfo,
    EditInfo,
    HashtagsInput,
    PublishChangeEditInput,
    QueryChangeOptions,
    RebaseInput,
    RestoreInput,
    RevertInput,
    ReviewerInfo,
    ReviewerInput,
    SubmitInput,
    SuggestedReviewerInfo,
    TopicInput,
    WorkInProgressInput,
)


async def query_changes(
    client: GerritClient, options: QueryChangeOptions
) -> List[ChangeInfo]:
    """
    Search changes with Gerrit query syntax, e.g.
    ``QueryChangeOptions(query="status:open+is:watched", limit=2)``.
    ``+`` and ``:`` in the query reach the server unescaped. The last change
    carries ``more_changes`` when the result was truncated.
    """
    return await client.get("changes/", options=options, result=List[ChangeInfo])


async def get_change(
    client: GerritClient, change_id: str, options: Optional[ChangeOptions] = None
) -> ChangeInfo:
    return await client.get(
        expand_path("changes/{}", change_id), options=options, result=ChangeInfo
    )


async def get_change_detail(
    client: GerritClient, change_id: str, options: Optional[ChangeOptions] = None
) -> ChangeInfo:
    """Change with labels, detailed accounts, reviewer updates and messages."""
    return await client.get(
        expand_path("changes/{}/detail", change_id), options=options, result=ChangeInfo
    )


async def create_change(client: GerritClient, change: ChangeInput) -> ChangeInfo:
    return await client.post("changes/", change, result=ChangeInfo)


async def delete_change(client: GerritClient, change_id: str) -> None:
    await client.delete(expand_path("changes/{}", change_id))


async def abandon_change(
    client: GerritClient, change_id: str, abandon: Optional[AbandonInput] = None
) -> ChangeInfo:
    return await client.post(
        expand_path("changes/{}/abandon", change_id), abandon, result=ChangeInfo
    )


async def restore_change(
    client: GerritClient, change_id: str, restore: Optional[RestoreInput] = None
) -> ChangeInfo:
    return await client.post(
        expand_path("changes/{}/restore", change_id), restore, result=ChangeInfo
    )


async def rebase_change(
    client: GerritClient, change_id: str, rebase: Optional[RebaseInput] = None
) -> ChangeInfo:
    return await client.post(
        expand_path("changes/{}/rebase", change_id), rebase, result=ChangeInfo
    )


async def revert_change(
    client: GerritClient, change_id: str, revert: Optional[RevertInput] = None
) -> ChangeInfo:
    return await client.post(
        expand_path("changes/{}/revert", change_id), revert, result=ChangeInfo
    )


async def submit_change(
    client: GerritClient, change_id: str, submit: Optional[SubmitInput] = None
) -> ChangeInfo:
    return await client.post(
        expand_path("changes/{}/submit", change_id), submit, result=ChangeInfo
    )


async def set_commit_message(
    client: GerritClient, change_id: str, message: CommitMessageInput
) -> None:
    await client.put(expand_path("changes/{}/message", change_id), message)


async def set_ready_for_review(
    client: GerritClient, change_id: str, ready: Optional[WorkInProgressInput] = None
) -> None:
    await client.post(expand_path("changes/{}/ready", change_id), ready)


async def set_work_in_progress(
    client: GerritClient, change_id: str, wip: Optional[WorkInProgressInput] = None
) -> None:
    await client.post(expand_path("changes/{}/wip", change_id), wip)


# --- Topic, hashtags, attention set ---


async def get_topic(client: GerritClient, change_id: str) -> Optional[str]:
    return await client.get(expand_path("changes/{}/topic", change_id), result=str)


async def set_topic(
    client: GerritClient, change_id: str, topic: TopicInput
) -> Optional[str]:
    """Returns the new topic, or None when the topic was removed."""
    return await client.put(
        expand_path("changes/{}/topic", change_id), topic, result=str
    )


async def delete_topic(client: GerritClient, change_id: str) -> None:
    await client.delete(expand_path("changes/{}/topic", change_id))


async def get_hashtags(client: GerritClient, change_id: str) -> List[str]:
    return await client.get(
        expand_path("changes/{}/hashtags", change_id), result=List[str]
    )


async def set_hashtags(
    client: GerritClient, change_id: str, hashtags: HashtagsInput
) -> List[str]:
    """Add and/or remove hashtags; returns the resulting hashtags."""
    return await client.post(
        expand_path("changes/{}/hashtags", change_id), hashtags, result=List[str]
    )


async def remove_attention(
    client: GerritClient,
    change_id: str,
    account_id: str,
    attention: AttentionSetInput,
) -> None:
    await client.delete(
        expand_path("changes/{}/attention/{}", change_id, account_id), attention
    )


async def list_change_comments(
    client: GerritClient, change_id: str
) -> Dict[str, List[CommentInfo]]:
    """Published comments of all revisions, keyed by file path."""
    return await client.get(
        expand_path("changes/{}/comments", change_id),
        result=Dict[str, List[CommentInfo]],
    )


# --- Reviewers ---


async def list_reviewers(client: GerritClient, change_id: str) -> List[ReviewerInfo]:
    return await client.get(
        expand_path("changes/{}/reviewers/", change_id), result=List[ReviewerInfo]
    )


async def get_reviewer(
    client: GerritClient, change_id: str, account_id: str
) -> ReviewerInfo:
    return await client.get(
        expand_path("changes/{}/reviewers/{}", change_id, account_id),
        result=ReviewerInfo,
    )


async def list_votes(
    client: GerritClient, change_id: str, account_id: str
) -> Dict[str, int]:
    """Votes of one reviewer keyed by label name."""
    return await client.get(
        expand_path("changes/{}/reviewers/{}/votes/", change_id, account_id),
        result=Dict[str, int],
    )


async def suggest_reviewers(
    client: GerritClient, change_id: str, options: Optional[QueryOptions] = None
) -> List[SuggestedReviewerInfo]:
    return await client.get(
        expand_path("changes/{}/suggest_reviewers", change_id),
        options=options,
        result=List[SuggestedReviewerInfo],
    )


async def add_reviewer(
    client: GerritClient, change_id: str, reviewer: ReviewerInput
) -> AddReviewerResult:
    return await client.post(
        expand_path("changes/{}/reviewers", change_id),
        reviewer,
        result=AddReviewerResult,
    )


async def delete_reviewer(
    client: GerritClient,
    change_id: str,
    account_id: str,
    options: Optional[DeleteReviewerInput] = None,
) -> None:
    await client.post(
        expand_path("changes/{}/reviewers/{}/delete", change_id, account_id), options
    )


# --- Change edits ---


async def get_change_edit_details(
    client: GerritClient,
    change_id: str,
    options: Optional[ChangeEditDetailOptions] = None,
) -> Optional[EditInfo]:
    """The caller's change edit, or None (204) when no edit exists."""
    return await client.get(
        expand_path("changes/{}/edit", change_id), options=options, result=EditInfo
    )


async def get_change_edit_file_meta(
    client: GerritClient, change_id: str, file_path: str
) -> EditFileInfo:
    return await client.get(
        expand_path("changes/{}/edit/{}/meta", change_id, file_path),
        result=EditFileInfo,
    )


async def get_change_edit_message(client: GerritClient, change_id: str) -> str:
    """Commit message of the change edit, base64 encoded."""
    return await client.get(
        expand_path("changes/{}/edit:message", change_id), result=str
    )


async def publish_change_edit(
    client: GerritClient,
    change_id: str,
    publish: Optional[PublishChangeEditInput] = None,
) -> None:
    await client.post(expand_path("changes/{}/edit:publish", change_id), publish)


async def delete_change_edit(client: GerritClient, change_id: str) -> None:
    await client.delete(expand_path("changes/{}/edit", change_id))
