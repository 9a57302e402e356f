from __future__ import annotations

import io
from typing import Dict, List, Optional

from gerrit_rest.core.client import GerritClient
from gerrit_rest.core.errors import GerritParseError
from gerrit_rest.core.urls import expand_path
from gerrit_rest.models.access import ProjectAccessInfo
from gerrit_rest.models.base import CommitInfo
from gerrit_rest.models.projects import (
    BatchLabelInput,
    BranchInfo,
    BranchInput,
    BranchOptions,
    DeleteBranchesInput,
    DeleteLabelInput,
    DeleteTagsInput,
    HeadInput,
    IncludedInInfo,
    LabelDefinitionInfo,
    LabelDefinitionInput,
    ProjectDescriptionInput,
    ProjectInfo,
    ProjectInput,
    ProjectOptions,
    ProjectParentInput,
    ReflogEntryInfo,
    TagInfo,
    TagInput,
    TagOptions,
)


async def list_projects(
    client: GerritClient, options: Optional[ProjectOptions] = None
) -> Dict[str, ProjectInfo]:
    """
    Projects visible to the caller, keyed by name.

        await list_projects(client, ProjectOptions(limit=2, regex="(arch|benchmarks)"))
        # GET projects/?n=2&r=%28arch%7Cbenchmarks%29
    """
    return await client.get(
        "projects/", options=options, result=Dict[str, ProjectInfo]
    )


async def get_project(client: GerritClient, project_name: str) -> ProjectInfo:
    return await client.get(
        expand_path("projects/{}", project_name), result=ProjectInfo
    )


async def create_project(
    client: GerritClient, project_name: str, project: Optional[ProjectInput] = None
) -> ProjectInfo:
    return await client.put(
        expand_path("projects/{}/", project_name), project, result=ProjectInfo
    )


async def get_project_description(client: GerritClient, project_name: str) -> str:
    return await client.get(
        expand_path("projects/{}/description", project_name), result=str
    )


async def set_project_description(
    client: GerritClient, project_name: str, description: ProjectDescriptionInput
) -> Optional[str]:
    """Returns the new description, or None when it was cleared."""
    return await client.put(
        expand_path("projects/{}/description", project_name),
        description,
        result=str,
    )


async def delete_project_description(client: GerritClient, project_name: str) -> None:
    await client.delete(expand_path("projects/{}/description", project_name))


async def get_project_parent(client: GerritClient, project_name: str) -> str:
    return await client.get(
        expand_path("projects/{}/parent", project_name), result=str
    )


async def set_project_parent(
    client: GerritClient, project_name: str, parent: ProjectParentInput
) -> str:
    return await client.put(
        expand_path("projects/{}/parent", project_name), parent, result=str
    )


async def get_head(client: GerritClient, project_name: str) -> str:
    return await client.get(expand_path("projects/{}/HEAD", project_name), result=str)


async def set_head(client: GerritClient, project_name: str, head: HeadInput) -> str:
    return await client.put(
        expand_path("projects/{}/HEAD", project_name), head, result=str
    )


async def get_project_access(
    client: GerritClient, project_name: str
) -> ProjectAccessInfo:
    return await client.get(
        expand_path("projects/{}/access", project_name), result=ProjectAccessInfo
    )


# --- Branches ---


async def list_branches(
    client: GerritClient, project_name: str, options: Optional[BranchOptions] = None
) -> List[BranchInfo]:
    return await client.get(
        expand_path("projects/{}/branches/", project_name),
        options=options,
        result=List[BranchInfo],
    )


async def get_branch(
    client: GerritClient, project_name: str, branch_id: str
) -> BranchInfo:
    return await client.get(
        expand_path("projects/{}/branches/{}", project_name, branch_id),
        result=BranchInfo,
    )


async def create_branch(
    client: GerritClient,
    project_name: str,
    branch_id: str,
    branch: Optional[BranchInput] = None,
) -> BranchInfo:
    return await client.put(
        expand_path("projects/{}/branches/{}", project_name, branch_id),
        branch,
        result=BranchInfo,
    )


async def delete_branch(client: GerritClient, project_name: str, branch_id: str) -> None:
    await client.delete(expand_path("projects/{}/branches/{}", project_name, branch_id))


async def delete_branches(
    client: GerritClient, project_name: str, branches: DeleteBranchesInput
) -> None:
    await client.post(
        expand_path("projects/{}/branches:delete", project_name), branches
    )


async def get_reflog(
    client: GerritClient, project_name: str, branch_id: str
) -> List[ReflogEntryInfo]:
    return await client.get(
        expand_path("projects/{}/branches/{}/reflog", project_name, branch_id),
        result=List[ReflogEntryInfo],
    )


async def get_branch_content(
    client: GerritClient, project_name: str, branch_id: str, file_path: str
) -> str:
    """Base64 encoded content of a file at the tip of a branch."""
    sink = io.BytesIO()
    response = await client.call(
        "GET",
        expand_path(
            "projects/{}/branches/{}/files/{}/content",
            project_name,
            branch_id,
            file_path,
        ),
        result=sink,
    )
    try:
        return sink.getvalue().decode("ascii").strip()
    except UnicodeDecodeError as exc:
        raise GerritParseError(
            f"Content of {file_path} on {project_name}/{branch_id} is not base64 text",
            response=response,
        ) from exc


# --- Tags ---


async def list_tags(
    client: GerritClient, project_name: str, options: Optional[TagOptions] = None
) -> List[TagInfo]:
    return await client.get(
        expand_path("projects/{}/tags/", project_name),
        options=options,
        result=List[TagInfo],
    )


async def get_tag(client: GerritClient, project_name: str, tag_name: str) -> TagInfo:
    return await client.get(
        expand_path("projects/{}/tags/{}", project_name, tag_name), result=TagInfo
    )


async def create_tag(
    client: GerritClient, project_name: str, tag_name: str, tag: TagInput
) -> TagInfo:
    return await client.put(
        expand_path("projects/{}/tags/{}", project_name, tag_name), tag, result=TagInfo
    )


async def delete_tag(client: GerritClient, project_name: str, tag_name: str) -> None:
    await client.delete(expand_path("projects/{}/tags/{}", project_name, tag_name))


async def delete_tags(
    client: GerritClient, project_name: str, tags: DeleteTagsInput
) -> None:
    await client.post(expand_path("projects/{}/tags:delete", project_name), tags)


# --- Commits ---


async def get_commit(
    client: GerritClient, project_name: str, commit_id: str
) -> CommitInfo:
    return await client.get(
        expand_path("projects/{}/commits/{}", project_name, commit_id),
        result=CommitInfo,
    )


async def get_included_in(
    client: GerritClient, project_name: str, commit_id: str
) -> IncludedInInfo:
    """Branches and tags that contain the commit."""
    return await client.get(
        expand_path("projects/{}/commits/{}/in", project_name, commit_id),
        result=IncludedInInfo,
    )


# --- Labels ---


async def list_labels(
    client: GerritClient, project_name: str
) -> List[LabelDefinitionInfo]:
    return await client.get(
        expand_path("projects/{}/labels/", project_name),
        result=List[LabelDefinitionInfo],
    )


async def get_label(
    client: GerritClient, project_name: str, label_name: str
) -> LabelDefinitionInfo:
    return await client.get(
        expand_path("projects/{}/labels/{}", project_name, label_name),
        result=LabelDefinitionInfo,
    )


async def set_label(
    client: GerritClient,
    project_name: str,
    label_name: str,
    label: LabelDefinitionInput,
) -> LabelDefinitionInfo:
    """Create the label or update an existing one (Gerrit uses PUT for both)."""
    return await client.put(
        expand_path("projects/{}/labels/{}", project_name, label_name),
        label,
        result=LabelDefinitionInfo,
    )


async def create_label(
    client: GerritClient,
    project_name: str,
    label_name: str,
    label: LabelDefinitionInput,
) -> LabelDefinitionInfo:
    return await set_label(client, project_name, label_name, label)


async def delete_label(
    client: GerritClient,
    project_name: str,
    label_name: str,
    options: Optional[DeleteLabelInput] = None,
) -> None:
    await client.delete(
        expand_path("projects/{}/labels/{}", project_name, label_name), options
    )


async def batch_update_labels(
    client: GerritClient, project_name: str, batch: BatchLabelInput
) -> None:
    await client.post(expand_path("projects/{}/labels/", project_name), batch)
