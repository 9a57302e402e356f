from __future__ import annotations

from typing import Dict, Optional

from gerrit_rest.core.client import GerritClient
from gerrit_rest.models.access import ListAccessRightsOptions, ProjectAccessInfo


async def list_access_rights(
    client: GerritClient, options: Optional[ListAccessRightsOptions] = None
) -> Dict[str, ProjectAccessInfo]:
    """Access rights of the given projects, keyed by project name."""
    return await client.get(
        "access/", options=options, result=Dict[str, ProjectAccessInfo]
    )
