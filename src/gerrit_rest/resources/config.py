from __future__ import annotations

from typing import Dict, Optional

from gerrit_rest.core.client import GerritClient
from gerrit_rest.core.urls import expand_path
from gerrit_rest.models.config import CacheInfo, ListCachesOptions, ServerInfo


async def get_version(client: GerritClient) -> str:
    """Version string of the Gerrit server, e.g. ``3.9.1``."""
    return await client.get("config/server/version", result=str)


async def get_server_info(client: GerritClient) -> ServerInfo:
    return await client.get("config/server/info", result=ServerInfo)


async def list_caches(
    client: GerritClient, options: Optional[ListCachesOptions] = None
) -> Dict[str, CacheInfo]:
    return await client.get(
        "config/server/caches/", options=options, result=Dict[str, CacheInfo]
    )


async def get_cache(client: GerritClient, cache_name: str) -> CacheInfo:
    return await client.get(
        expand_path("config/server/caches/{}", cache_name), result=CacheInfo
    )


async def flush_cache(client: GerritClient, cache_name: str) -> None:
    await client.post(expand_path("config/server/caches/{}/flush", cache_name))
