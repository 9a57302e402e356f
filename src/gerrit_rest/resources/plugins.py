from __future__ import annotations

from typing import Dict, Optional

from gerrit_rest.core.client import GerritClient
from gerrit_rest.core.urls import expand_path
from gerrit_rest.models.plugins import InstallPluginInput, PluginInfo, PluginOptions


async def list_plugins(
    client: GerritClient, options: Optional[PluginOptions] = None
) -> Dict[str, PluginInfo]:
    """Installed plugins keyed by id; pass ``all=True`` to include disabled ones."""
    return await client.get("plugins/", options=options, result=Dict[str, PluginInfo])


async def get_plugin_status(client: GerritClient, plugin_id: str) -> PluginInfo:
    return await client.get(
        expand_path("plugins/{}/gerrit~status", plugin_id), result=PluginInfo
    )


async def install_plugin(
    client: GerritClient, plugin_id: str, plugin: InstallPluginInput
) -> PluginInfo:
    return await client.put(
        expand_path("plugins/{}", plugin_id), plugin, result=PluginInfo
    )


async def enable_plugin(client: GerritClient, plugin_id: str) -> PluginInfo:
    return await client.post(
        expand_path("plugins/{}/gerrit~enable", plugin_id), result=PluginInfo
    )


async def disable_plugin(client: GerritClient, plugin_id: str) -> PluginInfo:
    return await client.post(
        expand_path("plugins/{}/gerrit~disable", plugin_id), result=PluginInfo
    )


async def reload_plugin(client: GerritClient, plugin_id: str) -> PluginInfo:
    return await client.post(
        expand_path("plugins/{}/gerrit~reload", plugin_id), result=PluginInfo
    )
