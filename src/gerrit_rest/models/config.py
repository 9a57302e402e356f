from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import JsonValue

from .base import GerritModel


class GerritInfo(GerritModel):
    all_projects: Optional[str] = None
    all_users: Optional[str] = None
    doc_search: Optional[bool] = None
    doc_url: Optional[str] = None
    edit_gpg_keys: Optional[bool] = None
    report_bug_url: Optional[str] = None


class AuthInfo(GerritModel):
    auth_type: Optional[str] = None
    use_contributor_agreements: Optional[bool] = None
    editable_account_fields: Optional[List[str]] = None
    login_url: Optional[str] = None
    login_text: Optional[str] = None
    switch_account_url: Optional[str] = None
    register_url: Optional[str] = None
    register_text: Optional[str] = None
    edit_full_name_url: Optional[str] = None
    http_password_url: Optional[str] = None
    git_basic_auth_policy: Optional[str] = None


class ServerInfo(GerritModel):
    """Server configuration; sections without a dedicated record stay raw JSON."""

    accounts: Optional[Dict[str, JsonValue]] = None
    auth: Optional[AuthInfo] = None
    change: Optional[Dict[str, JsonValue]] = None
    download: Optional[Dict[str, JsonValue]] = None
    gerrit: Optional[GerritInfo] = None
    index: Optional[Dict[str, JsonValue]] = None
    note_db_enabled: Optional[bool] = None
    plugin: Optional[Dict[str, JsonValue]] = None
    receive: Optional[Dict[str, JsonValue]] = None
    sshd: Optional[Dict[str, JsonValue]] = None
    suggest: Optional[Dict[str, JsonValue]] = None
    url_aliases: Optional[Dict[str, str]] = None
    user: Optional[Dict[str, JsonValue]] = None
    default_theme: Optional[str] = None


class EntriesInfo(GerritModel):
    mem: Optional[int] = None
    disk: Optional[int] = None
    space: Optional[str] = None


class HitRatioInfo(GerritModel):
    mem: Optional[int] = None
    disk: Optional[int] = None


class CacheInfo(GerritModel):
    name: Optional[str] = None
    type: Optional[str] = None
    entries: Optional[EntriesInfo] = None
    average_get: Optional[str] = None
    hit_ratio: Optional[HitRatioInfo] = None


class ListCachesOptions(GerritModel):
    format: Optional[str] = None


__all__ = [
    "AuthInfo",
    "CacheInfo",
    "EntriesInfo",
    "GerritInfo",
    "HitRatioInfo",
    "ListCachesOptions",
    "ServerInfo",
]
