from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import GerritModel


class PluginInfo(GerritModel):
    id: str
    version: Optional[str] = None
    api_version: Optional[str] = None
    index_url: Optional[str] = None
    filename: Optional[str] = None
    disabled: Optional[bool] = None


class InstallPluginInput(GerritModel):
    url: str


class PluginOptions(GerritModel):
    all: Optional[bool] = None
    limit: Optional[int] = Field(default=None, alias="n")
    skip: Optional[int] = Field(default=None, alias="S")
    prefix: Optional[str] = Field(default=None, alias="p")
    regex: Optional[str] = Field(default=None, alias="r")
    substring: Optional[str] = Field(default=None, alias="m")


__all__ = ["InstallPluginInput", "PluginInfo", "PluginOptions"]
