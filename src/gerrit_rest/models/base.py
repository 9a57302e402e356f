"""
Shared building blocks for Gerrit records.

Gerrit timestamps look like ``2018-05-04 17:24:39.000000000`` and are always
UTC. Some numeric identifiers arrive as a JSON string in one endpoint and as
an integer in another (stream events vs. REST), so they are kept as ``str``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

from gerrit_rest.core.urls import SEARCH_QUERY

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_timestamp(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    whole, _, fraction = value.strip().partition(".")
    try:
        parsed = datetime.strptime(whole, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise ValueError(f"invalid Gerrit timestamp {value!r}") from exc
    # Nanoseconds are truncated to the microseconds datetime can hold.
    digits = (fraction + "000000")[:6]
    if not digits.isdigit():
        raise ValueError(f"invalid Gerrit timestamp {value!r}")
    return parsed.replace(microsecond=int(digits), tzinfo=timezone.utc)


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    # strftime does not zero-pad years below 1000 on every platform.
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond:06d}000"
    )


def _coerce_number(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("a boolean is not a Gerrit number")
    if isinstance(value, int):
        return str(value)
    return value


def _as_list(value: Any) -> Any:
    if isinstance(value, str):
        return [value]
    return value


Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]

# A number Gerrit may send as "7" or 7; int(value) gives the integer.
Number = Annotated[str, BeforeValidator(_coerce_number)]

# Accepts a single string where the wire format allows a repeated parameter.
StrList = Annotated[List[str], BeforeValidator(_as_list)]


class GerritModel(BaseModel):
    """Base record: unknown keys are ignored, aliases and field names both accepted."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class WebLinkInfo(GerritModel):
    name: Optional[str] = None
    url: Optional[str] = None
    image_url: Optional[str] = None


class GitPersonInfo(GerritModel):
    name: Optional[str] = None
    email: Optional[str] = None
    date: Optional[Timestamp] = None
    tz: Optional[int] = None


class CommitInfo(GerritModel):
    commit: Optional[str] = None
    parents: List["CommitInfo"] = Field(default_factory=list)
    author: Optional[GitPersonInfo] = None
    committer: Optional[GitPersonInfo] = None
    subject: Optional[str] = None
    message: Optional[str] = None
    web_links: Optional[List[WebLinkInfo]] = None


class QueryOptions(GerritModel):
    """Search parameters shared by every ``q``/``n`` style listing."""

    query: Optional[StrList] = Field(
        default=None, alias="q", json_schema_extra=SEARCH_QUERY
    )
    limit: Optional[int] = Field(default=None, alias="n")


class ListOptions(GerritModel):
    """Limit/skip paging used by branch, tag and plugin listings."""

    limit: Optional[int] = Field(default=None, alias="n")
    skip: Optional[int] = Field(default=None, alias="s")


__all__ = [
    "CommitInfo",
    "GerritModel",
    "GitPersonInfo",
    "ListOptions",
    "Number",
    "QueryOptions",
    "StrList",
    "Timestamp",
    "WebLinkInfo",
    "format_timestamp",
    "parse_timestamp",
]
