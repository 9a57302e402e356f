"""
URL construction for Gerrit REST calls.

Gerrit serves anonymous requests under the plain path and authenticated ones
under ``/a/``. Path segments that are user data (project names such as
``plugins/delete-project``, branch names, file paths) must be escaped as a
whole. Fields flagged as Gerrit search queries keep their ``+`` and ``:``
operators literal; every other parameter is escaped with ``quote_plus``.
"""

from __future__ import annotations

from enum import Enum
from typing import (
    Any,
    Collection,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Mapping,
    Optional,
    Tuple,
)
from urllib.parse import quote, quote_plus

from pydantic import BaseModel

AUTHENTICATED_PREFIX = "a/"

# json_schema_extra marker for option fields that carry Gerrit search syntax.
SEARCH_QUERY: Dict[str, Any] = {"gerrit_search": True}
_SEARCH_SAFE = "+:"


def quote_segment(value: Any) -> str:
    """Escape a single logical path segment, including any ``/`` inside it."""
    return quote(str(value), safe="")


def expand_path(template: str, *segments: Any) -> str:
    """
    Fill each ``{}`` in template with an escaped segment.

        expand_path("projects/{}/branches/{}", "plugins/x", "master")
        -> "projects/plugins%2Fx/branches/master"
    """
    return template.format(*(quote_segment(s) for s in segments))


def build_url(base_url: str, path: str, *, authenticated: bool = False) -> str:
    base = base_url if base_url.endswith("/") else base_url + "/"
    path = path.lstrip("/")
    if authenticated and not path.startswith(AUTHENTICATED_PREFIX):
        path = AUTHENTICATED_PREFIX + path
    return base + path


def _normalize(value: Any) -> Optional[str]:
    # Zero values are omitted entirely, never sent as empty parameters.
    if value is None or value is False or value == "" or value == 0:
        return None
    if value is True:
        return "true"
    if isinstance(value, Enum):
        return _normalize(value.value)
    return str(value)


def _iter_pairs(params: Mapping[str, Any]) -> Iterable[Tuple[str, str]]:
    for key in sorted(params):
        raw = params[key]
        values = raw if isinstance(raw, (list, tuple)) else [raw]
        for item in values:
            normalized = _normalize(item)
            if normalized is not None:
                yield key, normalized
def encode_query(
    params: Mapping[str, Any], *, search_keys: Collection[str] = ()
) -> str:
    """
    Encode params as a query string.
    - Keys are sorted; repeated values keep caller order.
    - Keys in search_keys keep ``+`` and ``:`` unescaped; spaces become ``+``.
    """
    parts: List[str] = []
    for key, value in _iter_pairs(params):
        if key in search_keys:
            encoded = quote_plus(value, safe=_SEARCH_SAFE)
        else:
            encoded = quote_plus(value)
        parts.append(f"{quote_plus(key)}={encoded}")
    return "&".join(parts)


def search_query_keys(options: Any) -> FrozenSet[str]:
    """Wire names of the fields of an options model flagged with SEARCH_QUERY."""
    if not isinstance(options, BaseModel):
        return frozenset()
    keys = set()
    for name, field in type(options).model_fields.items():
        extra = field.json_schema_extra
        if isinstance(extra, dict) and extra.get("gerrit_search"):
            keys.add(field.alias or name)
    return frozenset(keys)


def options_to_params(options: Any) -> Dict[str, Any]:
    if isinstance(options, BaseModel):
        return options.model_dump(by_alias=True, exclude_none=True, mode="json")
    if isinstance(options, Mapping):
        return dict(options)
    raise TypeError(
        f"Query options must be a pydantic model or mapping, got {type(options).__name__}"
    )


def append_query(url: str, options: Any) -> str:
    if options is None:
        return url
    query = encode_query(
        options_to_params(options), search_keys=search_query_keys(options)
    )
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


__all__ = [
    "AUTHENTICATED_PREFIX",
    "SEARCH_QUERY",
    "quote_segment",
    "expand_path",
    "build_url",
    "encode_query",
    "search_query_keys",
    "options_to_params",
    "append_query",
]
