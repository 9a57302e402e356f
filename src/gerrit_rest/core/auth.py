"""
Authentication state for a Gerrit client.

Exactly one scheme is active at a time (or none). Basic and Cookie credentials
are stamped onto each request directly. Digest needs a server challenge first:
the provider sends a body-less preflight to the target URL, expects a 401 with
``WWW-Authenticate: Digest ...`` and caches that challenge until the server
hands out a new nonce.
"""

from __future__ import annotations

import hashlib
import itertools
import logging
import secrets
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Union
from urllib.request import parse_http_list, parse_keqv_list

import httpx

from .errors import GerritAuthenticationError

log = logging.getLogger("gerrit_rest.auth")


@dataclass(frozen=True)
class BasicCredentials:
    username: str
    secret: str


@dataclass(frozen=True)
class CookieCredentials:
    name: str
    value: str


@dataclass(frozen=True)
class DigestCredentials:
    username: str
    secret: str


AuthScheme = Union[BasicCredentials, CookieCredentials, DigestCredentials]


@dataclass(frozen=True)
class DigestChallenge:
    realm: str
    nonce: str
    algorithm: str = "MD5"
    qop: Optional[str] = None
    opaque: Optional[str] = None


@dataclass(frozen=True)
class _DigestState:
    challenge: DigestChallenge
    nonce_count: Iterator[int]


_HASHES: Dict[str, Callable[[bytes], Any]] = {
    "MD5": hashlib.md5,
    "MD5-SESS": hashlib.md5,
    "SHA": hashlib.sha1,
    "SHA-256": hashlib.sha256,
    "SHA-256-SESS": hashlib.sha256,
    "SHA-512": hashlib.sha512,
    "SHA-512-SESS": hashlib.sha512,
}


def parse_digest_challenge(response: httpx.Response) -> Optional[DigestChallenge]:
    """Return the first Digest challenge of a response, or None."""
    for header in response.headers.get_list("www-authenticate"):
        scheme, _, params = header.strip().partition(" ")
        if scheme.lower() != "digest":
            continue
        try:
            fields = {
                k.lower(): v for k, v in parse_keqv_list(parse_http_list(params)).items()
            }
        except ValueError:
            return None
        realm, nonce = fields.get("realm"), fields.get("nonce")
        if realm is None or not nonce:
            return None
        return DigestChallenge(
            realm=realm,
            nonce=nonce,
            algorithm=fields.get("algorithm", "MD5"),
            qop=fields.get("qop"),
            opaque=fields.get("opaque"),
        )
    return None


def _select_qop(qop: Optional[str]) -> Optional[str]:
    if qop is None:
        return None
    offered = [q.strip().lower() for q in qop.split(",")]
    if "auth" in offered:
        return "auth"
    raise GerritAuthenticationError(f"Unsupported digest qop {qop!r}")


def _quoted(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def build_digest_header(
    credentials: DigestCredentials,
    challenge: DigestChallenge,
    *,
    method: str,
    uri: str,
    nonce_count: int,
    cnonce: Optional[str] = None,
) -> str:
    """Compute an RFC 7616 ``Authorization: Digest`` value."""
    algorithm = challenge.algorithm.upper()
    hash_factory = _HASHES.get(algorithm)
    if hash_factory is None:
        raise GerritAuthenticationError(
            f"Unsupported digest algorithm {challenge.algorithm!r}"
        )

    def digest(data: str) -> str:
        return hash_factory(data.encode("utf-8")).hexdigest()

    cnonce = cnonce or secrets.token_hex(8)
    nc = f"{nonce_count:08x}"
    qop = _select_qop(challenge.qop)

    ha1 = digest(f"{credentials.username}:{challenge.realm}:{credentials.secret}")
    if algorithm.endswith("-SESS"):
        ha1 = digest(f"{ha1}:{challenge.nonce}:{cnonce}")
    ha2 = digest(f"{method}:{uri}")

    if qop is None:
        response = digest(f"{ha1}:{challenge.nonce}:{ha2}")
    else:
        response = digest(f"{ha1}:{challenge.nonce}:{nc}:{cnonce}:{qop}:{ha2}")

    parts = [
        f"username={_quoted(credentials.username)}",
        f"realm={_quoted(challenge.realm)}",
        f"nonce={_quoted(challenge.nonce)}",
        f"uri={_quoted(uri)}",
        f'response="{response}"',
        f"algorithm={challenge.algorithm}",
    ]
    if challenge.opaque:
        parts.append(f"opaque={_quoted(challenge.opaque)}")
    if qop is not None:
        parts.extend([f"qop={qop}", f"nc={nc}", f'cnonce="{cnonce}"'])
    return "Digest " + ", ".join(parts)


class AuthenticationService:
    """Holds zero or one credential scheme and applies it to outgoing requests."""

    def __init__(self) -> None:
        self._scheme: Optional[AuthScheme] = None
        # Replaced as a whole, never mutated in place.
        self._digest_state: Optional[_DigestState] = None

    @property
    def scheme(self) -> Optional[AuthScheme]:
        return self._scheme

    @property
    def challenge(self) -> Optional[DigestChallenge]:
        state = self._digest_state
        return state.challenge if state else None

    def set_basic_auth(self, username: str, password: str) -> None:
        self._scheme = BasicCredentials(username, password)
        self._digest_state = None

    def set_cookie_auth(self, name: str, value: str) -> None:
        self._scheme = CookieCredentials(name, value)
        self._digest_state = None

    def set_digest_auth(self, username: str, password: str) -> None:
        self._scheme = DigestCredentials(username, password)
        self._digest_state = None

    def reset_auth(self) -> None:
        self._scheme = None
        self._digest_state = None

    def has_auth(self) -> bool:
        return self._scheme is not None

    def has_basic_auth(self) -> bool:
        return isinstance(self._scheme, BasicCredentials)

    def has_cookie_auth(self) -> bool:
        return isinstance(self._scheme, CookieCredentials)

    def has_digest_auth(self) -> bool:
        return isinstance(self._scheme, DigestCredentials)

    async def apply_to(self, request: httpx.Request, http: httpx.AsyncClient) -> None:
        """Stamp the active credentials onto request; no-op without a scheme."""
        scheme = self._scheme
        if scheme is None:
            return

        if isinstance(scheme, BasicCredentials):
            # BasicAuth.auth_flow sets the header before its first yield.
            next(httpx.BasicAuth(scheme.username, scheme.secret).auth_flow(request))
        elif isinstance(scheme, CookieCredentials):
            cookie = f"{scheme.name}={scheme.value}"
            existing = request.headers.get("Cookie")
            request.headers["Cookie"] = f"{existing}; {cookie}" if existing else cookie
        else:
            state = self._digest_state
            if state is None:
                state = await self._request_challenge(request, http)
            request.headers["Authorization"] = build_digest_header(
                scheme,
                state.challenge,
                method=request.method,
                uri=request.url.raw_path.decode("ascii"),
                nonce_count=next(state.nonce_count),
            )

    def refresh_challenge(self, response: httpx.Response) -> bool:
        """
        Cache the challenge of a 401 response.
        Returns True only when digest is active and the nonce is new, i.e.
        the rejected request is worth re-sending with a recomputed header.
        """
        if not self.has_digest_auth():
            return False
        challenge = parse_digest_challenge(response)
        current = self._digest_state
        if challenge is None:
            return False
        if current is not None and current.challenge.nonce == challenge.nonce:
            return False
        self._store_challenge(challenge)
        return True

    def _store_challenge(self, challenge: DigestChallenge) -> _DigestState:
        state = _DigestState(challenge=challenge, nonce_count=itertools.count(1))
        self._digest_state = state
        log.debug(
            "auth.digest_challenge",
            extra={"realm": challenge.realm, "algorithm": challenge.algorithm},
        )
        return state

    async def _request_challenge(
        self, request: httpx.Request, http: httpx.AsyncClient
    ) -> _DigestState:
        url = str(request.url)
        preflight = http.build_request(
            "GET", request.url, headers={"Accept": "application/json"}
        )
        try:
            response = await http.send(preflight)
        except httpx.HTTPError as exc:
            raise GerritAuthenticationError(
                f"Digest preflight to {url} failed: {exc}"
            ) from exc

        if response.status_code != 401:
            raise GerritAuthenticationError(
                f"Digest preflight to {url} returned {response.status_code}, "
                "expected 401 with a challenge"
            )
        challenge = parse_digest_challenge(response)
        if challenge is None:
            raise GerritAuthenticationError(
                f"Digest preflight to {url} returned no Digest challenge"
            )
        return self._store_challenge(challenge)


__all__ = [
    "AuthScheme",
    "AuthenticationService",
    "BasicCredentials",
    "CookieCredentials",
    "DigestCredentials",
    "DigestChallenge",
    "build_digest_header",
    "parse_digest_challenge",
]
