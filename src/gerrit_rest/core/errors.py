from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .client import ApiResponse


class GerritClientError(Exception):
    """Base error for client failures."""


class GerritConfigurationError(GerritClientError, ValueError):
    """Invalid client construction (empty or non-absolute base URL, bad env)."""


class GerritSerializationError(GerritClientError):
    """A request body could not be encoded to JSON."""


class GerritTransportError(GerritClientError):
    """The request was not sent or no response arrived."""

    def __init__(self, message: str, *, method: str, url: str):
        super().__init__(message)
        self.method = method
        self.url = url


class GerritAuthenticationError(GerritClientError):
    """No usable credentials: digest challenge missing or credentials rejected."""


class GerritHTTPError(GerritClientError):
    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        url: str,
        reason: str,
        detail: Optional[str] = None,
        response_json: Any = None,
        response: Optional["ApiResponse"] = None,
    ):
        message = f"{status_code} {method} {url}: {reason}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.status_code = status_code
        self.method = method
        self.url = url
        self.reason = reason
        self.detail = detail
        self.response_json = response_json
        self.response = response


class GerritUnauthorizedError(GerritHTTPError, GerritAuthenticationError):
    pass


class GerritNotFoundError(GerritHTTPError):
    pass


class GerritConflictError(GerritHTTPError):
    pass


class GerritParseError(GerritClientError):
    """The server answered 2xx but the body could not be decoded."""

    def __init__(self, message: str, *, response: Optional["ApiResponse"] = None):
        super().__init__(message)
        self.response = response


class GerritModelValidationError(GerritParseError):
    pass


_STATUS_ERRORS = {
    401: GerritUnauthorizedError,
    404: GerritNotFoundError,
    409: GerritConflictError,
}


def error_class_for_status(status_code: int) -> type[GerritHTTPError]:
    return _STATUS_ERRORS.get(status_code, GerritHTTPError)


__all__ = [
    "GerritClientError",
    "GerritConfigurationError",
    "GerritSerializationError",
    "GerritTransportError",
    "GerritAuthenticationError",
    "GerritHTTPError",
    "GerritUnauthorizedError",
    "GerritNotFoundError",
    "GerritConflictError",
    "GerritParseError",
    "GerritModelValidationError",
    "error_class_for_status",
]
