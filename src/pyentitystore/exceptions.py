"""Custom exception hierarchy for pyentitystore."""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for all pyentitystore errors."""


class StoreConfigError(StoreError):
    """Store is missing its API client or has no way to build one."""


class UnknownEndpointError(StoreError):
    """Requested endpoint does not exist on the API client (or is not callable)."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class ApiCallError(StoreError):
    """The endpoint itself failed.

    The message is the best human-readable text that could be extracted
    from the original error, which stays available as ``__cause__``.
    """

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class MissingResultError(StoreError):
    """A create/update endpoint succeeded but returned no item."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class ApiTransportError(StoreError):
    """HTTP-level failure inside :class:`pyentitystore.client.BaseApi` (network, timeout)."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class ResponseError(StoreError):
    """The server answered with an error status.

    ``body`` holds the already-read response text so the error message
    can be recovered after the connection has been released.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int,
        response: object | None = None,
        body: str = "",
        path: str = "",
    ) -> None:
        self.status = status
        self.response = response
        self.body = body
        self.path = path
        super().__init__(message)
