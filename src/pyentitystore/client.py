"""API client capability and an aiohttp based client base."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

import aiohttp

from pyentitystore.config import Configuration
from pyentitystore.exceptions import ApiTransportError, ResponseError, StoreConfigError

_logger = logging.getLogger(__name__)


@runtime_checkable
class ApiClient(Protocol):
    """Structural interface stores expect from an API client.

    Besides ``init_api`` a client exposes any number of named async
    endpoint methods, each taking a single argument. Stores look those up
    by name, so they are not part of the protocol itself.
    """

    def init_api(self, config: Configuration) -> None:
        ...


class BaseApi:
    """Base for hand-written or generated REST clients.

    Subclasses add one async method per endpoint and implement it on top
    of :meth:`request`::

        class TodoApi(BaseApi):
            async def list_todos(self, args: Mapping[str, Any]) -> list[dict[str, Any]]:
                return await self.request("GET", "/todos", params=args)

    Usage::

        async with TodoApi(Configuration(base_url="https://example.test")) as api:
            store.set_api(api)
    """

    def __init__(
        self,
        configuration: Configuration | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.configuration = configuration or Configuration()
        self._external_session = session is not None
        self._http_session = session

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> BaseApi:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
        self._http_session = None

    def init_api(self, config: Configuration) -> None:
        """Replace the configuration used for subsequent requests."""
        self.configuration = config

    def _require_session(self) -> aiohttp.ClientSession:
        if self._http_session is None:
            name = type(self).__name__
            raise StoreConfigError(f"{name} not initialized. Use 'async with {name}(...) as api:'")
        return self._http_session

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_body: Any = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Empty bodies decode to ``None``. Error statuses raise
        :class:`ResponseError` with the body already read, so its
        ``message`` can be recovered after the connection is released.
        """
        url = f"{self.configuration.base_url.rstrip('/')}/{path.lstrip('/')}"
        headers = {"accept": "application/json", **self.configuration.headers}
        timeout = aiohttp.ClientTimeout(total=self.configuration.timeout)

        _logger.debug("%s %s", method, url)

        try:
            async with self._require_session().request(
                method,
                url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=timeout,
            ) as resp:
                text = await resp.text()
                if resp.status >= 400:
                    raise ResponseError(
                        f"HTTP {resp.status} from {path}: {text[:200]}",
                        status=resp.status,
                        response=resp,
                        body=text,
                        path=path,
                    )
        except ResponseError:
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise ApiTransportError(f"Request to {path} failed: {exc}", path=path) from exc

        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ApiTransportError(f"Invalid JSON from {path}: {text[:200]}", path=path) from exc
