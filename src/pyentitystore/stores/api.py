"""Store owning an API client and the generic endpoint call wrapper."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pyentitystore._redact import redact_for_log
from pyentitystore.config import DEFAULT_ERROR_MESSAGE, Configuration
from pyentitystore.errors import handle_error
from pyentitystore.exceptions import StoreConfigError, UnknownEndpointError
from pyentitystore.stores.loading import LoadingStore

_logger = logging.getLogger(__name__)

TApi = TypeVar("TApi")

ApiConstructor = Callable[[Configuration], Any]


class ApiStore(LoadingStore, Generic[TApi]):
    """Store holding a reference to an externally built API client.

    A store is "loading" from construction until its first call
    finishes, so views can treat a store without a client as not ready.

    Parameters
    ----------
    name : str
        Identifier used in error and log messages.
    api_constructor : callable, optional
        Builds the client from a :class:`Configuration`. When omitted,
        subclasses must override :meth:`init_api` or inject a client with
        :meth:`set_api`.
    """

    def __init__(self, name: str, *, api_constructor: ApiConstructor | None = None) -> None:
        super().__init__()
        self.name = name
        self._api: TApi | None = None
        self._api_constructor = api_constructor
        self._default_error_message = DEFAULT_ERROR_MESSAGE
        self.set_is_loading(True)

    @property
    def api(self) -> TApi | None:
        return self._api

    @property
    def api_is_set(self) -> bool:
        return self._api is not None

    def set_api(self, api: TApi) -> None:
        self._api = api
        self._notify("api")

    def init_api(self, config: Configuration) -> None:
        """Build and install the client for *config*."""
        if self._api_constructor is None:
            raise StoreConfigError(f"init_api is not implemented by {self.name}")
        self._default_error_message = getattr(config, "default_error_message", DEFAULT_ERROR_MESSAGE)
        self.set_api(self._api_constructor(config))

    def _resolve_endpoint(self, api: TApi, endpoint: str) -> Callable[..., Any]:
        method = None if endpoint.startswith("_") else getattr(api, endpoint, None)
        if not callable(method):
            raise UnknownEndpointError(
                f"{self.name}: {type(api).__name__} has no endpoint {endpoint!r}",
                endpoint=endpoint,
            )
        return method

    async def call(self, endpoint: str, args: Any = None) -> Any:
        """Invoke *endpoint* on the client with the loading flag raised.

        Failures of the endpoint are re-raised as
        :class:`~pyentitystore.exceptions.ApiCallError`; the loading flag is
        cleared before anything reaches the caller.
        """
        api = self._api
        if api is None:
            raise StoreConfigError(f"{self.name} Api is not set")

        self.set_is_loading(True)
        try:
            method = self._resolve_endpoint(api, endpoint)
            _logger.debug("%s: calling %s args=%s", self.name, endpoint, redact_for_log(args))
            try:
                result = method() if args is None else method(args)
                if inspect.isawaitable(result):
                    result = await result
            except Exception as err:
                await handle_error(err, endpoint=endpoint, default_message=self._default_error_message)
            return result
        finally:
            self.set_is_loading(False)
