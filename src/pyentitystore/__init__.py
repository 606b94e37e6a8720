"""pyentitystore - Async, observable entity stores layered over an API client."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyentitystore")
except PackageNotFoundError:
    __version__ = "0+local"
from pyentitystore.client import ApiClient, BaseApi
from pyentitystore.config import Configuration
from pyentitystore.errors import get_error_message, handle_error
from pyentitystore.exceptions import (
    ApiCallError,
    ApiTransportError,
    MissingResultError,
    ResponseError,
    StoreConfigError,
    StoreError,
    UnknownEndpointError,
)
from pyentitystore.models import Entity, EntityId
from pyentitystore.stores import (
    ApiStore,
    CollectionStore,
    CrudCollectionStore,
    LoadingStore,
    ObjectStore,
    SingleStore,
)

__all__ = [
    "__version__",
    "ApiCallError",
    "ApiClient",
    "ApiStore",
    "ApiTransportError",
    "BaseApi",
    "CollectionStore",
    "Configuration",
    "CrudCollectionStore",
    "Entity",
    "EntityId",
    "LoadingStore",
    "MissingResultError",
    "ObjectStore",
    "ResponseError",
    "SingleStore",
    "StoreConfigError",
    "StoreError",
    "UnknownEndpointError",
    "get_error_message",
    "handle_error",
]
