"""Store layers.

Each layer adds one concern on top of the previous one:
``LoadingStore`` → ``ApiStore`` → ``SingleStore`` →
``CollectionStore`` / ``ObjectStore`` → ``CrudCollectionStore``.
"""

from pyentitystore.stores.api import ApiStore
from pyentitystore.stores.collection import CollectionStore
from pyentitystore.stores.crud import CrudCollectionStore
from pyentitystore.stores.loading import LoadingStore
from pyentitystore.stores.object import ObjectStore
from pyentitystore.stores.single import SingleStore

__all__ = [
    "ApiStore",
    "CollectionStore",
    "CrudCollectionStore",
    "LoadingStore",
    "ObjectStore",
    "SingleStore",
]
