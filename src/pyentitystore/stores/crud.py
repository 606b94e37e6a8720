"""Collection store with generic CRUD flows bound to named endpoints."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic

from pyentitystore.exceptions import MissingResultError
from pyentitystore.models import EntityId
from pyentitystore.stores.api import TApi
from pyentitystore.stores.collection import CollectionStore
from pyentitystore.stores.single import TSingle

_logger = logging.getLogger(__name__)


def _args_id(args: Any) -> EntityId:
    """Identity carried by endpoint arguments (``args["id"]`` or ``args.id``)."""
    identity = args.get("id") if isinstance(args, Mapping) else getattr(args, "id", None)
    if identity is None:
        raise ValueError("Endpoint arguments must carry an 'id'")
    return identity


class CrudCollectionStore(CollectionStore[TApi, TSingle], Generic[TApi, TSingle]):
    """:class:`CollectionStore` with fetch/create/update/delete flows.

    The flows are parameterized by endpoint name, so concrete stores only
    pick the endpoints of their client::

        class TodoStore(CrudCollectionStore[TodoApi, Todo]):
            async def fetch_todos(self, *, use_cache: bool = False) -> list[Todo]:
                return await self._fetch_all("list_todos", use_cache=use_cache)

            async def create_todo(self, title: str) -> Todo:
                return await self._create("create_todo", {"title": title})
    """

    async def _fetch(self, endpoint: str, args: Any, *, use_cache: bool = False) -> TSingle | None:
        """Fetch one item, answering from the store first when *use_cache* is set."""
        identity = _args_id(args)
        if use_cache:
            cached = self.get_by_id(identity)
            if cached is not None:
                return cached

        item = await self.call(endpoint, args)
        if not item:
            return None
        self.set_item(item)
        return item

    async def _fetch_all(self, endpoint: str, args: Any = None, *, use_cache: bool = False) -> list[TSingle]:
        """Replace the collection with the endpoint result.

        With *use_cache* a non-empty collection is returned as is. An empty
        or missing result empties the collection.
        """
        if use_cache and self._collection:
            return self._collection

        items = await self.call(endpoint, args)
        if not items:
            _logger.warning("%s: %s returned no items, collection reset to empty", self.name, endpoint)
            items = []
        self.set_collection(items)
        return self._collection

    async def _create(self, endpoint: str, args: Any = None) -> TSingle:
        item = await self.call(endpoint, args)
        if not item:
            raise MissingResultError("Create endpoint did not return an item", endpoint=endpoint)
        self.add_item(item)
        return item

    async def _update(self, endpoint: str, args: Any = None) -> TSingle:
        item = await self.call(endpoint, args)
        if not item:
            raise MissingResultError("Update endpoint did not return an item", endpoint=endpoint)
        self.edit_item(item)
        return item

    async def _delete(self, endpoint: str, args: Any) -> None:
        """Delete remotely, then locally; the endpoint's response is ignored."""
        identity = _args_id(args)
        await self.call(endpoint, args)
        self.remove_item(identity)
