"""Store managing entities grouped under keys."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from typing import Any, Generic, TypeVar

from pyentitystore.models import EntityId, entity_id
from pyentitystore.stores.api import ApiConstructor, TApi
from pyentitystore.stores.single import SingleStore, TSingle

_logger = logging.getLogger(__name__)

TKey = TypeVar("TKey", bound=Hashable)


class ObjectStore(SingleStore[TApi, TSingle], Generic[TApi, TKey, TSingle]):
    """Keyed map of entries, each a single entity or a list of entities.

    Useful when entities are naturally grouped, e.g. comments by post id::

        class CommentStore(ObjectStore[CommentApi, int, Comment]):
            async def load_for_post(self, post_id: int) -> None:
                comments = await self.call("list_comments", {"post_id": post_id})
                self.set_entry(post_id, list(comments or []))

    Item level operations (``add_item``, ``edit_item``, ``remove_item``)
    only work on list entries. Identity lookups across keys return the
    first match in insertion order.
    """

    def __init__(self, name: str, *, api_constructor: ApiConstructor | None = None) -> None:
        super().__init__(name, api_constructor=api_constructor)
        self._object: dict[TKey, TSingle | list[TSingle]] = {}

    @property
    def object(self) -> dict[TKey, TSingle | list[TSingle]]:
        """The live map (not a copy)."""
        return self._object

    # ------------------------------------------------------------------
    # Entry access
    # ------------------------------------------------------------------

    def get_entry_by_id(self, key: TKey) -> TSingle | list[TSingle] | None:
        return self._object.get(key)

    def get_by_id(self, key: TKey) -> TSingle | list[TSingle] | None:
        """Alias of :meth:`get_entry_by_id`."""
        return self.get_entry_by_id(key)

    def set_entry(self, key: TKey, entry: TSingle | list[TSingle]) -> None:
        self._object[key] = entry
        self._notify("object")

    def remove_entry(self, key: TKey) -> None:
        if key in self._object:
            del self._object[key]
            self._notify("object")

    def entry_is_set(self, key: TKey) -> bool:
        return key in self._object

    # ------------------------------------------------------------------
    # Item access
    # ------------------------------------------------------------------

    def get_entry_id_by_item_id(self, item_id: EntityId) -> TKey | None:
        """Key of the first list entry containing an item with *item_id*.

        Whether the map holds lists at all is decided from its first entry;
        a map of single entities always yields ``None``.
        """
        first = next(iter(self._object.values()), None)
        if not isinstance(first, list):
            return None
        for key, entry in self._object.items():
            if isinstance(entry, list) and any(entity_id(item) == item_id for item in entry):
                return key
        return None

    def _iter_items(self) -> Iterator[Any]:
        for entry in self._object.values():
            if isinstance(entry, list):
                yield from entry
            else:
                yield entry

    def get_item_by_id(self, item_id: EntityId) -> TSingle | None:
        return next((item for item in self._iter_items() if entity_id(item) == item_id), None)

    def _list_entry(self, key: TKey, action: str) -> list[TSingle] | None:
        entry = self._object.get(key)
        if not isinstance(entry, list):
            _logger.warning("[%s] Cannot %s item. Entry for id %r is not a list.", self.name, action, key)
            return None
        return entry

    def add_item(self, key: TKey, item: TSingle) -> None:
        """Append *item* to the list entry at *key*; missing entries are not created."""
        entry = self._list_entry(key, "add")
        if entry is None:
            return
        entry.append(item)
        self._notify("object")

    def edit_item(self, item_id: EntityId, item: TSingle) -> None:
        """Replace the item with *item_id* in whichever entry holds it."""
        key = self.get_entry_id_by_item_id(item_id)
        if key is None:
            return
        entry = self._list_entry(key, "edit")
        if entry is None:
            return
        for index, existing in enumerate(entry):
            if entity_id(existing) == item_id:
                entry[index] = item
                self._notify("object")
                return

    def remove_item(self, item_id: EntityId, key: TKey | None = None) -> None:
        """Remove the item with *item_id* from the entry at *key*, or from its owning entry."""
        resolved = key if key is not None else self.get_entry_id_by_item_id(item_id)
        if resolved is None:
            return
        entry = self._list_entry(resolved, "remove")
        if entry is None:
            return
        remaining = [existing for existing in entry if entity_id(existing) != item_id]
        if len(remaining) < len(entry):
            entry[:] = remaining
            self._notify("object")
