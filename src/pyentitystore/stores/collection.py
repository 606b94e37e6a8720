"""Store managing an ordered collection of entities."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic

from pyentitystore.models import EntityId, entity_id, merge_entity, same_identity
from pyentitystore.stores.api import ApiConstructor, TApi
from pyentitystore.stores.single import SingleStore, TSingle


class CollectionStore(SingleStore[TApi, TSingle], Generic[TApi, TSingle]):
    """Ordered list of entities next to the ``current`` slot.

    ``current`` is a denormalized copy, not a view: it can hold a fresher
    version of an element than the collection does. Every mutation keeps
    the two in sync for the identity it touches, and :meth:`get_by_id`
    consults ``current`` first.

    Duplicate identities are not prevented; :meth:`add_item` appends
    whatever it is given.
    """

    def __init__(self, name: str, *, api_constructor: ApiConstructor | None = None) -> None:
        super().__init__(name, api_constructor=api_constructor)
        self._collection: list[TSingle] = []

    @property
    def collection(self) -> list[TSingle]:
        """The live collection (not a copy)."""
        return self._collection

    def set_collection(self, collection: Iterable[TSingle]) -> None:
        self._collection = collection if isinstance(collection, list) else list(collection)
        self._notify("collection")

    def edit_collection(self, collection: Iterable[TSingle]) -> None:
        self.set_collection(collection)

    def _current_matches(self, identity: EntityId | None) -> bool:
        return same_identity(self._current, identity)

    def add_item(self, item: TSingle, set_current: bool = True) -> None:
        if set_current:
            self.set_current(item)
        self._collection.append(item)
        self._notify("collection")

    def set_item(self, item: TSingle, set_current: bool = True) -> None:
        """Replace the element sharing *item*'s identity with *item*."""
        identity = entity_id(item)
        if set_current or self._current_matches(identity):
            self.set_current(item)
        self.set_collection([item if entity_id(existing) == identity else existing for existing in self._collection])

    def edit_item(self, item: TSingle, set_current: bool = True) -> None:
        """Merge the fields present on *item* into the element sharing its identity.

        Fields missing from *item* keep their previous values, both on the
        collection element and on ``current`` when it holds the same entity.
        With *set_current* an unrelated ``current`` is replaced by the merged
        element, or by *item* itself (possibly a partial patch) when no
        element matched.
        """
        identity = entity_id(item)
        current = self._current
        merged_element: TSingle | None = None
        merged_current: TSingle | None = None
        edited: list[TSingle] = []
        for existing in self._collection:
            if entity_id(existing) == identity:
                merged = merge_entity(existing, item)
                if merged_element is None:
                    merged_element = merged
                if existing is current:
                    merged_current = merged
                existing = merged
            edited.append(existing)

        if self._current_matches(identity):
            # current may be the element itself; never merge it twice
            self.set_current(merged_current if merged_current is not None else merge_entity(current, item))
        elif set_current:
            self.set_current(merged_element if merged_element is not None else item)
        self.set_collection(edited)

    def remove_item(self, identity: EntityId) -> None:
        if self._current_matches(identity):
            self.set_current(None)
        for index, existing in enumerate(self._collection):
            if entity_id(existing) == identity:
                del self._collection[index]
                self._notify("collection")
                break

    def get_by_id(self, identity: EntityId) -> TSingle | None:
        """Return ``current`` if it has *identity*, else the first matching element."""
        if self._current_matches(identity):
            return self._current
        for existing in self._collection:
            if entity_id(existing) == identity:
                return existing
        return None
