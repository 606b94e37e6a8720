"""Entity base model and identity helpers.

Stores accept three entity shapes:

* plain mappings carrying an ``"id"`` key,
* pydantic models with an ``id`` field (:class:`Entity` is provided as a base),
* any other object with an ``id`` attribute.

Identity is the only thing stores compare; every other field is opaque.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict

EntityId: TypeAlias = int | str
"""Identity value of an entity."""


class Entity(BaseModel):
    """Convenience base for store entities.

    Unknown fields are kept (``extra="allow"``) so partial API payloads
    survive a round trip through a store, and the model stays mutable so
    :meth:`CollectionStore.edit_item` can merge into it in place.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
    )

    id: EntityId


def entity_id(entity: Any) -> EntityId | None:
    """Return the identity of *entity*, or ``None`` when it has none."""
    if entity is None:
        return None
    if isinstance(entity, Mapping):
        return entity.get("id")
    return getattr(entity, "id", None)


def same_identity(entity: Any, identity: EntityId | None) -> bool:
    """Whether *entity* exists and carries *identity* (never true for a ``None`` identity)."""
    return identity is not None and entity is not None and entity_id(entity) == identity


def present_fields(patch: Any) -> dict[str, Any]:
    """Fields explicitly present on *patch*.

    For pydantic models only the fields that were actually set count, so a
    partial model does not reset untouched fields to their defaults.
    """
    if isinstance(patch, Mapping):
        return dict(patch)
    if isinstance(patch, BaseModel):
        fields = {name: getattr(patch, name) for name in patch.model_fields_set}
        if patch.model_extra:
            fields.update(patch.model_extra)
        return fields
    return dict(vars(patch))


def _model_updates(target: BaseModel, fields: dict[str, Any]) -> dict[str, Any]:
    """Restrict *fields* to what *target*'s model accepts, validated up front."""
    model = type(target)
    if model.model_config.get("extra") != "allow":
        fields = {name: value for name, value in fields.items() if name in model.model_fields}
    if fields and model.model_config.get("validate_assignment"):
        model.model_validate({**dict(target), **fields})
    return fields


def merge_entity(target: Any, patch: Any) -> Any:
    """Shallow-merge the fields present on *patch* into *target*.

    Mutable targets are updated in place and returned. Frozen pydantic
    models cannot be, so a merged copy is returned instead; callers must
    always use the return value. Pydantic targets drop fields their model
    does not declare (unless it allows extras), and the whole update is
    checked before the first attribute is written.
    """
    fields = present_fields(patch)
    if isinstance(target, MutableMapping):
        target.update(fields)
        return target
    if isinstance(target, BaseModel):
        fields = _model_updates(target, fields)
        if target.model_config.get("frozen"):
            return target.model_copy(update=fields)
    for name, value in fields.items():
        setattr(target, name, value)
    return target
