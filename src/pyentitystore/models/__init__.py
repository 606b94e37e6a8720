"""Entity model and identity helpers."""

from pyentitystore.models._base import (
    Entity,
    EntityId,
    entity_id,
    merge_entity,
    present_fields,
    same_identity,
)

__all__ = [
    "Entity",
    "EntityId",
    "entity_id",
    "merge_entity",
    "present_fields",
    "same_identity",
]
