"""Derive documentation schemas from the SQLAlchemy model registry."""
from typing import Any, Dict

from .constants import TYPE_MAP


def doc_type(type_name: str) -> str:
    return TYPE_MAP.get(type_name) or type_name.lower()


def entity_schema(mapper) -> Dict[str, Any]:
    properties: Dict[str, Any] = {}
    for attr in mapper.column_attrs:
        column = attr.columns[0]
        properties[column.name] = {'type': doc_type(type(column.type).__name__)}
    # relationships are typed after the target entity
    for rel in mapper.relationships:
        properties[rel.key] = {'type': doc_type(rel.mapper.class_.__name__)}
    return {'type': 'object', 'properties': properties}


def introspect_models(base) -> Dict[str, Any]:
    """Map entity name -> {"type": "object", "properties": {field: {"type": tag}}}."""
    mappers = sorted(base.registry.mappers, key=lambda m: m.class_.__name__)
    return {m.class_.__name__: entity_schema(m) for m in mappers}


__all__ = ["doc_type", "entity_schema", "introspect_models"]
