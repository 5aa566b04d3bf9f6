"""Creation-intent markers found on relation fields of a create payload."""

from collections.abc import Mapping
from enum import Enum


class MarkerKind(Enum):
    CREATE = "create"
    CREATE_MANY = "createMany"
    CONNECT_OR_CREATE = "connectOrCreate"
    UPSERT = "upsert"


class Marker:
    __slots__ = ("kind", "value")

    def __init__(self, kind, value):
        self.kind = kind
        self.value = value

    @property
    def key(self):
        return self.kind.value

    def __repr__(self):
        return f"Marker({self.kind.name})"


def _mapping_or_list(value):
    return isinstance(value, (Mapping, list))


def _mappings(value):
    if isinstance(value, Mapping):
        return True
    return isinstance(value, list) and all(item is None or isinstance(item, Mapping) for item in value)


# Shape check per kind; a key with the wrong shape is left to plain traversal
_SHAPES = {
    MarkerKind.CREATE: _mapping_or_list,
    MarkerKind.CREATE_MANY: lambda value: isinstance(value, Mapping) and isinstance(value.get("data"), list),
    MarkerKind.CONNECT_OR_CREATE: _mappings,
    MarkerKind.UPSERT: _mappings,
}


def classify(value):
    """Markers present on a relation value, in MarkerKind order. Empty for plain mappings."""
    if not isinstance(value, Mapping):
        return ()
    return tuple(Marker(kind, value[kind.value]) for kind, shape in _SHAPES.items()
                 if kind.value in value and shape(value[kind.value]))
