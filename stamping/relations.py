"""
Relation field name -> entity type inference.

Best-effort: "posts" -> "Post", "categories" -> "Category", "profile" -> "Profile".
Irregular names (compound models, odd plurals) are not guessed; they belong
in the caller's override table, or in the retry table which allows exactly
one alternate candidate when the inferred name has no prefix.
"""

from core.errors import PrefixNotDefined
from stamping.prefix import resolve_prefix


def infer_entity_type(field, overrides=None):
    if overrides and field in overrides:
        return overrides[field]
    if not field:
        return field

    name = field[0].upper() + field[1:]
    if name.endswith("ies") and len(name) > 3:
        return name[:-3] + "y"
    if name.endswith("s") and len(name) > 1:
        return name[:-1]
    return name


class RelationResolver:
    """Maps a relation field to (entity_type, prefix)."""

    def __init__(self, prefix_map, prefix_fn=None, overrides=None, retries=None):
        self.prefix_map = prefix_map
        self.prefix_fn = prefix_fn
        self.overrides = overrides or {}
        self.retries = retries or {}

    def resolve(self, field):
        entity_type = infer_entity_type(field, self.overrides)
        try:
            return entity_type, resolve_prefix(entity_type, self.prefix_map, self.prefix_fn)
        except PrefixNotDefined:
            retry = self.retries.get(entity_type)
            if not retry or retry == entity_type:
                raise
        return retry, resolve_prefix(retry, self.prefix_map, self.prefix_fn)
