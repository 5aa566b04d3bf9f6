"""
Nested-create rewriter.

Walks a record-creation payload and fills in a prefixed KSUID wherever a
record is about to be created without one: the root, nested `create`,
`createMany.data`, the `create` side of `connectOrCreate` and `upsert`.
`update` payloads are searched for further nested creates but never
stamped themselves.

The input tree is never mutated: every mapping and list on the way down is
copied, so a PrefixNotDefined raised deep in the tree leaves the caller's
payload exactly as it was.
"""

from collections.abc import Mapping

from config import validate_config
from stamping.markers import MarkerKind, classify
from stamping.prefix import resolve_prefix
from stamping.relations import RelationResolver
from utils.ksuid import generate_ksuid


def _is_missing(value):
    return value is None or value == ""


class NestedCreateRewriter:
    def __init__(self, config):
        self.config = config = validate_config(config)
        self._relations = RelationResolver(config.prefix_map, config.prefix_fn,
                                           config.relation_overrides, config.relation_retries)
        self._handlers = {
            MarkerKind.CREATE: self._create,
            MarkerKind.CREATE_MANY: self._create_many,
            MarkerKind.CONNECT_OR_CREATE: self._connect_or_create,
            MarkerKind.UPSERT: self._upsert,
        }

    def prefix_for(self, entity_type):
        return resolve_prefix(entity_type, self.config.prefix_map, self.config.prefix_fn)

    def rewrite(self, payload, entity_type):
        """Stamp the root record (and nested creates) of a single create payload."""
        prefix = self.prefix_for(entity_type)
        return self._create_root(payload, entity_type, prefix)

    def rewrite_many(self, items, entity_type):
        """Stamp every record of a batch create; None entries keep their index."""
        if not isinstance(items, list):
            return self.rewrite(items, entity_type)
        prefix = self.prefix_for(entity_type)
        return [self._create_root(item, entity_type, prefix) for item in items]

    def rewrite_update(self, payload, entity_type):
        """Stamp nested creates inside an update payload; the root is left alone."""
        if not self.config.process_nested:
            return payload
        return self._walk(payload, entity_type)

    def rewrite_upsert(self, args, entity_type):
        """Top-level upsert arguments: `create` is a root, `update` is scanned."""
        prefix = self.prefix_for(entity_type)
        if not isinstance(args, Mapping):
            return args
        rewritten = dict(args)
        if "create" in rewritten:
            rewritten["create"] = self._create_root(rewritten["create"], entity_type, prefix)
        if "update" in rewritten:
            rewritten["update"] = self.rewrite_update(rewritten["update"], entity_type)
        return rewritten

    def _stamp(self, record, entity_type, prefix):
        field = self.config.primary_key_for(entity_type)
        if _is_missing(record.get(field)):
            record[field] = generate_ksuid(prefix)
        return record

    def _create_root(self, node, entity_type, prefix):
        if not isinstance(node, Mapping):
            return node
        record = self._scan(node, entity_type) if self.config.process_nested else dict(node)
        return self._stamp(record, entity_type, prefix)

    def _walk(self, value, entity_type):
        if isinstance(value, Mapping):
            return self._scan(value, entity_type)
        if isinstance(value, list):
            return [self._walk(item, entity_type) for item in value]
        return value

    def _scan(self, node, entity_type):
        scanned = {}
        for key, value in node.items():
            if isinstance(value, Mapping):
                # only string keys name a relation
                markers = classify(value) if isinstance(key, str) else ()
                scanned[key] = self._relation(key, value, markers) if markers else self._scan(value, entity_type)
            else:
                scanned[key] = self._walk(value, entity_type)
        return scanned

    def _relation(self, field, value, markers):
        entity_type, prefix = self._relations.resolve(field)
        by_key = {marker.key: marker for marker in markers}
        relation = {}
        for key, item in value.items():
            marker = by_key.get(key)
            if marker is None:
                relation[key] = self._walk(item, entity_type)
            else:
                relation[key] = self._handlers[marker.kind](marker.value, entity_type, prefix)
        return relation

    def _create(self, value, entity_type, prefix):
        if isinstance(value, list):
            return [self._create_root(item, entity_type, prefix) for item in value]
        return self._create_root(value, entity_type, prefix)

    def _create_many(self, value, entity_type, prefix):
        batch = {key: self._walk(item, entity_type) for key, item in value.items() if key != "data"}
        batch["data"] = [self._create_root(item, entity_type, prefix) for item in value["data"]]
        return batch

    def _connect_or_create(self, value, entity_type, prefix):
        if isinstance(value, list):
            return [self._connect_or_create(item, entity_type, prefix) for item in value]
        if not isinstance(value, Mapping):
            return value
        pair = dict(value)
        if "create" in pair:
            pair["create"] = self._create_root(pair["create"], entity_type, prefix)
        return pair

    def _upsert(self, value, entity_type, prefix):
        if isinstance(value, list):
            return [self._upsert(item, entity_type, prefix) for item in value]
        if not isinstance(value, Mapping):
            return value
        pair = dict(value)
        if "create" in pair:
            pair["create"] = self._create_root(pair["create"], entity_type, prefix)
        if "update" in pair:
            pair["update"] = self._walk(pair["update"], entity_type)
        return pair


def rewrite(payload, entity_type, config):
    """One-off rewrite of a create payload; `config` is a StampingConfig, a Config or its kwargs."""
    return NestedCreateRewriter(config).rewrite(payload, entity_type)
