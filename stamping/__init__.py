from config import StampingConfig, validate_config
from core.errors import ConfigError, MalformedIdentifier, PrefixNotDefined
from stamping.prefix import resolve_prefix
from stamping.relations import RelationResolver, infer_entity_type
from stamping.rewriter import NestedCreateRewriter, rewrite
from utils.ksuid import generate_ksuid, parse_ksuid

generate = generate_ksuid

__all__ = [
    "generate",
    "generate_ksuid",
    "parse_ksuid",
    "rewrite",
    "validate_config",
    "resolve_prefix",
    "infer_entity_type",
    "RelationResolver",
    "NestedCreateRewriter",
    "StampingConfig",
    "ConfigError",
    "MalformedIdentifier",
    "PrefixNotDefined",
]
