import json
from collections.abc import Mapping
from pathlib import Path

from core.errors import ConfigError, PREFIX_MAP_MESSAGE

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


def _is_string_map(value):
    return isinstance(value, Mapping) and all(
        isinstance(key, str) and isinstance(item, str) for key, item in value.items())


class StampingConfig:
    __slots__ = ("prefix_map", "prefix_fn", "process_nested", "primary_key_field",
                 "relation_overrides", "relation_retries")

    def __init__(self, prefix_map=None, prefix_fn=None, process_nested=True, primary_key_field="id",
                 relation_overrides=None, relation_retries=None):
        self.prefix_map = prefix_map
        self.prefix_fn = prefix_fn
        self.process_nested = process_nested
        self.primary_key_field = primary_key_field
        self.relation_overrides = relation_overrides if relation_overrides is not None else {}
        self.relation_retries = relation_retries if relation_retries is not None else {}

    def validate(self):
        """Fail fast on a malformed setup. Returns self."""
        if not _is_string_map(self.prefix_map):
            raise ConfigError(PREFIX_MAP_MESSAGE, field="prefix_map")
        if self.prefix_fn is not None and not callable(self.prefix_fn):
            raise ConfigError("prefix_fn must be callable.", field="prefix_fn")
        pk = self.primary_key_field
        if not callable(pk) and not (isinstance(pk, str) and pk):
            raise ConfigError("primary_key_field must be a non-empty string or a callable.",
                              field="primary_key_field")
        if not _is_string_map(self.relation_overrides):
            raise ConfigError("relation_overrides must map field names to entity types.",
                              field="relation_overrides")
        if not _is_string_map(self.relation_retries):
            raise ConfigError("relation_retries must map entity types to entity types.",
                              field="relation_retries")
        return self

    def primary_key_for(self, entity_type):
        pk = self.primary_key_field
        if not callable(pk):
            return pk
        field = pk(entity_type)
        if not isinstance(field, str) or not field:
            raise ConfigError(f'primary_key_field returned an invalid field for model "{entity_type}".',
                              field="primary_key_field")
        return field


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("stamping", "logging")

    def __init__(self, stamping=None, logging=None):
        self.stamping = stamping or StampingConfig(prefix_map={})
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            StampingConfig(**{"prefix_map": {}, **d.get("stamping", {})}),
            LoggingConfig(**d.get("logging", {})),
        )


def stamping_config(config):
    """StampingConfig from a StampingConfig, a Config, or StampingConfig keyword options."""
    if isinstance(config, Config):
        return config.stamping
    if isinstance(config, Mapping):
        try:
            return StampingConfig(**config)
        except TypeError as exc:
            raise ConfigError(f"Unknown stamping option: {exc}", cause=exc)
    if not isinstance(config, StampingConfig):
        raise ConfigError(PREFIX_MAP_MESSAGE, field="prefix_map")
    return config


def validate_config(config):
    """Validate any config form accepted by stamping_config(); returns the StampingConfig."""
    return stamping_config(config).validate()


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
