"""Custom errors with tracking IDs."""

from utils.base62 import MalformedIdentifier
from utils.ksuid import generate_ksuid
from utils.timestamp import format_timestamp

PREFIX_MAP_MESSAGE = "A valid prefixMap must be provided."


class BaseKsuidError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.message = message
        self.error_id = generate_ksuid()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class ConfigError(BaseKsuidError):
    """Invalid stamping configuration, raised at setup time."""

    def __init__(self, message=PREFIX_MAP_MESSAGE, field=None, **kwargs):
        context = kwargs.pop("context", {})
        if field:
            context["field"] = field
        super().__init__(message, context=context, **kwargs)


class PrefixNotDefined(BaseKsuidError):
    """No usable prefix for an entity type."""

    def __init__(self, entity_type, **kwargs):
        context = kwargs.pop("context", {})
        context["entity_type"] = entity_type
        super().__init__(f'Prefix not defined or invalid for model "{entity_type}".', context=context, **kwargs)
        self.entity_type = entity_type


__all__ = [
    "BaseKsuidError",
    "ConfigError",
    "MalformedIdentifier",
    "PrefixNotDefined",
    "PREFIX_MAP_MESSAGE",
]
