from core.errors import PrefixNotDefined


def resolve_prefix(entity_type, prefix_map, prefix_fn=None):
    """Prefix for `entity_type`: table entry first, then the fallback function.

    Errors raised by `prefix_fn` propagate unchanged.
    """
    prefix = prefix_map.get(entity_type)
    if isinstance(prefix, str) and prefix:
        return prefix

    if prefix_fn is not None:
        prefix = prefix_fn(entity_type)
        if isinstance(prefix, str) and prefix:
            return prefix

    raise PrefixNotDefined(entity_type)
