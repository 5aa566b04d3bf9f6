"""
Create interceptor: sits between a data-access layer and its persistence call.

params = {"model": "User", "action": "create", "args": {"data": {...}}}
next_  = async callable that performs the operation with the (rewritten) params.
"""

from collections.abc import Mapping

from config import StampingConfig, load_config
from internal.logging import StructuredLogger, get_logger
from stamping.rewriter import NestedCreateRewriter


class Action:
    CREATE = "create"
    CREATE_MANY = "createMany"
    CREATE_MANY_AND_RETURN = "createManyAndReturn"
    UPSERT = "upsert"
    UPDATE = "update"
    UPDATE_MANY = "updateMany"


class KsuidInterceptor:
    def __init__(self, config, logger=None):
        self.rewriter = NestedCreateRewriter(config)
        self._log = (logger or get_logger()).bind(component="ksuid")

    @classmethod
    def from_config(cls, config):
        """Apply the logging section of a Config, then build from its stamping section."""
        logger = StructuredLogger.configure(config.logging.level)
        return cls(config.stamping, logger=logger)

    def rewrite_params(self, params):
        """Rewritten copy of `params`; returns `params` itself when nothing applies."""
        if not isinstance(params, Mapping) or not isinstance(params.get("args"), Mapping):
            return params
        model = params.get("model")
        if not model or not isinstance(model, str):
            return params

        action = params.get("action")
        args = dict(params["args"])
        rewriter = self.rewriter

        if action == Action.CREATE:
            if args.get("data") is None:
                rewriter.prefix_for(model)
                return params
            args["data"] = rewriter.rewrite(args["data"], model)
        elif action in (Action.CREATE_MANY, Action.CREATE_MANY_AND_RETURN):
            if args.get("data") is None:
                rewriter.prefix_for(model)
                return params
            args["data"] = rewriter.rewrite_many(args["data"], model)
        elif action == Action.UPSERT:
            args = rewriter.rewrite_upsert(args, model)
        elif action in (Action.UPDATE, Action.UPDATE_MANY):
            if "data" not in args:
                return params
            args["data"] = rewriter.rewrite_update(args["data"], model)
        else:
            return params

        self._log.debug("stamped", model=model, action=action)
        return {**params, "args": args}

    async def __call__(self, params, next_):
        return await next_(self.rewrite_params(params))


def configure(path=None):
    """Interceptor from a JSON config file (defaults to config.json)."""
    return KsuidInterceptor.from_config(load_config(path))


def create_ksuid_middleware(prefix_map, prefix_fn=None, process_nested=True, primary_key_field="id",
                            relation_overrides=None, relation_retries=None, logger=None):
    """Build an interceptor from keyword options; raises ConfigError on a bad prefix map."""
    config = StampingConfig(prefix_map, prefix_fn, process_nested, primary_key_field,
                            relation_overrides, relation_retries)
    return KsuidInterceptor(config, logger=logger)
