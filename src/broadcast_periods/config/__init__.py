"""Configuration for the show parser: resolve once, freeze, pass to `ShowParser`."""

from .resolve import config_override, config_scope, resolve_config
from .schema import AggregationPolicy, FrozenConfig, ParserSettings

__all__ = [
    "AggregationPolicy",
    "FrozenConfig",
    "ParserSettings",
    "config_override",
    "config_scope",
    "resolve_config",
]
