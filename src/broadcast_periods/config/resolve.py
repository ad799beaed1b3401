"""Resolve a `FrozenConfig`, optionally inside an ambient scope.

Outside a scope: overrides > BROADCAST_PERIODS_* environment > defaults.
Inside `config_scope`, the scoped configuration replaces the environment and
defaults, and overrides still go through the same validation.
"""

from collections.abc import Generator
from contextlib import contextmanager
import contextvars
import dataclasses
import logging
from typing import Any

from pydantic import ValidationError

from broadcast_periods.core.exceptions import ConfigurationError

from .schema import FrozenConfig, ParserSettings

log = logging.getLogger(__name__)

_scoped_config: contextvars.ContextVar[FrozenConfig | None] = contextvars.ContextVar(
    "broadcast_periods_config", default=None
)


def _validated(values: dict[str, Any]) -> FrozenConfig:
    try:
        return ParserSettings(**values).freeze()
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid parser configuration (overrides or BROADCAST_PERIODS_* "
            f"variables): {e}"
        ) from e


def resolve_config(overrides: dict[str, Any] | None = None) -> FrozenConfig:
    """Build the parser configuration.

    Args:
        overrides: Field values that take precedence over everything else.
            Unknown keys are ignored.

    Returns:
        A validated FrozenConfig.

    Raises:
        ConfigurationError: If an override or environment variable is invalid.
    """
    base = _scoped_config.get()
    if base is None:
        config = _validated(dict(overrides or {}))
    elif overrides:
        # every field is passed explicitly, so the environment cannot leak in
        config = _validated({**dataclasses.asdict(base), **overrides})
    else:
        config = base
    log.debug("Resolved parser configuration: %s", config)
    return config


@contextmanager
def config_scope(config: FrozenConfig) -> Generator[None]:
    """Make `config` the base for `resolve_config()` calls inside the block."""
    token = _scoped_config.set(config)
    try:
        yield
    finally:
        _scoped_config.reset(token)


@contextmanager
def config_override(**overrides: Any) -> Generator[None]:
    """Shorthand for scoping the current configuration with a few fields changed."""
    with config_scope(resolve_config(overrides)):
        yield
