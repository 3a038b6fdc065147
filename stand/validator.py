"""Consistency checks for a loaded configuration."""

from __future__ import annotations

from .errors import (
    CircularReferenceError,
    ConfigValidationError,
    InvalidEnvironmentError,
    MissingFieldError,
)
from .models import Configuration


def validate_required_fields(config: Configuration) -> None:
    """Check that required fields are present and non-empty."""
    if not config.version:
        raise MissingFieldError("version")
    if not config.environments:
        raise MissingFieldError("environments")
    if not config.settings.default_environment:
        raise MissingFieldError("settings.default_environment")
    for name, env in config.environments.items():
        if not env.description:
            raise ConfigValidationError(
                f"Environment '{name}' must have a non-empty description"
            )


def validate_environment_references(config: Configuration) -> None:
    """Check that the default environment and every 'extends' exist."""
    names = config.environments.keys()
    if config.settings.default_environment not in names:
        raise InvalidEnvironmentError(config.settings.default_environment)
    for env in config.environments.values():
        if env.extends is not None and env.extends not in names:
            raise InvalidEnvironmentError(env.extends)


def _find_cycle(config: Configuration, start: str) -> list[str] | None:
    path: list[str] = []
    current: str | None = start
    while current is not None:
        if current in path:
            path.append(current)
            return path
        path.append(current)
        env = config.environments.get(current)
        current = env.extends if env is not None else None
    return None


def validate_no_circular_references(config: Configuration) -> None:
    """Check that no chain of 'extends' loops back on itself."""
    for name in config.environments:
        cycle = _find_cycle(config, name)
        if cycle is not None:
            raise CircularReferenceError(cycle)


def validate_common_config(config: Configuration) -> None:
    """Check that common variables have non-empty keys and values."""
    for key, value in (config.common or {}).items():
        if not key:
            raise ConfigValidationError("Common variable keys cannot be empty")
        if not value:
            raise ConfigValidationError(f"Common variable '{key}' cannot have empty value")