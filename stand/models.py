"""Data model of a stand configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import ConfigValidationError, MissingFieldError


def _as_mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigValidationError(f"'{path}' must be a table")
    return value


def _string(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise ConfigValidationError(f"'{path}' must be a string")
    return value


def _optional_string(value: Any, path: str) -> str | None:
    return None if value is None else _string(value, path)


def _optional_bool(value: Any, path: str) -> bool | None:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigValidationError(f"'{path}' must be a boolean")
    return value


def _string_map(value: Any, path: str, exclude: frozenset[str] = frozenset()) -> dict[str, str]:
    mapping = _as_mapping(value, path)
    result: dict[str, str] = {}
    for key, item in mapping.items():
        if key in exclude:
            continue
        if not isinstance(key, str):
            raise ConfigValidationError(f"keys of '{path}' must be strings")
        result[key] = _string(item, f"{path}.{key}")
    return result


class NestedBehavior(Enum):
    """What to do when a stand shell is started inside another one."""

    PREVENT = "prevent"
    ALLOW = "allow"
    WARN = "warn"


@dataclass
class Settings:
    """Global settings of a configuration."""

    default_environment: str
    nested_shell_behavior: NestedBehavior | None = None
    show_env_in_prompt: bool | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Settings:
        """Build settings from a parsed table."""
        mapping = _as_mapping(data, "settings")
        if "default_environment" not in mapping:
            raise MissingFieldError("settings.default_environment")
        behavior_raw = mapping.get("nested_shell_behavior")
        behavior = None
        if behavior_raw is not None:
            try:
                behavior = NestedBehavior(behavior_raw)
            except ValueError:
                raise ConfigValidationError(
                    f"unknown nested_shell_behavior '{behavior_raw}'"
                ) from None
        return cls(
            default_environment=_string(
                mapping["default_environment"], "settings.default_environment"
            ),
            nested_shell_behavior=behavior,
            show_env_in_prompt=_optional_bool(
                mapping.get("show_env_in_prompt"), "settings.show_env_in_prompt"
            ),
        )


_ENVIRONMENT_FIELDS = frozenset({"description", "extends", "color", "requires_confirmation"})


@dataclass
class Environment:
    """One named environment; keys other than its own fields are variables."""

    description: str
    extends: str | None = None
    variables: dict[str, str] = field(default_factory=dict)
    color: str | None = None
    requires_confirmation: bool | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Environment:
        """Build an environment from a parsed table."""
        mapping = _as_mapping(data, "environment")
        if "description" not in mapping:
            raise MissingFieldError("description")
        return cls(
            description=_string(mapping["description"], "description"),
            extends=_optional_string(mapping.get("extends"), "extends"),
            variables=_string_map(mapping, "environment", exclude=_ENVIRONMENT_FIELDS),
            color=_optional_string(mapping.get("color"), "color"),
            requires_confirmation=_optional_bool(
                mapping.get("requires_confirmation"), "requires_confirmation"
            ),
        )


@dataclass
class Configuration:
    """A whole stand configuration."""

    version: str
    environments: dict[str, Environment]
    settings: Settings
    common: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Configuration:
        """Build a configuration from a parsed document."""
        mapping = _as_mapping(data, "configuration")
        for required in ("version", "environments", "settings"):
            if required not in mapping:
                raise MissingFieldError(required)
        environments: dict[str, Environment] = {}
        for name, env in _as_mapping(mapping["environments"], "environments").items():
            if not isinstance(name, str):
                raise ConfigValidationError("environment names must be strings")
            environments[name] = Environment.from_dict(env)
        common_raw = mapping.get("common")
        return cls(
            version=_string(mapping["version"], "version"),
            environments=environments,
            settings=Settings.from_dict(mapping["settings"]),
            common=None if common_raw is None else _string_map(common_raw, "common"),
        )