"""Errors raised while loading and validating a stand configuration."""

from __future__ import annotations

from collections.abc import Sequence


def _debug_list(items: Sequence[str]) -> str:
    return "[" + ", ".join(f'"{item}"' for item in items) + "]"


class ConfigError(Exception):
    """Base class for every configuration error."""


class ConfigValidationError(ConfigError):
    """The configuration is structurally present but not acceptable."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Configuration validation failed: {message}")


class MissingFieldError(ConfigError):
    """A required field is absent or empty."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: {field}")


class InvalidEnvironmentError(ConfigError):
    """An environment name refers to no defined environment."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid environment reference: {name}")


class CircularReferenceError(ConfigError):
    """Environments extend each other in a loop."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        super().__init__(
            "Circular reference detected in environment hierarchy: "
            + _debug_list(self.cycle)
        )


class ConfigFileNotFoundError(ConfigError):
    """A file referenced by the configuration does not exist."""

    def __init__(self, configured_path: str, resolved_path: str) -> None:
        self.configured_path = configured_path
        self.resolved_path = resolved_path
        super().__init__(
            f"Environment file not found: '{configured_path}' "
            f"(resolved to '{resolved_path}')"
        )


class NotAFileError(ConfigError):
    """A path referenced by the configuration is not a regular file."""

    def __init__(self, configured_path: str, resolved_path: str) -> None:
        self.configured_path = configured_path
        self.resolved_path = resolved_path
        super().__init__(
            f"Path is not a file: '{configured_path}' (resolved to '{resolved_path}')"
            " - directories are not allowed"
        )


class InterpolationError(ConfigError):
    """A ${VAR} placeholder names a variable missing from the process environment."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"Environment variable interpolation failed: {variable}")


class ConfigIOError(ConfigError):
    """Reading the configuration file failed."""

    def __init__(self, source: BaseException) -> None:
        self.source = source
        super().__init__(f"IO error: {source}")


class YamlParseError(ConfigError):
    """The YAML configuration could not be parsed."""

    def __init__(self, source: object) -> None:
        self.source = source
        super().__init__(f"YAML parsing error: {source}")


class TomlParseError(ConfigError):
    """The TOML configuration could not be parsed."""

    def __init__(self, source: object) -> None:
        self.source = source
        super().__init__(f"TOML parsing error: {source}")