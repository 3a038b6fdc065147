"""Loading stand configurations from TOML or legacy YAML files."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

import yaml

from .errors import (
    CircularReferenceError,
    ConfigIOError,
    ConfigValidationError,
    InterpolationError,
    InvalidEnvironmentError,
    TomlParseError,
    YamlParseError,
)
from .models import Configuration
from .validator import (
    validate_common_config,
    validate_environment_references,
    validate_no_circular_references,
    validate_required_fields,
)

TOML_CONFIG_NAME = ".stand.toml"
YAML_CONFIG_DIR = ".stand"
YAML_CONFIG_NAME = "config.yaml"

_NOT_INITIALIZED = "Stand configuration not found. Run 'stand init' to initialize."


def _read_config_file(path: Path) -> str:
    if not path.exists():
        raise ConfigValidationError(_NOT_INITIALIZED)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigIOError(exc) from exc


def _validate(config: Configuration) -> None:
    validate_required_fields(config)
    validate_environment_references(config)
    validate_no_circular_references(config)
    validate_common_config(config)


def interpolate_string(text: str) -> str:
    """Replace each ${VAR} in text with the value of that process environment variable.

    Expansion is single-pass: inserted values are not scanned again.
    """
    pieces: list[str] = []
    pos = 0
    while (start := text.find("${", pos)) != -1:
        pieces.append(text[pos:start])
        end = text.find("}", start + 2)
        if end == -1:
            raise ConfigValidationError(
                f"Unterminated variable placeholder starting at position {start}: "
                "missing closing '}' for '${...'"
            )
        name = text[start + 2 : end]
        if not name:
            raise ConfigValidationError(
                f"Empty variable name in placeholder at position {start}: "
                "'${}' is not valid"
            )
        value = os.environ.get(name)
        if value is None:
            raise InterpolationError(name)
        pieces.append(value)
        pos = end + 1
    pieces.append(text[pos:])
    return "".join(pieces)


def _interpolate_configuration(config: Configuration) -> None:
    if config.common is not None:
        config.common = {key: interpolate_string(value) for key, value in config.common.items()}
    for env in config.environments.values():
        env.description = interpolate_string(env.description)
        env.variables = {key: interpolate_string(value) for key, value in env.variables.items()}


def _inherit(config: Configuration, name: str, processed: set[str], chain: list[str]) -> None:
    if name in chain:
        raise CircularReferenceError(chain)
    if name in processed:
        return
    chain.append(name)
    env = config.environments.get(name)
    if env is None:
        raise InvalidEnvironmentError(name)
    if env.extends is not None:
        _inherit(config, env.extends, processed, chain)
        parent = config.environments[env.extends]
        env.variables = {**parent.variables, **env.variables}
        if env.color is None:
            env.color = parent.color
        if env.requires_confirmation is None:
            env.requires_confirmation = parent.requires_confirmation
    chain.pop()
    processed.add(name)


def _apply_variable_inheritance(config: Configuration) -> None:
    if config.common is not None:
        for env in config.environments.values():
            env.variables = {**config.common, **env.variables}
    processed: set[str] = set()
    for name in list(config.environments):
        if name not in processed:
            _inherit(config, name, processed, [])


def load_config_toml(project_path: str | os.PathLike[str]) -> Configuration:
    """Load .stand.toml from project_path, interpolating ${VAR} placeholders."""
    content = _read_config_file(Path(project_path) / TOML_CONFIG_NAME)
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise TomlParseError(exc) from exc
    config = Configuration.from_dict(data)
    _interpolate_configuration(config)
    return config


def load_config_toml_with_inheritance(project_path: str | os.PathLike[str]) -> Configuration:
    """Load .stand.toml and merge common variables and 'extends' parents into environments."""
    config = load_config_toml(project_path)
    _apply_variable_inheritance(config)
    return config


def load_config_toml_with_validation(project_path: str | os.PathLike[str]) -> Configuration:
    """Load .stand.toml with inheritance applied, then run every validation check."""
    config = load_config_toml_with_inheritance(project_path)
    _validate(config)
    return config


def load_config(project_path: str | os.PathLike[str]) -> Configuration:
    """Load the legacy .stand/config.yaml from project_path."""
    content = _read_config_file(Path(project_path) / YAML_CONFIG_DIR / YAML_CONFIG_NAME)
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise YamlParseError(exc) from exc
    return Configuration.from_dict(data)


def load_config_with_validation(project_path: str | os.PathLike[str]) -> Configuration:
    """Load the legacy YAML configuration and run every validation check."""
    config = load_config(project_path)
    _validate(config)
    return config


def load_config_with_defaults(project_path: str | os.PathLike[str]) -> Configuration:
    """Load the legacy YAML configuration and fill in default values."""
    config = load_config(project_path)
    if config.settings.show_env_in_prompt is None:
        config.settings.show_env_in_prompt = True
    for env in config.environments.values():
        if env.requires_confirmation is None:
            env.requires_confirmation = False
    return config