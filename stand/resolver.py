"""Combining variables from several sources and expanding ${VAR} references."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .dotenv_parser import ParseOptions
from .env_loader import LoadError, load_env_file


class ResolveError(Exception):
    """Base class for errors raised while resolving variables."""


class CircularVariableError(ResolveError):
    """Variables refer to each other in a loop."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        listed = "[" + ", ".join(f'"{name}"' for name in self.cycle) + "]"
        super().__init__(f"Circular reference detected in variable expansion: {listed}")


class UndefinedVariableError(ResolveError):
    """A reference names a variable that no source defines."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"Undefined variable referenced: {variable}")


class SourceError(ResolveError):
    """A source could not be loaded."""

    def __init__(self, source: LoadError) -> None:
        self.source = source
        super().__init__(f"Error loading from source: {source}")


@dataclass(frozen=True)
class DefaultSource:
    """Default values given directly."""

    variables: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class EnvFileSource:
    """Variables read from a dotenv file."""

    path: str | os.PathLike[str]


@dataclass(frozen=True)
class SystemEnvSource:
    """Variables of the current process environment."""


@dataclass(frozen=True)
class CliArgsSource:
    """Variables given on the command line."""

    variables: Mapping[str, str] = field(default_factory=dict)


VariableSource = DefaultSource | EnvFileSource | SystemEnvSource | CliArgsSource


class UndefinedVariableBehavior(Enum):
    """How a reference to an undefined variable is treated."""

    ERROR = "error"
    EMPTY_STRING = "empty_string"
    LEAVE_UNEXPANDED = "leave_unexpanded"


@dataclass(frozen=True)
class ResolutionOptions:
    """Options controlling variable expansion."""

    undefined_variable_behavior: UndefinedVariableBehavior = (
        UndefinedVariableBehavior.EMPTY_STRING
    )


def _load_source(source: VariableSource) -> dict[str, str]:
    match source:
        case DefaultSource(variables=variables) | CliArgsSource(variables=variables):
            return dict(variables)
        case EnvFileSource(path=path):
            try:
                return load_env_file(Path(path), ParseOptions(expand_variables=False))
            except LoadError as exc:
                raise SourceError(exc) from exc
        case SystemEnvSource():
            return dict(os.environ)
    raise TypeError(f"unsupported variable source: {source!r}")


def _expand_value(
    value: str,
    variables: Mapping[str, str],
    options: ResolutionOptions,
    stack: list[str],
) -> str:
    pieces: list[str] = []
    pos = 0
    while (start := value.find("${", pos)) != -1:
        end = value.find("}", start)
        if end == -1:
            break
        name = value[start + 2 : end]
        if name in stack:
            raise CircularVariableError([*stack[stack.index(name) :], name])
        if name in variables:
            stack.append(name)
            replacement = _expand_value(variables[name], variables, options, stack)
            stack.pop()
        else:
            match options.undefined_variable_behavior:
                case UndefinedVariableBehavior.ERROR:
                    raise UndefinedVariableError(name)
                case UndefinedVariableBehavior.EMPTY_STRING:
                    replacement = ""
                case UndefinedVariableBehavior.LEAVE_UNEXPANDED:
                    replacement = "${" + name + "}"
        pieces.append(value[pos:start])
        pieces.append(replacement)
        pos = end + 1
    pieces.append(value[pos:])
    return "".join(pieces)


class EnvironmentResolver:
    """Collects variables from ordered sources; later sources override earlier ones."""

    def __init__(self) -> None:
        self.sources: list[VariableSource] = []

    def add_source(self, source: VariableSource) -> None:
        """Append a source with higher priority than those already added."""
        self.sources.append(source)

    def resolve(self, options: ResolutionOptions | None = None) -> dict[str, str]:
        """Merge all sources and expand every ${VAR} reference."""
        opts = options or ResolutionOptions()
        variables: dict[str, str] = {}
        for source in self.sources:
            variables.update(_load_source(source))
        return {
            key: _expand_value(value, variables, opts, [])
            for key, value in variables.items()
        }