# stand

Explicit environment variable management for projects.

`stand` describes the environments of a project (development, staging,
production, ...) in one configuration file, resolves inheritance between
them, and reads `.env` style files with quoting, escapes, multi-line values
and `${VAR}` expansion.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Configuration

A project is described by a `.stand.toml` file in its root directory:

```toml
version = "2.0"

[settings]
default_environment = "dev"
show_env_in_prompt = true

[common]
APP_NAME = "MyApp"
LOG_LEVEL = "info"

[environments.dev]
description = "Development environment"
color = "green"
DATABASE_URL = "postgres://localhost:5432/dev"
DEBUG = "true"

[environments.prod]
description = "Production environment"
extends = "dev"
requires_confirmation = true
DATABASE_URL = "postgres://prod.example.com/myapp"
DEBUG = "false"
```

- `version`, `settings` (with `default_environment`) and `environments` are
  required; every environment needs a `description`.
- `settings.nested_shell_behavior` may be `prevent`, `allow` or `warn`.
- Every key of an environment other than `description`, `extends`, `color`
  and `requires_confirmation` is a variable of that environment; all
  variable values must be strings.
- Variables in `[common]` are given to every environment; an environment's
  own variables take priority.
- `extends` names a parent environment whose variables, `color` and
  `requires_confirmation` are inherited unless the child sets them. A loop
  of `extends` raises `CircularReferenceError`.
- When `.stand.toml` is loaded, `${NAME}` in a `[common]` value, an
  environment variable value or a description is replaced with the variable
  `NAME` of the calling process. Expansion is single-pass. A missing
  variable raises `InterpolationError`; an empty name `${}` or an unclosed
  `${` raises `ConfigValidationError`.

### Loading a configuration

```python
from stand.config_loader import load_config_toml_with_validation

config = load_config_toml_with_validation(".")
prod = config.environments["prod"]
print(prod.variables["APP_NAME"])      # MyApp, from [common]
print(prod.variables["DATABASE_URL"])  # postgres://prod.example.com/myapp
```

The functions in `stand.config_loader`:

- `load_config_toml(path)` reads `.stand.toml` and interpolates `${NAME}`.
- `load_config_toml_with_inheritance(path)` also applies `[common]` and
  `extends`.
- `load_config_toml_with_validation(path)` also runs every check in
  `stand.validator`: required fields, that `default_environment` and every
  `extends` name an existing environment, no `extends` cycles, and no empty
  keys or values in `[common]`.
- `load_config(path)` reads the older YAML layout in `.stand/config.yaml`
  (without interpolation or inheritance);
  `load_config_with_validation(path)` runs the same checks on it, and
  `load_config_with_defaults(path)` sets `show_env_in_prompt` to `True` and
  each environment's `requires_confirmation` to `False` where they are
  unset.
- `interpolate_string(text)` performs the `${NAME}` replacement on a single
  string.

The result is a `stand.models.Configuration` holding `Environment` and
`Settings` dataclasses; each has a `from_dict` class method that builds it
from an already parsed document.

Failures raise subclasses of `stand.errors.ConfigError`: a missing
configuration file raises `ConfigValidationError`, unreadable files
`ConfigIOError`, malformed documents `TomlParseError` or `YamlParseError`,
and the checks above `MissingFieldError`, `InvalidEnvironmentError`,
`CircularReferenceError`, `InterpolationError` or `ConfigValidationError`.

## Reading `.env` files

```python
from stand.dotenv_parser import parse_env_content
from stand.env_loader import load_env_file

values = parse_env_content('BASE=https://api.example.com\nURL="${BASE}/v1"\n')
print(values["URL"])  # https://api.example.com/v1

values = load_env_file(".env")
```

Keys may contain letters, digits and `_`, and keep the order in which they
first appear; a later assignment replaces the value of an earlier one.
Double-quoted values understand `\n`, `\t`, `\r`, `\\`, `\"` and `\'`;
single-quoted values are taken literally; both may span several lines.
Unquoted values end at an inline `#` comment. `${NAME}` refers to a key
defined earlier in the same content and becomes empty if there is none;
pass `ParseOptions(expand_variables=False)` to keep references as written.

Syntax problems raise `stand.dotenv_parser.ParseError` (`InvalidFormatError`
or `UnterminatedQuoteError`, with the line number in `line`). When reading a
file, `load_env_file` raises a `stand.env_loader.LoadError`:
`EnvFileNotFoundError`, `PermissionDeniedError`, `EnvNotAFileError`,
`EnvParseError` or `EnvIOError`.

## Combining sources

`stand.resolver.EnvironmentResolver` merges variables from several sources,
later sources overriding earlier ones, and then expands `${VAR}` references
between them, detecting cycles:

```python
from stand.resolver import CliArgsSource, DefaultSource, EnvironmentResolver

resolver = EnvironmentResolver()
resolver.add_source(DefaultSource({"BASE": "https://api.example.com", "ENDPOINT": "${BASE}/v1"}))
resolver.add_source(CliArgsSource({"BASE": "http://localhost:8080"}))
print(resolver.resolve()["ENDPOINT"])  # http://localhost:8080/v1
```

Sources are `DefaultSource`, `CliArgsSource`, `EnvFileSource(path)` (a
dotenv file, read without its own expansion) and `SystemEnvSource()` (the
process environment). Undefined references become empty strings by
default; `resolve(ResolutionOptions(undefined_variable_behavior=...))` with
`UndefinedVariableBehavior.ERROR` or `LEAVE_UNEXPANDED` can instead raise
`UndefinedVariableError` or leave the reference as written. A loop of
references raises `CircularVariableError`, and a source that cannot be
loaded raises `SourceError`.

## Command line

```
stand --help
stand --version
```

The `stand` command recognises the subcommands `init [--force]`,
`shell ENV`, `exec ENV COMMAND...`, `list`, `show ENV [--values]`,
`switch ENV`, `set NAME VALUE`, `unset NAME`, `validate` and `current`.

## What it does not do

The subcommands are parsed but not carried out: each one prints the
arguments it received and exits with status 1. The command line does not
create a configuration, start a shell, run a command, switch or remember the
active environment, or keep session variables. Those tasks are available
only through the library functions described above, where they exist at
all; nothing in the package spawns processes or stores state.