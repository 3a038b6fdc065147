"""Loading dotenv files from disk."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from .dotenv_parser import ParseError, ParseOptions, parse_env_content


def _debug_path(path: Path) -> str:
    return f'"{path}"'


class LoadError(Exception):
    """Base class for errors raised while loading a dotenv file."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class EnvFileNotFoundError(LoadError):
    """The file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"File not found: {_debug_path(path)}")


class PermissionDeniedError(LoadError):
    """The file exists but may not be read."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Permission denied accessing file: {_debug_path(path)}")


class EnvNotAFileError(LoadError):
    """The path exists but is not a regular file."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Path is not a file: {_debug_path(path)}")


class EnvParseError(LoadError):
    """The file content is not valid dotenv syntax."""

    def __init__(self, path: Path, source: ParseError) -> None:
        self.source = source
        super().__init__(path, f"Parse error in file {_debug_path(path)}: {source}")


class EnvIOError(LoadError):
    """Reading the file failed for another reason."""

    def __init__(self, path: Path, source: BaseException) -> None:
        self.source = source
        super().__init__(path, f"I/O error reading file {_debug_path(path)}: {source}")


def load_env_file(
    path: str | os.PathLike[str], options: ParseOptions | None = None
) -> dict[str, str]:
    """Read and parse a dotenv file into an ordered mapping of variables."""
    file_path = Path(path)
    if not file_path.exists():
        raise EnvFileNotFoundError(file_path)

    try:
        info = file_path.stat()
    except PermissionError as exc:
        raise PermissionDeniedError(file_path) from exc
    except OSError as exc:
        raise EnvIOError(file_path, exc) from exc

    if not stat.S_ISREG(info.st_mode):
        raise EnvNotAFileError(file_path)

    try:
        content = file_path.read_bytes().decode("utf-8")
    except PermissionError as exc:
        raise PermissionDeniedError(file_path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvIOError(file_path, exc) from exc

    try:
        return parse_env_content(content, options)
    except ParseError as exc:
        raise EnvParseError(file_path, exc) from exc