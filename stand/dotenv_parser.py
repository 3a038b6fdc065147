"""Parser for dotenv-style KEY=value content."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


class ParseError(Exception):
    """Base class for dotenv parse errors; carries the 1-based line number."""

    def __init__(self, line: int, message: str) -> None:
        self.line = line
        super().__init__(message)


class InvalidFormatError(ParseError):
    """A line is not a valid KEY=value assignment."""

    def __init__(self, line: int, content: str) -> None:
        self.content = content
        super().__init__(line, f"Invalid format at line {line}: '{content}'")


class UnterminatedQuoteError(ParseError):
    """A quoted value never closes."""

    def __init__(self, line: int) -> None:
        super().__init__(line, f"Unterminated quote at line {line}")


class InvalidEscapeError(ParseError):
    """An escape sequence is not accepted."""

    def __init__(self, line: int, sequence: str) -> None:
        self.sequence = sequence
        super().__init__(line, f"Invalid escape sequence '{sequence}' at line {line}")


@dataclass(frozen=True)
class ParseOptions:
    """Options for parsing; by default ${VAR} references are expanded."""

    expand_variables: bool = True


_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\", '"': '"', "'": "'"}


def _split_lines(content: str) -> list[str]:
    parts = content.split("\n")
    tail = parts.pop()
    lines = [part.removesuffix("\r") for part in parts]
    if tail:
        lines.append(tail)
    return lines


def _find_equals_position(line: str) -> int | None:
    in_single = in_double = escaped = False
    for index, ch in enumerate(line):
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == "=" and not in_single and not in_double:
            return index
    return None


def _is_valid_key(key: str) -> bool:
    return bool(key) and all(ch.isalnum() or ch == "_" for ch in key)


def _find_closing_quote(text: str, quote: str) -> int | None:
    escaped = False
    for index, ch in enumerate(text):
        if escaped:
            escaped = False
        elif ch == "\\" and quote == '"':
            escaped = True
        elif ch == quote:
            return index
    return None


def _process_escape_sequences(value: str) -> str:
    out: list[str] = []
    chars = iter(value)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        following = next(chars, None)
        if following is None:
            out.append("\\")
        else:
            out.append(_ESCAPES.get(following, "\\" + following))
    return "".join(out)


def _parse_quoted(
    value_part: str, rest: Iterator[tuple[int, str]], line_num: int, quote: str
) -> str:
    current = value_part[value_part.index(quote) + 1 :]
    end = _find_closing_quote(current, quote)
    if end is not None:
        content = current[:end]
    else:
        content = current
        for _, line in rest:
            end = _find_closing_quote(line, quote)
            if content:
                content += "\n"
            if end is not None:
                content += line[:end]
                break
            content += line
        else:
            raise UnterminatedQuoteError(line_num)
    # Single-quoted values are kept literally.
    return _process_escape_sequences(content) if quote == '"' else content


def _parse_value(value_part: str, rest: Iterator[tuple[int, str]], line_num: int) -> str:
    leading = value_part.lstrip()
    if leading.startswith('"'):
        return _parse_quoted(value_part, rest, line_num, '"')
    if leading.startswith("'"):
        return _parse_quoted(value_part, rest, line_num, "'")
    comment = value_part.find("#")
    return value_part if comment < 0 else value_part[:comment].rstrip()


def _expand_variables(value: str, variables: dict[str, str]) -> str:
    result = value
    while (start := result.find("${")) != -1:
        end = result.find("}", start)
        if end == -1:
            break
        name = result[start + 2 : end]
        result = result[:start] + variables.get(name, "") + result[end + 1 :]
    return result


def parse_env_content(content: str, options: ParseOptions | None = None) -> dict[str, str]:
    """Parse dotenv content into an ordered mapping of variables."""
    expand = (options or ParseOptions()).expand_variables
    variables: dict[str, str] = {}
    numbered = enumerate(_split_lines(content), start=1)
    for line_num, line in numbered:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        eq = _find_equals_position(line)
        if eq is None:
            raise InvalidFormatError(line_num, line)
        key = line[:eq].strip()
        if not _is_valid_key(key):
            raise InvalidFormatError(line_num, line)
        value = _parse_value(line[eq + 1 :], numbered, line_num)
        if expand:
            value = _expand_variables(value, variables)
        variables[key] = value
    return variables