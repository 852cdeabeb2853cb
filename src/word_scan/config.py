"""Configuration loading for the word-scan command.

Config files use a small YAML subset, parsed here without external
dependencies:
- Scalars (strings, integers, floats, booleans, null)
- One level of nesting (``section:`` followed by indented ``key: value``)
- Comments (# ...)
- Quoted strings (single and double)

The parser walks the document with a TextCursor rather than splitting
it into lines, so CRLF and bare CR line endings behave the same as LF.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from word_scan.constants import (
    CR,
    DEFAULT_LOG_FILE,
    LF,
    NEWLINE_CHARS,
    NULL_CHAR,
    OUTPUT_FORMATS,
    USER_DATA_DIR_NAME,
)
from word_scan.text_cursor import TextCursor

# --- Minimal YAML Parser ---

_INDENT_CHARS = frozenset(" \t")
_KEY_END = NEWLINE_CHARS | {":"}

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
    "0": "\0",
}


def parse_simple_yaml(text: str) -> dict:
    """Parse a config document into a dict of scalars and one-level dicts.

    Raises:
        ValueError: On a line without a ``key:`` or an indented line
            outside a section.
    """
    result: dict = {}
    section: dict | None = None
    cursor = TextCursor(text)
    line_no = 0

    while not cursor.is_at_end:
        line_no += 1
        line_start = cursor.position
        cursor.move_past(_INDENT_CHARS)
        indent = cursor.position - line_start

        # Blank or comment-only line
        if cursor.peek() in ("#", CR, LF, NULL_CHAR):
            _skip_line(cursor)
            continue

        key_start = cursor.position
        cursor.move_to(_KEY_END)
        if cursor.peek() != ":":
            raise ValueError(f"line {line_no}: expected 'key: value'")
        key = cursor.extract(key_start, cursor.position).strip()
        cursor.move_ahead()

        value_start = cursor.position
        cursor.move_to_end_of_line()
        raw = _remove_inline_comment(cursor.extract(value_start, cursor.position)).strip()
        _skip_newline(cursor)

        if indent == 0:
            if raw:
                result[key] = _parse_value(raw)
                section = None
            else:
                section = result[key] = {}
        elif section is None:
            raise ValueError(f"line {line_no}: unexpected indentation before '{key}'")
        else:
            section[key] = _parse_value(raw)

    return result


def _skip_newline(cursor: TextCursor):
    if cursor.peek() == CR:
        cursor.move_ahead()
    if cursor.peek() == LF:
        cursor.move_ahead()


def _skip_line(cursor: TextCursor):
    cursor.move_to_end_of_line()
    _skip_newline(cursor)


def _remove_inline_comment(s: str) -> str:
    """Drop a trailing ' # comment' that is not inside quotes."""
    quote = None
    for i, c in enumerate(s):
        if quote:
            if c == quote:
                quote = None
        elif c in ("'", '"'):
            quote = c
        elif c == "#" and (i == 0 or s[i - 1] in " \t"):
            return s[:i]
    return s


def _parse_value(s: str) -> str | int | float | bool | None:
    """Parse a scalar value."""
    s = s.strip()
    if not s or s.lower() in ("null", "~", "none"):
        return None
    if s.lower() in ("true", "yes", "on"):
        return True
    if s.lower() in ("false", "no", "off"):
        return False

    if len(s) >= 2 and s[0] == s[-1] == '"':
        return _unescape_double_quoted(s[1:-1])
    if len(s) >= 2 and s[0] == s[-1] == "'":
        return s[1:-1].replace("''", "'")

    try:
        return float(s) if "." in s else int(s)
    except ValueError:
        return s


def _unescape_double_quoted(s: str) -> str:
    cursor = TextCursor(s)
    out = []
    while not cursor.is_at_end:
        start = cursor.position
        cursor.move_to("\\")
        out.append(cursor.extract(start, cursor.position))
        if cursor.is_at_end:
            break
        nxt = cursor.peek(1)
        if nxt in _ESCAPES:
            out.append(_ESCAPES[nxt])
        else:
            # Unknown escape (or a lone trailing backslash) is kept as-is
            out.append("\\" + nxt)
        cursor.move_ahead(2)
    return "".join(out)


# --- Configuration Dataclasses ---


@dataclass
class ScannerConfig:
    """Word scanner behaviour."""

    keep_trailing_empty: bool = False


@dataclass
class OutputConfig:
    """How the CLI prints results."""

    format: str = "words"
    separator: str = "\n"


@dataclass
class DebugConfig:
    log_file: str = DEFAULT_LOG_FILE


@dataclass
class Config:
    """Complete application configuration."""

    scanner: ScannerConfig = field(default_factory=ScannerConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)


# --- Config Loading ---


def _get_user_data_dir() -> Path:
    """Get the user's word-scan data directory ($HOME/.word-scan)."""
    return Path.home() / USER_DATA_DIR_NAME


def _looks_like_path(name_or_path: str) -> bool:
    return "/" in name_or_path or "\\" in name_or_path or name_or_path.endswith(".yml")


def _find_config_file(config_name_or_path: str) -> Path | None:
    """Find a config file by name or path.

    Search order:
    1. If it looks like a path (contains / or \\ or ends in .yml), treat as path
    2. $HOME/.word-scan/configs/<name>.yml
    3. Current working directory configs/<name>.yml
    """
    if _looks_like_path(config_name_or_path):
        path = Path(config_name_or_path).expanduser()
        return path if path.is_file() else None

    for candidate in _get_config_search_paths(config_name_or_path):
        path = Path(candidate)
        if path.is_file():
            return path
    return None


def _get_config_search_paths(config_name: str) -> list[str]:
    """Get list of paths that would be searched for a config name."""
    config_filename = f"{config_name}.yml"
    return [
        str(_get_user_data_dir() / "configs" / config_filename),
        str(Path.cwd() / "configs" / config_filename),
    ]


def load_config(config_name_or_path: str | None = None) -> Config:
    """Load configuration from a YAML file.

    Args:
        config_name_or_path: Name of config file (without .yml extension),
                            or path to a config file. If None or empty, uses 'default'.

    Returns:
        Config object with loaded values merged over defaults.

    Raises:
        FileNotFoundError: If a non-default config is specified but not found.
        ValueError: If the file is malformed or a value has the wrong type.
    """
    if not config_name_or_path:
        config_name_or_path = "default"

    config_path = _find_config_file(config_name_or_path)
    config = Config()

    if config_path is None:
        if config_name_or_path == "default":
            return config
        if _looks_like_path(config_name_or_path):
            raise FileNotFoundError(f"Config file not found: {config_name_or_path}")
        paths_str = "\n  - ".join(_get_config_search_paths(config_name_or_path))
        raise FileNotFoundError(
            f"Config '{config_name_or_path}' not found. Searched:\n  - {paths_str}"
        )

    with open(config_path, encoding="utf-8") as f:
        data = parse_simple_yaml(f.read())
    _merge_config(config, data)
    return config


def _expect(section: dict, key: str, kind: type, where: str):
    value = section[key]
    if not isinstance(value, kind):
        raise ValueError(f"{where}.{key}: expected {kind.__name__}, got {value!r}")
    return value


def _merge_config(config: Config, data: dict):
    """Merge parsed YAML data into a Config object."""
    if not isinstance(data, dict):
        return

    if isinstance(data.get("scanner"), dict):
        sc = data["scanner"]
        if "keep_trailing_empty" in sc:
            config.scanner.keep_trailing_empty = _expect(sc, "keep_trailing_empty", bool, "scanner")

    if isinstance(data.get("output"), dict):
        out = data["output"]
        if "format" in out:
            fmt = _expect(out, "format", str, "output")
            if fmt not in OUTPUT_FORMATS:
                raise ValueError(
                    f"output.format: expected one of {', '.join(OUTPUT_FORMATS)}, got {fmt!r}"
                )
            config.output.format = fmt
        if "separator" in out:
            config.output.separator = _expect(out, "separator", str, "output")

    if isinstance(data.get("debug"), dict):
        dbg = data["debug"]
        if "log_file" in dbg:
            config.debug.log_file = _expect(dbg, "log_file", str, "debug")


def get_default_config() -> Config:
    """Return a Config with all default values."""
    return Config()
