# pyright: reportAny=false, reportExplicitAny=false
"""Reading and merging raw configuration data."""

import os
import tomllib
from collections.abc import Collection, Iterable, Mapping
from pathlib import Path
from typing import Any

from folio.exceptions import ConfigError, ConfigLoadError

ENV_PREFIX = "FOLIO_"
ENV_SECTION_SEPARATOR = "__"


def read_toml_file(path: Path) -> dict[str, Any]:
    """Parse a TOML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file is not valid TOML.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigLoadError(
            f"Failed to parse TOML file {path}: {e}",
            path=path,
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e


def copy_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: copy_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [copy_value(item) for item in value]
    return value


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge `override` onto `base` into a new dict.

    Tables merge key by key. Any other value in `override`, arrays included,
    replaces what `base` holds. Neither argument is modified.
    """
    merged = copy_value(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy_value(value)
    return merged


def set_nested_key(d: dict[str, Any], key_path: str, value: Any) -> None:
    """Assign `value` at a dotted path, creating (or replacing) tables on the way.

    Example:
        >>> d = {}
        >>> set_nested_key(d, "site.title", "Notes")
        >>> d
        {'site': {'title': 'Notes'}}
    """
    *tables, leaf = key_path.split(".")
    node = d
    for name in tables:
        child = node.get(name)
        if not isinstance(child, dict):
            child = node[name] = {}
        node = child
    node[leaf] = value


def parse_string_value(value: str) -> Any:
    """Interpret an environment value as a TOML literal.

    ``true``, ``8000``, ``1.5``, ``["a", "b"]`` and ``{ a = 1 }`` become the
    matching Python values. Anything that is not a TOML literal stays a
    string.

    Examples:
        >>> parse_string_value("8000")
        8000
        >>> parse_string_value("https://example.com")
        'https://example.com'
    """
    try:
        return tomllib.loads(f"value = {value}")["value"]
    except tomllib.TOMLDecodeError:
        return value


def _parse_value(key_path: str, raw: str, text_keys: Collection[str]) -> Any:
    return raw if key_path in text_keys else parse_string_value(raw)


def parse_env_vars(
    environ: Mapping[str, str] | None = None,
    prefix: str = ENV_PREFIX,
    *,
    text_keys: Collection[str] = (),
) -> dict[str, Any]:
    """Collect configuration values from environment variables.

    ``FOLIO_SITE__TITLE=Notes`` sets ``site.title``. Only names containing the
    ``__`` section separator are settings; plain switches such as
    ``FOLIO_DEBUG`` are left alone.

    Args:
        environ: Variables to read. Defaults to ``os.environ``.
        prefix: Variable name prefix.
        text_keys: Dotted keys whose values stay strings as written.

    Returns:
        Nested configuration data.
    """
    if environ is None:
        environ = os.environ

    result: dict[str, Any] = {}
    for name, raw in sorted(environ.items()):
        if not name.startswith(prefix) or ENV_SECTION_SEPARATOR not in name:
            continue
        key_path = name.removeprefix(prefix).replace(ENV_SECTION_SEPARATOR, ".").lower()
        if all(key_path.split(".")):
            set_nested_key(result, key_path, _parse_value(key_path, raw, text_keys))
    return result


def parse_cli_overrides(
    assignments: Iterable[str],
    *,
    text_keys: Collection[str] = (),
) -> dict[str, Any]:
    """Collect ``KEY=VALUE`` assignments given on the command line.

    Keys are dotted (``site.title=Notes``); values are read like environment
    values. Later assignments to the same key win.

    Raises:
        ConfigError: If an assignment has no ``=`` or an empty key part.
    """
    result: dict[str, Any] = {}
    for assignment in assignments:
        key_path, separator, raw = assignment.partition("=")
        key_path = key_path.strip()
        if not separator or not all(key_path.split(".")):
            msg = f"Invalid override '{assignment}' (expected KEY=VALUE, e.g. site.title=Notes)"
            raise ConfigError(msg)
        set_nested_key(result, key_path, _parse_value(key_path, raw, text_keys))
    return result
