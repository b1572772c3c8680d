"""Typed configuration loading and access.

Configuration lives in a TOML file (``maybe.toml`` by default):

    [chain]
    getter = "get"
    guard = "has_field"

    [output]
    indent = 2
    sort_keys = false
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_int, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_GETTER",
    "DEFAULT_GUARD",
    "DEFAULT_INDENT",
    "ChainPolicy",
    "OutputConfig",
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "maybe.toml"

DEFAULT_GETTER = "get"
DEFAULT_GUARD = "has_field"
DEFAULT_INDENT = 2


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ChainPolicy:
    """Names used by the getter-safety rule.

    When an operation named ``getter`` is invoked on a record that exposes
    ``guard``, the guard is asked first with the same arguments.
    """

    getter: str = DEFAULT_GETTER
    guard: str = DEFAULT_GUARD


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """How query results are printed."""

    indent: int = DEFAULT_INDENT
    sort_keys: bool = False


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    chain: ChainPolicy = field(default_factory=ChainPolicy)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        chain: StrDict = get_table(data, "chain") or {}
        output: StrDict = get_table(data, "output") or {}

        indent = get_int(output, "indent")
        if indent is None or indent <= 0:
            indent = DEFAULT_INDENT

        return cls(
            chain=ChainPolicy(
                getter=get_str(chain, "getter") or DEFAULT_GETTER,
                guard=get_str(chain, "guard") or DEFAULT_GUARD,
            ),
            output=OutputConfig(
                indent=indent,
                sort_keys=bool(get_bool(output, "sort_keys")),
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data = as_str_dict(tomllib.loads(content.decode("utf-8")))
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except IsADirectoryError:
        return Err(ConfigError(f"Config path is a directory: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def _check_types(data: StrDict, path: Path) -> ConfigError | None:
    expected: dict[str, dict[str, type]] = {
        "chain": {"getter": str, "guard": str},
        "output": {"indent": int, "sort_keys": bool},
    }
    for section, keys in expected.items():
        if section not in data:
            continue
        table = get_table(data, section)
        if table is None:
            return ConfigError(f"[{section}] must be a table", path=path)
        for key, kind in keys.items():
            if key not in table:
                continue
            value = table[key]
            if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
                return ConfigError(
                    f"{section}.{key} must be of type {kind.__name__}", path=path
                )
    return None


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    error = _check_types(result.value, path)
    if error is not None:
        return Err(error)
    return Ok(Config.from_dict(result.value))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return the default config on any failure."""
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config()
