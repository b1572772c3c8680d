from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from maybe.core.config import CONFIG_FILENAME, Config, load_config
from maybe.core.errors import ErrorCode
from maybe.core.result import Err
from maybe.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol


def build_context(config_path: Path | None = None) -> CLIContext:
    """Load configuration and set up console output.

    Without an explicit path, ``maybe.toml`` in the current directory is
    used when it exists. A config file that exists but cannot be loaded is
    an error either way.
    """
    console = RichConsole()

    path = config_path if config_path is not None else Path.cwd() / CONFIG_FILENAME
    if config_path is None and not path.exists():
        return CLIContext(config=Config(), console=console)

    result = load_config(path)
    if isinstance(result, Err):
        console.error(result.error.message)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    return CLIContext(config=result.value, console=console)
