from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path

import typer

from maybe.cli.context import CLIContext, build_context
from maybe.core.capabilities import is_keyed
from maybe.core.chain import Maybe
from maybe.core.config import OutputConfig
from maybe.core.document import load_document
from maybe.core.errors import ErrorCode
from maybe.core.result import Err
from maybe.core.steps import Step, apply_steps, parse_steps, trace_steps
from maybe.output.console import ConsoleProtocol, Style


def describe(value: object) -> str:
    """Short description of a value for --explain output."""
    if value is None:
        return "absent"
    if isinstance(value, Mapping):
        return f"mapping ({len(value)} keys)"
    if is_keyed(value) and isinstance(value, Sequence):
        return f"sequence ({len(value)} items)"
    return type(value).__name__


def render(value: object, output: OutputConfig, *, raw: bool = False) -> str:
    if raw and isinstance(value, str):
        return value
    return json.dumps(
        value,
        indent=output.indent,
        sort_keys=output.sort_keys,
        ensure_ascii=False,
        default=repr,
    )


def _explain(console: ConsoleProtocol, chain: Maybe, steps: Sequence[Step]) -> Maybe:
    console.print(f"start: {describe(chain.unwrap())}", Style.DIM)
    for index, (step, reached) in enumerate(trace_steps(chain, steps), start=1):
        if chain.is_absent():
            console.print(f"{index}. {step} -> skipped", Style.DIM)
        elif reached.is_absent():
            console.print(f"{index}. {step} -> absent", Style.WARNING)
        else:
            console.print(f"{index}. {step} -> {describe(reached.unwrap())}", Style.INFO)
        chain = reached
    return chain


def run_query(
    ctx: CLIContext,
    document: Path,
    tokens: Sequence[str],
    *,
    default: str | None = None,
    raw: bool = False,
    explain: bool = False,
) -> None:
    console = ctx.console

    parsed = parse_steps(tokens)
    if isinstance(parsed, Err):
        console.error(f"{parsed.error.message}: {parsed.error.token!r}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    loaded = load_document(document)
    if isinstance(loaded, Err):
        console.error(loaded.error.message)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    chain = Maybe(loaded.value, policy=ctx.config.chain)
    if explain:
        chain = _explain(console, chain, parsed.value)
    else:
        chain = apply_steps(chain, parsed.value)

    if chain.is_absent():
        if default is not None:
            console.data(default)
            return
        console.error("query result is absent")
        raise typer.Exit(code=int(ErrorCode.ABSENT))

    console.data(render(chain.unwrap(), ctx.config.output, raw=raw))


def query(
    document: Path = typer.Argument(..., help="JSON or TOML document to query"),
    steps: list[str] | None = typer.Argument(
        None,
        help="Steps: a/b/0 keys, [json] key, .field, call(args)",
    ),
    config: Path | None = typer.Option(None, "--config", help="Config file (default: ./maybe.toml)"),
    default: str | None = typer.Option(
        None, "--default", help="Print this instead of failing when the result is absent"
    ),
    raw: bool = typer.Option(False, "--raw", help="Print string results without JSON quotes"),
    explain: bool = typer.Option(False, "--explain", help="Show what each step reached"),
) -> None:
    """Walk into a document step by step; missing steps yield absent."""
    ctx = build_context(config)
    run_query(ctx, document, steps or [], default=default, raw=raw, explain=explain)
