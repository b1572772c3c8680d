"""Step descriptors and their textual syntax.

A chain written in code is a series of method calls on ``Maybe``. The CLI
needs the same chain as data, one token per step:

    .name              read field ``name``
    name(args)         call ``name`` with comma separated JSON literals
    [json]             index with a single JSON literal key: ["0"], [0]
    a/b/0              index with one key per segment; digit segments are ints
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import cast

from .chain import Maybe
from .result import Err, Ok, Result

__all__ = [
    "KeyStep",
    "FieldStep",
    "CallStep",
    "Step",
    "StepError",
    "parse_step",
    "parse_steps",
    "apply_step",
    "apply_steps",
    "trace_steps",
]

_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_CALL = re.compile(r"(?P<name>[A-Za-z_][A-Za-z0-9_]*)\((?P<args>.*)\)", re.DOTALL)


@dataclass(frozen=True, slots=True)
class KeyStep:
    keys: tuple[object, ...]

    def __str__(self) -> str:
        return "/".join(str(k) if isinstance(k, str) else json.dumps(k) for k in self.keys)


@dataclass(frozen=True, slots=True)
class FieldStep:
    name: str

    def __str__(self) -> str:
        return f".{self.name}"


@dataclass(frozen=True, slots=True)
class CallStep:
    name: str
    args: tuple[object, ...] = ()
    kwargs: Mapping[str, object] = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [json.dumps(a, default=repr) for a in self.args]
        parts += [f"{k}={json.dumps(v, default=repr)}" for k, v in self.kwargs.items()]
        return f"{self.name}({', '.join(parts)})"


type Step = KeyStep | FieldStep | CallStep


@dataclass(frozen=True, slots=True)
class StepError:
    """A step token that could not be parsed."""

    message: str
    token: str


def _parse_key_segment(segment: str) -> object:
    if segment.isascii() and segment.isdigit():
        return int(segment)
    return segment


def parse_step(token: str) -> Result[Step, StepError]:
    """Parse a single step token."""
    if not token:
        return Err(StepError("empty step", token))

    if token.startswith("."):
        name = token[1:]
        if not _IDENT.fullmatch(name):
            return Err(StepError(f"invalid field name: {name!r}", token))
        return Ok(FieldStep(name))

    if token.startswith("["):
        if not token.endswith("]") or len(token) < 3:
            return Err(StepError("expected a JSON key between brackets", token))
        try:
            key: object = json.loads(token[1:-1])
        except json.JSONDecodeError as e:
            return Err(StepError(f"invalid JSON key: {e.msg}", token))
        return Ok(KeyStep((key,)))

    call = _CALL.fullmatch(token)
    if call is not None:
        raw_args = call.group("args").strip()
        try:
            args = cast(list[object], json.loads(f"[{raw_args}]"))
        except json.JSONDecodeError as e:
            return Err(StepError(f"invalid call arguments: {e.msg}", token))
        return Ok(CallStep(call.group("name"), tuple(args)))

    if any(c in token for c in "()[]"):
        return Err(StepError("unbalanced brackets or parentheses", token))

    segments = token.split("/")
    if any(not s for s in segments):
        return Err(StepError("empty key segment", token))
    return Ok(KeyStep(tuple(_parse_key_segment(s) for s in segments)))


def parse_steps(tokens: Iterable[str]) -> Result[list[Step], StepError]:
    """Parse tokens in order, stopping at the first malformed one."""
    steps: list[Step] = []
    for token in tokens:
        result = parse_step(token)
        if isinstance(result, Err):
            return result
        steps.append(result.value)
    return Ok(steps)


def apply_step(chain: Maybe, step: Step) -> Maybe:
    match step:
        case KeyStep(keys):
            return chain.item(*keys)
        case FieldStep(name):
            return chain.field(name)
        case CallStep(name, args, kwargs):
            return chain.invoke(name, *args, **kwargs)


def apply_steps(chain: Maybe, steps: Sequence[Step]) -> Maybe:
    for step in steps:
        chain = apply_step(chain, step)
    return chain


def trace_steps(chain: Maybe, steps: Sequence[Step]) -> Iterator[tuple[Step, Maybe]]:
    """Yield each step together with the chain it produced."""
    for step in steps:
        chain = apply_step(chain, step)
        yield step, chain
