"""Null-safe chaining over arbitrary values.

``Maybe`` wraps a value and lets a caller walk into it one step at a time
without checking for ``None`` or missing attributes between steps. A step
that cannot be taken turns the chain absent, and every later step is a no-op.
The single check happens at the end, on ``unwrap()``.

Usage:
    title = (
        Maybe(node)
        .get("field_title")      # guarded by node.has_field("field_title")
        .first()
        .field("value")
        .unwrap()
    )
    if title is None:
        ...

    port = Maybe(settings).item("ports", "controller", "core").unwrap_or(8000)

Steps:
    item(*keys)        index into mappings and sequences, one level per key
    field(name)        read a non-method attribute of an object
    invoke(name, ...)  call a method; ``m.name(...)`` is shorthand for this
    unwrap()           the current value, or None when absent

Calling a method on a mapping or sequence calls it on the first element
instead. Wrappers are immutable: each step returns a new ``Maybe``.
"""

from __future__ import annotations

from collections.abc import Callable

from .capabilities import (
    first_element,
    is_absent,
    is_record,
    lookup_field,
    lookup_key,
    lookup_operation,
)
from .config import ChainPolicy
from .result import Err, Ok, Result

__all__ = ["Maybe", "maybe"]


def _require_name(name: object) -> None:
    if not isinstance(name, str):
        raise TypeError(f"step name must be a str, not {type(name).__name__}")


class Maybe:
    """A chain slot that degrades to absent instead of failing."""

    __slots__ = ("_value", "_policy")

    _value: object
    _policy: ChainPolicy

    def __init__(self, value: object = None, *, policy: ChainPolicy | None = None) -> None:
        self._value = value
        self._policy = policy if policy is not None else ChainPolicy()

    def _next(self, value: object) -> Maybe:
        return Maybe(value, policy=self._policy)

    @property
    def policy(self) -> ChainPolicy:
        return self._policy

    # Steps

    def item(self, *keys: object) -> Maybe:
        """Index into nested mappings/sequences, one key per level.

        A missing key, or a value that cannot be indexed, makes the chain
        absent and the remaining keys are skipped.
        """
        value = self._value
        for key in keys:
            value = lookup_key(value, key)
            if value is None:
                break
        return self._next(value)

    def field(self, name: str, /) -> Maybe:
        """Read the attribute ``name`` of an object.

        Methods are not fields; use ``invoke`` to call them.

        Raises:
            TypeError: If name is not a str.
        """
        _require_name(name)
        return self._next(lookup_field(self._value, name))

    def invoke(self, name: str, /, *args: object, **kwargs: object) -> Maybe:
        """Call the operation ``name`` on the current value.

        Mappings and sequences are reduced to their first element first.
        Invoking the getter on an object that exposes the guard asks the
        guard with the same arguments, and a falsy answer makes the chain
        absent without calling the getter. Calling on an absent value, a
        scalar, or an object without that operation makes the chain absent.

        Exceptions raised by the operation itself propagate.

        Raises:
            TypeError: If name is not a str.
        """
        _require_name(name)
        value = first_element(self._value)
        if not is_record(value):
            return self._next(None)

        if name == self._policy.getter:
            guard = lookup_operation(value, self._policy.guard)
            if guard is not None and not guard(*args, **kwargs):
                return self._next(None)

        operation = lookup_operation(value, name)
        if operation is None:
            return self._next(None)
        return self._next(operation(*args, **kwargs))

    def __getattr__(self, name: str) -> Callable[..., Maybe]:
        # Only reached for names Maybe does not define itself.
        if name.startswith("_"):
            raise AttributeError(name)

        def call(*args: object, **kwargs: object) -> Maybe:
            return self.invoke(name, *args, **kwargs)

        call.__name__ = name
        return call

    # Observers

    def unwrap(self) -> object | None:
        """Return the current value, or None when absent."""
        return self._value

    def unwrap_or[T](self, default: T) -> object | T:
        """Return the current value, or ``default`` when absent."""
        if is_absent(self._value):
            return default
        return self._value

    def is_absent(self) -> bool:
        return is_absent(self._value)

    def to_result[E](self, error: E) -> Result[object, E]:
        """Return Ok(value), or Err(error) when absent."""
        if is_absent(self._value):
            return Err(error)
        return Ok(self._value)

    def __bool__(self) -> bool:
        return not is_absent(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Maybe({self._value!r})"


def maybe(value: object = None, *, policy: ChainPolicy | None = None) -> Maybe:
    """Start a chain on ``value``."""
    return Maybe(value, policy=policy)
