"""Value classification and existence checks.

A chain slot holds one of four shapes:

- absent: ``None``
- scalar: strings, bytes and numbers (bool included)
- keyed: mappings, and sequences that are not scalars
- record: anything else (instances, classes, modules, sets, ...)

Every lookup here checks for existence before access. ``getattr`` with a
default only absorbs ``AttributeError``, the "no such attribute" answer, and
a ``TypeError`` from a mapping membership test means "unhashable, not a key".
Other exceptions raised by user code propagate.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping, Sequence
from numbers import Number
from typing import TypeGuard

__all__ = [
    "SCALAR_TYPES",
    "Keyed",
    "is_absent",
    "is_scalar",
    "is_keyed",
    "is_record",
    "lookup_key",
    "lookup_field",
    "lookup_operation",
    "first_element",
]

SCALAR_TYPES: tuple[type, ...] = (str, bytes, bytearray, Number)

Keyed = Mapping[object, object] | Sequence[object]

_MISSING = object()


def is_absent(value: object) -> bool:
    return value is None


def is_scalar(value: object) -> bool:
    return isinstance(value, SCALAR_TYPES)


def is_keyed(value: object) -> TypeGuard[Keyed]:
    """Return True for mappings and non-scalar sequences."""
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and not is_scalar(value)


def is_record(value: object) -> bool:
    """Return True for values that expose fields and operations."""
    return not (is_absent(value) or is_scalar(value) or is_keyed(value))


def lookup_key(container: object, key: object) -> object | None:
    """Return the value at ``key``, or None if the key is not there.

    Unhashable keys are never present in a mapping. Sequences accept
    non-negative ints within bounds; negative indices and bools are not keys.
    """
    if isinstance(container, Mapping):
        try:
            present = key in container
        except TypeError:
            return None
        if not present:
            return None
        return container[key]
    if not is_keyed(container):
        return None
    if isinstance(key, bool) or not isinstance(key, int):
        return None
    if not 0 <= key < len(container):
        return None
    return container[key]


def lookup_field(record: object, name: str) -> object | None:
    """Return the field ``name`` of a record, or None.

    Methods and functions are operations, not fields.
    """
    if not is_record(record):
        return None
    value = getattr(record, name, _MISSING)
    if value is _MISSING or inspect.isroutine(value):
        return None
    return value


def lookup_operation(record: object, name: str) -> Callable[..., object] | None:
    """Return the callable attribute ``name`` of a record, or None."""
    if not is_record(record):
        return None
    operation = getattr(record, name, _MISSING)
    if operation is _MISSING or not callable(operation):
        return None
    return operation


def first_element(value: object) -> object | None:
    """Reduce a keyed value to its first element until it no longer is one.

    Mappings yield their first value in iteration order; empty structures
    yield None. A structure that contains itself on the first-element path
    reduces to None.
    """
    # Keep references, not ids: elements built on access are freed and their ids reused.
    seen: list[object] = []
    while is_keyed(value):
        if any(v is value for v in seen):
            return None
        seen.append(value)
        if isinstance(value, Mapping):
            value = next(iter(value.values()), None)
        elif len(value) == 0:
            value = None
        else:
            value = value[0]
    return value
