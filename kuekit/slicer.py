"""Sequence helpers: type check, chunking and restarting at an id."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Identifier(Protocol):
    """Anything that exposes a numeric identity."""

    def identity(self) -> int:
        """Return the object's numeric identity."""


def is_slice(value: object) -> bool:
    """Return True when value is a list-like sequence (not a string)."""
    return isinstance(value, (list, tuple, bytes, bytearray))


def chunk(items: Sequence[T], max_size: int) -> list[Sequence[T]]:
    """Split items into consecutive pieces of at most max_size elements."""
    if max_size < 1:
        raise ValueError("max_size must be at least 1")
    return [items[start:start + max_size] for start in range(0, len(items), max_size)]


def _start_index(values: Sequence[object], target: object) -> int:
    return next((index for index, value in enumerate(values) if value == target), 0)


def restart_slice(inputs: Sequence[T], begin_id: T) -> list[T]:
    """Return inputs from the first element equal to begin_id onwards.

    A falsy begin_id, or one not found, returns every element.
    """
    if not inputs:
        return []
    if not begin_id:
        return list(inputs)
    return list(inputs[_start_index(inputs, begin_id):])


def restart_slice_by_identity(inputs: Sequence[Identifier], begin_id: int) -> list[Identifier]:
    """Return inputs from the first element whose identity() is begin_id onwards.

    A begin_id of 0, or one not found, returns every element.
    """
    if not inputs:
        return []
    if begin_id == 0:
        return list(inputs)
    identities = [item.identity() for item in inputs]
    return list(inputs[_start_index(identities, begin_id):])