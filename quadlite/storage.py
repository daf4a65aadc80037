"""Global storage holding one value per type."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")

_storage: dict[type, Any] = {}


def store(data: Any) -> None:
    """Store ``data`` under its type, replacing any earlier value of that type."""
    _storage[type(data)] = data


def try_get(kind: type[T]) -> T | None:
    """Return the stored value of type ``kind``, or None."""
    return _storage.get(kind)


def get(kind: type[T]) -> T:
    """Return the stored value of type ``kind``; raise KeyError when absent."""
    try:
        return _storage[kind]
    except KeyError:
        raise KeyError(f"no value of type {kind.__name__} in storage") from None