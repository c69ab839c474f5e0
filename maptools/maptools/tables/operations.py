"""Generic helpers over mappings: lookup, inversion, restriction and filtering."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, MutableMapping, Sequence
from typing import Any, TypeVar

from maptools.tables.accumulators import LIST, Accumulator


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
W = TypeVar("W")


def ensure_ref(mapping: MutableMapping[K, V], key: K, default: Callable[[], V]) -> V:
    """Return the value under *key*, storing ``default()`` there first on a miss.

    A key holding a falsy value (``0``, ``""``, ``None``) counts as present, so
    *default* is only called when *key* is genuinely absent.
    """
    if key in mapping:
        return mapping[key]

    value = default()
    mapping[key] = value
    return value


def ensure_modify(
    mapping: MutableMapping[K, V],
    key: K,
    default: Callable[[], V],
    function: Callable[[V], V],
) -> V:
    """Store ``function(current)`` under *key* and return it.

    *current* is fetched with :func:`ensure_ref`, so *default* is called at
    most once. This is a single unguarded read-modify-write of *mapping*.
    """
    value = function(ensure_ref(mapping, key, default))
    mapping[key] = value
    return value


def ensure_removed(mapping: MutableMapping[K, V], key: K) -> tuple[V | None, bool]:
    """Delete *key* if present.

    Returns ``(value, True)`` when an entry was removed and ``(None, False)``
    when *key* was absent, in which case *mapping* is left untouched.
    """
    if key not in mapping:
        return None, False
    return mapping.pop(key), True


def invert(
    mapping: Mapping[K, V], destination: MutableMapping[Any, K] | None = None
) -> MutableMapping[Any, K]:
    """Map each value of *mapping* back to its key.

    *mapping* is assumed injective. When several keys share a value, which of
    them ends up in the result is not guaranteed.
    """
    result: MutableMapping[Any, K] = {} if destination is None else destination
    for key, value in mapping.items():
        result[value] = key
    return result


def invert_multi(
    mapping: Mapping[K, V],
    destination: MutableMapping[Any, Any] | None = None,
    accumulator: Accumulator = LIST,
) -> MutableMapping[Any, Any]:
    """Map each value of *mapping* to all of the keys holding it.

    Keys are gathered with *accumulator* (a prepended list by default). The
    order in which keys are combined is not guaranteed.
    """
    result: MutableMapping[Any, Any] = {} if destination is None else destination
    for key, value in mapping.items():
        _accumulate(result, value, key, accumulator)
    return result


def invert_sequence(
    sequence: Sequence[V], destination: MutableMapping[Any, int] | None = None
) -> MutableMapping[Any, int]:
    """Map each item of *sequence* to its 0-based position."""
    result: MutableMapping[Any, int] = {} if destination is None else destination
    for position, item in enumerate(sequence):
        result[item] = position
    return result


def invert_sequence_multi(
    sequence: Sequence[V],
    destination: MutableMapping[Any, Any] | None = None,
    accumulator: Accumulator = LIST,
) -> MutableMapping[Any, Any]:
    """Map each item of *sequence* to all of the positions it occurs at."""
    result: MutableMapping[Any, Any] = {} if destination is None else destination
    for position, item in enumerate(sequence):
        _accumulate(result, item, position, accumulator)
    return result


def restrict(mapping: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Return the entries of *mapping* whose key is in *keys*; unknown keys are skipped."""
    return {key: mapping[key] for key in keys if key in mapping}


def map_values(mapping: Mapping[K, V], function: Callable[[V], W]) -> dict[K, W]:
    """Return a new dict with the same keys and ``function(value)`` as values."""
    return {key: function(value) for key, value in mapping.items()}


def filter_keep(
    mapping: Mapping[K, V],
    predicate: Callable[[K, V], bool],
    destination: MutableMapping[K, V] | None = None,
) -> MutableMapping[K, V]:
    """Copy the entries for which ``predicate(key, value)`` holds into *destination*."""
    result: MutableMapping[K, V] = {} if destination is None else destination
    for key, value in mapping.items():
        if predicate(key, value):
            result[key] = value
    return result


def filter_remove(
    mapping: Mapping[K, V],
    predicate: Callable[[K, V], bool],
    destination: MutableMapping[K, V] | None = None,
) -> MutableMapping[K, V]:
    """Copy the entries for which ``predicate(key, value)`` does not hold into *destination*."""
    return filter_keep(
        mapping, lambda key, value: not predicate(key, value), destination=destination
    )


def remove_value(
    mapping: Mapping[K, V],
    value: object = None,
    destination: MutableMapping[K, V] | None = None,
) -> MutableMapping[K, V]:
    """Copy every entry of *mapping* except those whose value equals *value*.

    Values are compared with ``==``, which must give a plain bool. Array-like
    values such as a pandas Series make the comparison raise ``ValueError``.
    """
    return filter_remove(mapping, lambda _, stored: stored == value, destination=destination)


def is_empty(mapping: Mapping[Any, Any]) -> bool:
    return len(mapping) == 0


def _accumulate(
    result: MutableMapping[Any, Any], value: Any, key: Any, accumulator: Accumulator
) -> None:
    ensure_modify(
        result, value, accumulator.empty, lambda collected: accumulator.combine(collected, key)
    )
