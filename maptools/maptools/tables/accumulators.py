"""Pluggable strategies for gathering keys during multi-key inversion."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Accumulator:
    """How keys sharing a value are collected.

    ``empty`` builds a fresh accumulator for a value seen for the first time;
    ``combine`` folds one more key into it and returns the accumulator to store.
    """

    empty: Callable[[], Any]
    combine: Callable[[Any, Any], Any]


def _prepend(collected: list[Any], key: Any) -> list[Any]:
    collected.insert(0, key)
    return collected


def _append(collected: list[Any], key: Any) -> list[Any]:
    collected.append(key)
    return collected


def _add(collected: set[Any], key: Any) -> set[Any]:
    collected.add(key)
    return collected


def _count(collected: int, _key: Any) -> int:
    return collected + 1


LIST = Accumulator(empty=list, combine=_prepend)
APPEND = Accumulator(empty=list, combine=_append)
SET = Accumulator(empty=set, combine=_add)
COUNT = Accumulator(empty=int, combine=_count)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

ACCUMULATORS: dict[str, Accumulator] = {
    "list": LIST,
    "append": APPEND,
    "set": SET,
    "count": COUNT,
}


def list_accumulators() -> list[str]:
    return sorted(ACCUMULATORS.keys())


def get_accumulator(name: str) -> Accumulator:
    """Return the preset accumulator registered under *name*."""
    if name not in ACCUMULATORS:
        supported = ", ".join(list_accumulators())
        raise ValueError(f"Unknown accumulator '{name}'. Supported accumulators: {supported}")
    return ACCUMULATORS[name]
