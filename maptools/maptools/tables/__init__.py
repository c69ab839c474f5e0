"""Generic helper functions over mappings."""

from maptools.tables.accumulators import (
    APPEND,
    COUNT,
    LIST,
    SET,
    Accumulator,
    get_accumulator,
    list_accumulators,
)
from maptools.tables.operations import (
    ensure_modify,
    ensure_ref,
    ensure_removed,
    filter_keep,
    filter_remove,
    invert,
    invert_multi,
    invert_sequence,
    invert_sequence_multi,
    is_empty,
    map_values,
    remove_value,
    restrict,
)


__all__ = [
    "APPEND",
    "COUNT",
    "LIST",
    "SET",
    "Accumulator",
    "ensure_modify",
    "ensure_ref",
    "ensure_removed",
    "filter_keep",
    "filter_remove",
    "get_accumulator",
    "invert",
    "invert_multi",
    "invert_sequence",
    "invert_sequence_multi",
    "is_empty",
    "list_accumulators",
    "map_values",
    "remove_value",
    "restrict",
]
