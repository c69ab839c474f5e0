from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

import pandas as pd

from maptools.tables import LIST, Accumulator, invert, invert_multi, restrict


logger = logging.getLogger(__name__)

ColumnFunction = Callable[[object], object]


def map_columns(df: pd.DataFrame, column_functions: Mapping[str, ColumnFunction]) -> pd.DataFrame:
    """Apply the function registered for each column to every value in that column.

    Missing values are left as they are and never passed to a function.
    Columns without a function are copied unchanged; functions naming a column
    the frame does not have are ignored.
    """
    result = df.copy()
    applicable = restrict(column_functions, result.columns)
    for column_name, function in applicable.items():
        result[column_name] = result[column_name].map(function, na_action="ignore")
    logger.debug("Mapped %d of %d column(s)", len(applicable), len(result.columns))
    return result


def drop_columns(
    df: pd.DataFrame, predicate: Callable[[str, pd.Series], bool]
) -> pd.DataFrame:
    """Return a copy of *df* without the columns where ``predicate(name, series)`` holds."""
    # Columns are visited by position so duplicate names are judged one by one.
    keep = [
        not predicate(name, df.iloc[:, position]) for position, name in enumerate(df.columns)
    ]
    dropped = [name for name, kept in zip(df.columns, keep) if not kept]
    if dropped:
        logger.debug("Dropping column(s): %s", ", ".join(map(str, dropped)))
    return df.loc[:, keep].copy()


def invert_series(
    series: pd.Series, destination: MutableMapping[Any, Any] | None = None
) -> MutableMapping[Any, Any]:
    """Map each non-missing value of *series* to its index label."""
    return invert(_present_items(series), destination=destination)


def invert_series_multi(
    series: pd.Series,
    destination: MutableMapping[Any, Any] | None = None,
    accumulator: Accumulator = LIST,
) -> MutableMapping[Any, Any]:
    """Map each non-missing value of *series* to all index labels holding it."""
    return invert_multi(_present_items(series), destination=destination, accumulator=accumulator)


def _present_items(series: pd.Series) -> pd.Series:
    # invert() and invert_multi() only read items()
    return series[series.notna()]
