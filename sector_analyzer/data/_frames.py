"""Builders for price frames and time series."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import numpy as np
import pandas as pd

from sector_analyzer.data._types import PRICE_COLUMNS
from sector_analyzer.exceptions import DataError

_REQUIRED_BAR_FIELDS = ("date", "close", "volume")


def build_price_frame(records: Iterable[Mapping[str, Any]]) -> pd.DataFrame:
    """Build an OHLCV frame from daily bar records.

    Parameters
    ----------
    records : Iterable[Mapping[str, Any]]
        Bars with keys ``date``, ``open``, ``high``, ``low``, ``close``
        and ``volume``.  ``open``/``high``/``low`` may be omitted.

    Returns
    -------
    pd.DataFrame
        Float frame indexed by ascending unique ``DatetimeIndex`` with
        columns ``open, high, low, close, volume``.  Duplicate dates
        keep the last bar.

    Raises
    ------
    DataError
        If any bar lacks ``date``, ``close`` or ``volume``.
    """
    rows = list(records)
    if not rows:
        return pd.DataFrame(
            columns=list(PRICE_COLUMNS),
            index=pd.DatetimeIndex([], name="date"),
            dtype=float,
        )

    for i, row in enumerate(rows):
        missing = [key for key in _REQUIRED_BAR_FIELDS if key not in row]
        if missing:
            msg = f"bar {i} is missing required fields {missing}"
            raise DataError(msg)

    frame = pd.DataFrame(rows)
    frame["date"] = pd.to_datetime(frame["date"])
    frame = frame.set_index("date")
    for col in PRICE_COLUMNS:
        if col not in frame.columns:
            frame[col] = np.nan
    frame = frame[list(PRICE_COLUMNS)].astype(float)
    frame = frame[~frame.index.duplicated(keep="last")]
    return frame.sort_index()


def build_time_series(
    dates: Sequence[Any],
    values: Sequence[float],
    name: str | None = None,
) -> pd.Series:
    """Build a date-indexed float series from parallel arrays.

    Gaps (``None`` or NaN values) are kept as NaN; consumers drop them
    rather than interpolate.

    Parameters
    ----------
    dates : Sequence
        Observation dates, any order.
    values : Sequence[float]
        Observation values aligned with ``dates``.
    name : str or None
        Optional series name.

    Returns
    -------
    pd.Series
        Series sorted by ascending date.

    Raises
    ------
    DataError
        If ``dates`` and ``values`` differ in length.
    """
    if len(dates) != len(values):
        msg = (
            f"dates and values must have equal length, "
            f"got {len(dates)} and {len(values)}"
        )
        raise DataError(msg)

    index = pd.DatetimeIndex(pd.to_datetime(list(dates)), name="date")
    series = pd.Series(
        [np.nan if v is None else v for v in values],
        index=index,
        dtype=float,
        name=name,
    )
    return series.sort_index()
