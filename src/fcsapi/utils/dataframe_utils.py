#!/usr/bin/env python
"""Convert history responses into pandas DataFrames.

``get_history`` returns candles in one of two shapes:

- chart rows (``is_chart=True``): ``[timestamp, open, high, low, close, volume]``
- candle objects: ``{"t": 1704067200, "o": "1.1", "h": ..., "l": ..., "c": ..., "v": ...}``,
  either as a list or as a mapping keyed by timestamp

Timestamps are unix seconds; values above ``MS_TIMESTAMP_THRESHOLD`` are
treated as milliseconds.
"""

from typing import Any, Final

import pandas as pd

from fcsapi.utils.loguru_setup import logger

__all__ = ["OHLCV_COLUMNS", "create_empty_dataframe", "history_to_dataframe"]

OHLCV_COLUMNS: Final[list[str]] = ["open", "high", "low", "close", "volume"]
CANONICAL_INDEX_NAME: Final[str] = "open_time"
MS_TIMESTAMP_THRESHOLD: Final[int] = 10**11

# Chart row field indices
TIMESTAMP_IDX = 0
OPEN_IDX = 1
HIGH_IDX = 2
LOW_IDX = 3
CLOSE_IDX = 4
VOLUME_IDX = 5

_CANDLE_KEYS: Final[dict[str, str]] = {"o": "open", "h": "high", "l": "low", "c": "close", "v": "volume"}


def create_empty_dataframe() -> pd.DataFrame:
    """Empty OHLCV frame with a UTC ``open_time`` index."""
    df = pd.DataFrame(columns=OHLCV_COLUMNS, dtype="float64")
    df.index = pd.DatetimeIndex([], name=CANONICAL_INDEX_NAME, tz="UTC")
    return df


def _to_timestamp(value: Any) -> pd.Timestamp:
    ts = int(float(value))
    unit = "ms" if ts > MS_TIMESTAMP_THRESHOLD else "s"
    return pd.Timestamp(ts, unit=unit, tz="UTC")


def _optional_float(value: Any) -> float:
    return float("nan") if value is None or value == "" else float(value)


def _row_record(row: list[Any]) -> dict[str, Any]:
    return {
        CANONICAL_INDEX_NAME: _to_timestamp(row[TIMESTAMP_IDX]),
        "open": float(row[OPEN_IDX]),
        "high": float(row[HIGH_IDX]),
        "low": float(row[LOW_IDX]),
        "close": float(row[CLOSE_IDX]),
        "volume": _optional_float(row[VOLUME_IDX]) if len(row) > VOLUME_IDX else float("nan"),
    }


def _candle_record(candle: dict[str, Any], fallback_ts: Any = None) -> dict[str, Any]:
    ts = candle.get("t", fallback_ts)
    if ts is None:
        raise KeyError("t")
    record: dict[str, Any] = {CANONICAL_INDEX_NAME: _to_timestamp(ts)}
    for key, column in _CANDLE_KEYS.items():
        if column == "volume":
            record[column] = _optional_float(candle.get(key))
        else:
            record[column] = float(candle[key])
    return record


def _iter_candles(data: Any):
    if isinstance(data, dict):
        for key, candle in data.items():
            yield candle, key
    elif isinstance(data, list):
        for candle in data:
            yield candle, None


def history_to_dataframe(payload: Any) -> pd.DataFrame:
    """Build an OHLCV DataFrame from a history response.

    Args:
        payload: The full response mapping (``{"status": ..., "response": ...}``)
            or its ``response`` field

    Returns:
        DataFrame indexed by UTC ``open_time`` with open/high/low/close/volume
        columns, sorted ascending without duplicate timestamps. Malformed
        candles are skipped.
    """
    if payload is None:
        return create_empty_dataframe()

    data = payload.get("response") if isinstance(payload, dict) and "response" in payload else payload

    records = []
    for candle, key in _iter_candles(data):
        try:
            if isinstance(candle, (list, tuple)):
                records.append(_row_record(list(candle)))
            elif isinstance(candle, dict):
                records.append(_candle_record(candle, fallback_ts=key))
            else:
                raise TypeError(f"unsupported candle type {type(candle).__name__}")
        except (IndexError, KeyError, ValueError, TypeError) as e:
            logger.warning(f"Skipping malformed candle: {candle}, error: {e}")
            continue

    if not records:
        return create_empty_dataframe()

    df = pd.DataFrame(records).set_index(CANONICAL_INDEX_NAME).sort_index()
    df = df[~df.index.duplicated(keep="first")]
    return df[OHLCV_COLUMNS]
