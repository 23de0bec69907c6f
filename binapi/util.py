"""Helpers for building request query strings."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def build_request(parameters: Mapping[str, str]) -> str:
    """Join parameters as ``key=value`` pairs, sorted by key, separated by ``&``."""
    return "&".join(f"{key}={value}" for key, value in sorted(parameters.items()))


def build_signed_request(parameters: Mapping[str, str], recv_window: int) -> str:
    """Build a query string carrying the current timestamp."""
    return build_signed_request_custom(parameters, recv_window, datetime.now(timezone.utc))


def build_signed_request_custom(
    parameters: Mapping[str, str], recv_window: int, start: datetime
) -> str:
    """Build a query string carrying ``start`` as a millisecond timestamp.

    ``recvWindow`` is added only when ``recv_window`` is positive. A naive
    ``start`` is taken to be in UTC.
    """
    query = dict(parameters)
    if recv_window > 0:
        query["recvWindow"] = str(recv_window)
    query["timestamp"] = str(_timestamp_millis(start))
    return build_request(query)


def _timestamp_millis(start: datetime) -> int:
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    delta = start - _EPOCH
    if delta.total_seconds() < 0:
        raise ValueError("Failed to get timestamp")
    return delta.days * 86_400_000 + delta.seconds * 1000 + delta.microseconds // 1000


def to_i64(value: Any) -> int:
    """Return a decoded JSON value as a signed 64-bit integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(f"integer {value} does not fit in 64 bits")
    return value


def to_f64(value: Any) -> float:
    """Parse a decoded JSON string value as a float."""
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    if value != value.strip() or "_" in value:
        raise ValueError(f"invalid float literal: {value!r}")
    return float(value)