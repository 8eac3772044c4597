"""
Utility functions for normalizing lap records.
Resolves aliased duration fields and infers lap start instants when the
upstream timestamp is missing.
"""
from typing import NamedTuple, Optional
from datetime import datetime, timedelta, timezone
from pydantic import TypeAdapter, ValidationError
from openf1_pydantic_models.f1_laps import F1LapData

_DATETIME_ADAPTER = TypeAdapter(datetime)


class ResolvedLapFields(NamedTuple):
    lap_duration: Optional[float]
    sector1: Optional[float]
    sector2: Optional[float]
    sector3: Optional[float]


def _first_present(preferred: Optional[float], fallback: Optional[float]) -> Optional[float]:
    return preferred if preferred is not None else fallback


def resolve_lap_fields(lap: F1LapData) -> ResolvedLapFields:
    """
    Pick canonical lap and sector durations from a raw lap record.
    The current OpenF1 field name wins; the legacy name is used only when the
    current one is absent. A missing value stays None, never 0.

    Args:
        lap: F1LapData from OpenF1 API

    Returns:
        ResolvedLapFields with durations in seconds
    """
    return ResolvedLapFields(
        lap_duration=_first_present(lap.lap_duration, lap.duration),
        sector1=_first_present(lap.duration_sector_1, lap.sector1),
        sector2=_first_present(lap.duration_sector_2, lap.sector2),
        sector3=_first_present(lap.duration_sector_3, lap.sector3),
    )


def normalize_datetime(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize datetime to naive UTC so aware and naive values compare.
    If datetime is timezone-aware, convert to UTC and remove timezone info.
    If datetime is naive, return as-is.
    """
    if dt is None:
        return None

    if dt.tzinfo is not None:
        utc_dt = dt.astimezone(timezone.utc)
        return utc_dt.replace(tzinfo=None)
    else:
        return dt


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp from OpenF1 with pydantic's datetime parser.
    Empty or malformed strings return None instead of raising.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        return normalize_datetime(_DATETIME_ADAPTER.validate_python(value.strip()))
    except ValidationError:
        return None


def infer_lap_start(
    date_start: Optional[str],
    lap_duration: Optional[float],
    last_start: Optional[datetime]
) -> Optional[datetime]:
    """
    Resolve the start instant of a lap.

    An explicit, parseable date_start is used as is. Otherwise the start is
    projected from the running last known start plus the lap's resolved
    duration. Without both, the start is unresolved.

    Laps must be fed in chronological order; out-of-order input drifts.

    Args:
        date_start: Raw ISO timestamp from the lap record
        lap_duration: Resolved lap duration in seconds
        last_start: Last resolved start instant, None before the first one

    Returns:
        Naive UTC datetime, or None if it cannot be inferred
    """
    explicit = parse_iso_datetime(date_start)
    if explicit is not None:
        return explicit
    if last_start is not None and lap_duration is not None:
        return last_start + timedelta(seconds=lap_duration)
    return None
