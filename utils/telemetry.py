"""
Merge laps, stints, pit stops and weather into one per-lap race telemetry view.
"""
import asyncio
from typing import Any, Dict, List, Optional
from datetime import datetime
from openf1_pydantic_models.f1_laps import F1LapData
from openf1_pydantic_models.f1_stints import F1Stint
from openf1_pydantic_models.f1_pits import F1PitStop
from openf1_pydantic_models.f1_weather import F1WeatherReading
from api_pydantic_models.telemetry import RaceSummary, RaceTelemetry, RaceTelemetryLap
from utils.openf1_client import OpenF1Client
from utils.lap_data import resolve_lap_fields, infer_lap_start
from utils.stints import compound_for_lap
from utils.weather import closest_weather_snapshot
from utils.pit_stops import build_pit_lookup, build_pit_stop_entries
from utils.pruning import omit_nones_deep
import logging

logger = logging.getLogger(__name__)


def merge_race_telemetry(
    laps: List[F1LapData],
    stints: List[F1Stint],
    pit_stops: List[F1PitStop],
    weather: List[F1WeatherReading]
) -> Dict[str, Any]:
    """
    Build the merged race telemetry for one driver.

    Laps are processed in the order given. Each lap gets its resolved
    durations, the compound of the covering stint and the weather reading
    nearest to its (possibly inferred) start.

    The pit lookup (last record per lap) only feeds a debug log line with
    the number of distinct pit laps. The summary counts raw pit records and
    pitStops lists every record.

    Args:
        laps: Lap records, expected in chronological order
        stints: Tire stints for the same driver and session
        pit_stops: Pit stop records for the same driver and session
        weather: Session weather readings

    Returns:
        RaceTelemetry as a camelCase dict with every None value removed
    """
    compounds: Dict[str, None] = {}
    last_start: Optional[datetime] = None
    telemetry: List[RaceTelemetryLap] = []

    for lap in laps:
        fields = resolve_lap_fields(lap)

        compound = compound_for_lap(lap.lap_number, stints)
        if compound:
            compounds.setdefault(compound, None)

        lap_start = infer_lap_start(lap.date_start, fields.lap_duration, last_start)
        if lap_start is not None:
            last_start = lap_start

        telemetry.append(RaceTelemetryLap(
            lap_number=lap.lap_number,
            lap_duration=fields.lap_duration,
            sector1=fields.sector1,
            sector2=fields.sector2,
            sector3=fields.sector3,
            tire_compound=compound,
            weather=closest_weather_snapshot(lap_start, weather),
        ))

    pit_by_lap = build_pit_lookup(pit_stops)
    logger.debug("Merged %d laps, %d pit records on %d distinct laps",
                 len(telemetry), len(pit_stops), len(pit_by_lap))

    result = RaceTelemetry(
        race_summary=RaceSummary(
            total_laps=len(telemetry),
            total_pit_stops=len(pit_stops),
            compounds_used=list(compounds),
        ),
        pit_stops=build_pit_stop_entries(pit_stops),
        telemetry=telemetry,
    )
    return omit_nones_deep(result.model_dump(by_alias=True))


async def get_race_telemetry(
    client: OpenF1Client,
    session_key: int,
    driver_number: int
) -> Dict[str, Any]:
    """
    Fetch the four collections concurrently and merge them.

    All four fetches must succeed. The first UpstreamUnavailable aborts the
    merge and is re-raised as is; the other fetches are cancelled and no
    partial result is returned.
    """
    tasks = [
        asyncio.ensure_future(client.fetch_laps(session_key, driver_number)),
        asyncio.ensure_future(client.fetch_stints(session_key, driver_number)),
        asyncio.ensure_future(client.fetch_pit_stops(session_key, driver_number)),
        asyncio.ensure_future(client.fetch_weather(session_key)),
    ]
    try:
        laps, stints, pit_stops, weather = await asyncio.gather(*tasks)
    except Exception:
        for task in tasks:
            task.cancel()
        logger.warning("Telemetry merge aborted for session_key=%s driver_number=%s",
                       session_key, driver_number)
        raise

    logger.info("Merging telemetry for session_key=%s driver_number=%s: %d laps, %d stints, %d pits, %d weather",
                session_key, driver_number, len(laps), len(stints), len(pit_stops), len(weather))
    return merge_race_telemetry(laps, stints, pit_stops, weather)
