"""
Utility functions for matching session weather readings to laps.
"""
from typing import List, Optional
from datetime import datetime
from openf1_pydantic_models.f1_weather import F1WeatherReading
from api_pydantic_models.telemetry import WeatherSnapshot
from utils.lap_data import parse_iso_datetime


def resolve_is_raining(reading: F1WeatherReading) -> Optional[bool]:
    """
    Explicit is_raining wins; otherwise any positive rainfall counts as rain.
    Returns None when neither field is present.
    """
    if reading.is_raining is not None:
        return reading.is_raining
    if reading.rainfall is not None:
        return reading.rainfall > 0
    return None


def find_closest_reading(
    lap_start: Optional[datetime],
    weather: List[F1WeatherReading]
) -> Optional[F1WeatherReading]:
    """
    Return the reading with the smallest absolute time distance to lap_start.
    Ties go to the reading listed first. Readings with unparseable dates are
    skipped. Linear scan, no ordering assumed.
    """
    if lap_start is None or not weather:
        return None

    best: Optional[F1WeatherReading] = None
    best_diff: Optional[float] = None
    for reading in weather:
        reading_ts = parse_iso_datetime(reading.date)
        if reading_ts is None:
            continue
        diff = abs((reading_ts - lap_start).total_seconds())
        if best_diff is None or diff < best_diff:
            best = reading
            best_diff = diff
    return best


def closest_weather_snapshot(
    lap_start: Optional[datetime],
    weather: List[F1WeatherReading]
) -> Optional[WeatherSnapshot]:
    reading = find_closest_reading(lap_start, weather)
    if reading is None:
        return None
    return WeatherSnapshot(
        date=reading.date,
        air_temperature=reading.air_temperature,
        track_temperature=reading.track_temperature,
        humidity=reading.humidity,
        wind_speed=reading.wind_speed,
        is_raining=resolve_is_raining(reading),
    )
