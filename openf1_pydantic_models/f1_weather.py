from pydantic import BaseModel
from typing import Optional


class F1WeatherReading(BaseModel):
    """
    Weather sample for a session, not tied to a driver.
    `rainfall` is numeric on some payloads and is only used when
    `is_raining` is absent.
    """
    session_key: Optional[int] = None
    date: Optional[str] = None
    air_temperature: Optional[float] = None
    track_temperature: Optional[float] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    rainfall: Optional[float] = None
    is_raining: Optional[bool] = None


class GetF1WeatherResponse(BaseModel):
    weather: list[F1WeatherReading]
