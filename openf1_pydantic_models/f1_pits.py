from pydantic import BaseModel
from typing import Optional


class F1PitStop(BaseModel):
    # https://openf1.org/#pit
    session_key: Optional[int] = None
    driver_number: Optional[int] = None
    lap_number: int
    date: Optional[str] = None
    pit_duration: Optional[float] = None
    # Includes travel through the pit lane when provided
    total_duration: Optional[float] = None


class GetF1PitStopsResponse(BaseModel):
    pit_stops: list[F1PitStop]
