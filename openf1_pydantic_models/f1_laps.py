"""
Pydantic models for OpenF1 API lap data responses.
These models represent the raw data structure from the OpenF1 API.
"""
from pydantic import BaseModel
from typing import List, Optional


class F1LapData(BaseModel):
    """
    Model representing a single lap from OpenF1 API.
    Matches the structure returned by https://api.openf1.org/v1/laps

    Older payloads use `duration` and `sector1..3` instead of
    `lap_duration` and `duration_sector_1..3`; both spellings are accepted.
    """
    session_key: Optional[int] = None
    driver_number: Optional[int] = None
    lap_number: int
    date_start: Optional[str] = None
    lap_duration: Optional[float] = None
    duration: Optional[float] = None
    duration_sector_1: Optional[float] = None
    duration_sector_2: Optional[float] = None
    duration_sector_3: Optional[float] = None
    sector1: Optional[float] = None
    sector2: Optional[float] = None
    sector3: Optional[float] = None


class GetF1LapsResponse(BaseModel):
    """Response wrapper for OpenF1 laps API."""
    laps: List[F1LapData]
