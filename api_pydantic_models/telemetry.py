"""
Pydantic models for the merged race telemetry response.
Field names are snake_case in Python and serialize to camelCase.
Absent values are dropped after dumping (see utils.pruning), never sent as null.
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class WeatherSnapshot(BaseModel):
    """Weather reading closest in time to a lap start."""
    date: Optional[str] = None
    air_temperature: Optional[float] = Field(None, serialization_alias="airTemperature")
    track_temperature: Optional[float] = Field(None, serialization_alias="trackTemperature")
    humidity: Optional[float] = None
    wind_speed: Optional[float] = Field(None, serialization_alias="windSpeed")
    is_raining: Optional[bool] = Field(None, serialization_alias="isRaining")


class PitStopInfo(BaseModel):
    lap_number: int = Field(..., serialization_alias="lapNumber")
    duration: Optional[float] = None
    total_duration: Optional[float] = Field(None, serialization_alias="totalDuration")


class RaceTelemetryLap(BaseModel):
    """Single lap enriched with tire compound and nearest weather."""
    lap_number: int = Field(..., serialization_alias="lapNumber")
    lap_duration: Optional[float] = Field(None, serialization_alias="lapDuration")
    sector1: Optional[float] = None
    sector2: Optional[float] = None
    sector3: Optional[float] = None
    tire_compound: Optional[str] = Field(None, serialization_alias="tireCompound")
    weather: Optional[WeatherSnapshot] = None


class RaceSummary(BaseModel):
    total_laps: int = Field(..., serialization_alias="totalLaps")
    total_pit_stops: int = Field(..., serialization_alias="totalPitStops")
    compounds_used: List[str] = Field(default_factory=list, serialization_alias="compoundsUsed")


class RaceTelemetry(BaseModel):
    """Response model for the merged telemetry of one driver in one session."""
    race_summary: RaceSummary = Field(..., serialization_alias="raceSummary")
    pit_stops: List[PitStopInfo] = Field(default_factory=list, serialization_alias="pitStops")
    telemetry: List[RaceTelemetryLap] = Field(default_factory=list)
