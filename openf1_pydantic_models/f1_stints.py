from pydantic import BaseModel
from typing import Optional


class F1Stint(BaseModel):
    session_key: Optional[int] = None
    driver_number: Optional[int] = None
    stint_number: Optional[int] = None
    lap_start: int
    lap_end: int
    compound: Optional[str] = None
    tyre_age_at_start: Optional[int] = None


class GetF1StintsResponse(BaseModel):
    stints: list[F1Stint]
