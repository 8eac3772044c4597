from pydantic import BaseModel
from typing import List, Optional, Union


class F1Session(BaseModel):
    # https://openf1.org/#sessions
    session_key: int
    year: Optional[int] = None
    session_type: Optional[str] = None
    session_name: Optional[str] = None
    location: Optional[str] = None
    # Kept as raw ISO strings, parsed on use
    date_start: Optional[str] = None
    date_end: Optional[str] = None


class F1SessionResult(BaseModel):
    # https://openf1.org/#session-result
    session_key: int
    driver_number: int
    position: Optional[int] = None
    # Sprint/half-points races can award fractional points
    points: Union[float, None] = None
    classified_status: Optional[str] = None


class F1Position(BaseModel):
    # https://openf1.org/#position
    session_key: int
    driver_number: int
    position: Optional[int] = None
    date: Optional[str] = None


class GetF1SessionsResponse(BaseModel):
    sessions: List[F1Session]


class GetF1SessionResultResponse(BaseModel):
    session_result: List[F1SessionResult]
