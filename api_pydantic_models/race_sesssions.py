from pydantic import BaseModel
from typing import Union
from enum import Enum


class SessionType(str, Enum):
    QUALIFYING = "Qualifying"
    RACE = "Race"


class LastRaceResult(BaseModel):
    session_key: int
    # Either value may be unresolved; points are never available from the position fallback
    position: Union[int, None] = None
    points: Union[float, None] = None
