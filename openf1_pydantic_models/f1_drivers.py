from pydantic import BaseModel
from typing import Optional


class DriverInfo(BaseModel):
    # https://openf1.org/#drivers
    driver_number: int
    full_name: str
    session_key: Optional[int] = None
    team_name: Optional[str] = None
    team_colour: Optional[str] = None
    headshot_url: Optional[str] = None
