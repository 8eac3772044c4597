from pydantic import BaseModel
from typing import Optional


class DriverSummary(BaseModel):
    """Active driver entry, one per driver number."""
    driver_number: int
    full_name: str
    team_name: Optional[str] = None
    team_colour: Optional[str] = None
    headshot_url: Optional[str] = None
