from typing import Dict, List
from openf1_pydantic_models.f1_drivers import DriverInfo
from api_pydantic_models.drivers import DriverSummary
from utils.openf1_client import OpenF1Client


def dedupe_drivers(drivers: List[DriverInfo]) -> List[DriverSummary]:
    """Keep the first record seen for each driver number, in upstream order."""
    by_number: Dict[int, DriverInfo] = {}
    for driver in drivers:
        by_number.setdefault(driver.driver_number, driver)
    return [
        DriverSummary(
            driver_number=d.driver_number,
            full_name=d.full_name,
            team_name=d.team_name,
            team_colour=d.team_colour,
            headshot_url=d.headshot_url,
        )
        for d in by_number.values()
    ]


async def get_active_drivers(client: OpenF1Client) -> List[DriverSummary]:
    """Drivers of the latest OpenF1 session."""
    drivers = await client.fetch_drivers(session_key="latest")
    return dedupe_drivers(drivers)
