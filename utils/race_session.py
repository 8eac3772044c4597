from typing import List, Optional
from datetime import datetime
from openf1_pydantic_models.f1_sessions import F1Session, F1SessionResult, F1Position
from api_pydantic_models.race_sesssions import LastRaceResult, SessionType
from utils.openf1_client import OpenF1Client
from utils.lap_data import parse_iso_datetime
from utils.errors import NotFound
import logging

logger = logging.getLogger(__name__)


def select_latest_session(sessions: List[F1Session]) -> Optional[F1Session]:
    # OpenF1 lists sessions chronologically, so the last one is the most recent.
    # Not re-sorted by date_start.
    return sessions[-1] if sessions else None


def find_usable_result(results: List[F1SessionResult], driver_number: int) -> Optional[F1SessionResult]:
    """First result for the driver, if it carries a position or points."""
    result = next((r for r in results if r.driver_number == driver_number), None)
    if result is not None and (result.position is not None or result.points is not None):
        return result
    return None


def last_sampled_position(positions: List[F1Position]) -> Optional[int]:
    """
    Position from the chronologically last sample.
    Samples with unparseable dates sort first; ties keep upstream order.
    """
    if not positions:
        return None
    ordered = sorted(positions, key=lambda p: parse_iso_datetime(p.date) or datetime.min)
    return ordered[-1].position


async def get_last_race_result(client: OpenF1Client, driver_number: int, year: int) -> LastRaceResult:
    """
    Resolve the driver's finishing position and points in the latest race of the year.

    session_result is used when it carries data; otherwise the last /position
    sample gives the position and points stay unresolved.

    Raises:
        NotFound: If the year has no race sessions
    """
    sessions = await client.fetch_sessions(year=year, session_type=SessionType.RACE.value)
    latest = select_latest_session(sessions)
    if latest is None:
        raise NotFound(f"No race sessions found for {year}", year=year)
    session_key = latest.session_key

    results = await client.fetch_session_results(session_key, driver_number)
    result = find_usable_result(results, driver_number)
    if result is not None:
        logger.info("Last race result for driver_number=%s from session_result (session_key=%s)",
                    driver_number, session_key)
        return LastRaceResult(session_key=session_key, position=result.position, points=result.points)

    logger.info("No session_result for driver_number=%s session_key=%s, falling back to position samples",
                driver_number, session_key)
    positions = await client.fetch_positions(session_key, driver_number)
    return LastRaceResult(session_key=session_key, position=last_sampled_position(positions), points=None)
