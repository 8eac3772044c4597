"""
Async client for the OpenF1 API.
Every fetch is a plain coroutine returning validated records; callers may wrap
any of them in asyncio.wait_for to impose a deadline. No retries, no caching.
"""
import httpx
from typing import Any, Dict, List, Optional, Union
from pydantic import ValidationError
from config.service_config import ServiceConfig
from constants.openf1_api_endpoints import (
    DRIVERS_API_PATH,
    SESSIONS_API_PATH,
    SESSION_RESULTS_API_PATH,
    POSITION_API_PATH,
    LAPS_API_PATH,
    STINTS_API_PATH,
    PIT_API_PATH,
    WEATHER_API_PATH,
)
from openf1_pydantic_models.f1_drivers import DriverInfo
from openf1_pydantic_models.f1_sessions import (
    F1Session,
    F1SessionResult,
    F1Position,
    GetF1SessionsResponse,
    GetF1SessionResultResponse,
)
from openf1_pydantic_models.f1_laps import F1LapData, GetF1LapsResponse
from openf1_pydantic_models.f1_stints import F1Stint, GetF1StintsResponse
from openf1_pydantic_models.f1_pits import F1PitStop, GetF1PitStopsResponse
from openf1_pydantic_models.f1_weather import F1WeatherReading, GetF1WeatherResponse
from utils.errors import UpstreamUnavailable
import logging

logger = logging.getLogger(__name__)


class OpenF1Client:
    """
    Thin wrapper over the OpenF1 read endpoints.

    Args:
        config: Service configuration (base URL and timeout)
        transport: Optional httpx transport, used by tests to fake the API
    """

    def __init__(self, config: ServiceConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = config.openf1_base_url.rstrip("/")
        self.timeout = config.openf1_timeout
        self._transport = transport

    async def _get(self, collection: str, path: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        GET a collection and return the raw JSON list.
        Any transport failure, non-2xx status or non-list body raises UpstreamUnavailable.
        """
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport
            ) as client:
                response = await client.get(path, params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.exception("OpenF1 %s returned status %s params=%s", collection, e.response.status_code, params)
            raise UpstreamUnavailable(
                collection,
                details=e.response.text or str(e),
                upstream_status=e.response.status_code,
                params=params
            ) from e
        except httpx.HTTPError as e:
            logger.exception("OpenF1 %s request failed params=%s", collection, params)
            raise UpstreamUnavailable(collection, details=str(e) or type(e).__name__, params=params) from e
        except ValueError as e:
            logger.exception("OpenF1 %s returned a non-JSON body params=%s", collection, params)
            raise UpstreamUnavailable(collection, details="Invalid JSON body", params=params) from e

        # OpenF1 answers some empty queries with an error object instead of []
        if isinstance(payload, dict) and "detail" in payload:
            logger.warning("OpenF1 %s returned no data params=%s: %s", collection, params, payload["detail"])
            return []
        if not isinstance(payload, list):
            raise UpstreamUnavailable(collection, details="Expected a JSON list", params=params)

        logger.info("Fetched %d %s records from OpenF1 params=%s", len(payload), collection, params)
        return payload

    async def fetch_drivers(self, session_key: Union[int, str] = "latest") -> List[DriverInfo]:
        items = await self._get("drivers", DRIVERS_API_PATH, {"session_key": session_key})
        return self._validate("drivers", lambda: [DriverInfo(**item) for item in items])

    async def fetch_sessions(self, year: int, session_type: str) -> List[F1Session]:
        items = await self._get("sessions", SESSIONS_API_PATH, {"year": year, "session_type": session_type})
        return self._validate("sessions", lambda: GetF1SessionsResponse(sessions=items).sessions)

    async def fetch_session_results(self, session_key: int, driver_number: int) -> List[F1SessionResult]:
        params = {"session_key": session_key, "driver_number": driver_number}
        items = await self._get("session_result", SESSION_RESULTS_API_PATH, params)
        return self._validate(
            "session_result",
            lambda: GetF1SessionResultResponse(session_result=items).session_result
        )

    async def fetch_positions(self, session_key: int, driver_number: int) -> List[F1Position]:
        params = {"session_key": session_key, "driver_number": driver_number}
        items = await self._get("position", POSITION_API_PATH, params)
        return self._validate("position", lambda: [F1Position(**item) for item in items])

    async def fetch_laps(self, session_key: int, driver_number: int) -> List[F1LapData]:
        params = {"session_key": session_key, "driver_number": driver_number}
        items = await self._get("laps", LAPS_API_PATH, params)
        return self._validate("laps", lambda: GetF1LapsResponse(laps=items).laps)

    async def fetch_stints(self, session_key: int, driver_number: int) -> List[F1Stint]:
        params = {"session_key": session_key, "driver_number": driver_number}
        items = await self._get("stints", STINTS_API_PATH, params)
        return self._validate("stints", lambda: GetF1StintsResponse(stints=items).stints)

    async def fetch_pit_stops(self, session_key: int, driver_number: int) -> List[F1PitStop]:
        params = {"session_key": session_key, "driver_number": driver_number}
        items = await self._get("pit", PIT_API_PATH, params)
        return self._validate("pit", lambda: GetF1PitStopsResponse(pit_stops=items).pit_stops)

    async def fetch_weather(self, session_key: int) -> List[F1WeatherReading]:
        items = await self._get("weather", WEATHER_API_PATH, {"session_key": session_key})
        return self._validate("weather", lambda: GetF1WeatherResponse(weather=items).weather)

    @staticmethod
    def _validate(collection: str, build):
        try:
            return build()
        except ValidationError as e:
            logger.exception("OpenF1 %s records failed validation", collection)
            raise UpstreamUnavailable(collection, details=str(e)) from e
