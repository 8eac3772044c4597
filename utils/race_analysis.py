"""
Hand-off of merged race telemetry to the external AI analysis service.
"""
import httpx
from typing import Any, Dict, Optional
from config.service_config import ServiceConfig
from constants.openf1_api_endpoints import AI_ANALYZE_PATH, AI_SECRET_HEADER
from utils.openf1_client import OpenF1Client
from utils.telemetry import get_race_telemetry
from utils.errors import AnalysisUnavailable
import logging

logger = logging.getLogger(__name__)


class AIAnalysisClient:
    """
    Caller for the AI analysis service.

    Args:
        config: Service configuration (AI service URL, secret and timeout)
        transport: Optional httpx transport, used by tests to fake the service
    """

    def __init__(self, config: ServiceConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport

    def require_configured(self) -> None:
        """Raises ConfigurationMissing if the AI service URL or secret is not configured."""
        self.config.require_ai_service()

    async def analyze(self, telemetry: Dict[str, Any]) -> Any:
        """
        POST telemetry to the AI service and return its JSON response untouched.

        Raises:
            ConfigurationMissing: If the AI service URL or secret is not configured
            AnalysisUnavailable: If the call fails or the response is not JSON
        """
        url, secret = self.config.require_ai_service()
        try:
            async with httpx.AsyncClient(timeout=self.config.ai_service_timeout, transport=self._transport) as client:
                response = await client.post(
                    f"{url}{AI_ANALYZE_PATH}",
                    json=telemetry,
                    headers={AI_SECRET_HEADER: secret},
                )
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.exception("AI analysis service returned status %s", e.response.status_code)
            raise AnalysisUnavailable(details=e.response.text or str(e), upstream_status=e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.exception("AI analysis service request failed")
            raise AnalysisUnavailable(details=str(e) or type(e).__name__) from e
        except ValueError as e:
            logger.exception("AI analysis service returned a non-JSON body")
            raise AnalysisUnavailable(details="Invalid JSON body") from e


async def get_race_analysis(
    client: OpenF1Client,
    ai_client: AIAnalysisClient,
    session_key: int,
    driver_number: int
) -> Any:
    """
    Merge race telemetry, then ask the AI service to analyze it.

    Configuration is checked before any network call. Merge failures surface
    as UpstreamUnavailable; only the AI call itself raises AnalysisUnavailable.
    """
    ai_client.require_configured()
    telemetry = await get_race_telemetry(client, session_key, driver_number)
    logger.info("Requesting AI analysis for session_key=%s driver_number=%s", session_key, driver_number)
    try:
        return await ai_client.analyze(telemetry)
    except AnalysisUnavailable as e:
        e.context.update(session_key=session_key, driver_number=driver_number)
        raise
