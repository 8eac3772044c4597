"""
Service configuration for the OpenF1 upstream and the AI analysis service.
Built once at process start and passed to the components that need it.
"""
import os
from typing import Optional
from pydantic import BaseModel
from constants.openf1_api_endpoints import DEFAULT_OPENF1_BASE_URL
from utils.errors import ConfigurationMissing


class ServiceConfig(BaseModel):
    """Service configuration with environment variable support."""

    openf1_base_url: str = DEFAULT_OPENF1_BASE_URL
    openf1_timeout: float = 30.0
    race_year: int = 2025
    ai_service_url: Optional[str] = None
    ai_service_secret: Optional[str] = None
    ai_service_timeout: float = 60.0
    frontend_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        """
        Read configuration from environment variables.
        Empty strings are treated as unset.
        """
        return cls(
            openf1_base_url=os.getenv("OPENF1_BASE_URL") or DEFAULT_OPENF1_BASE_URL,
            openf1_timeout=float(os.getenv("OPENF1_TIMEOUT") or 30),
            race_year=int(os.getenv("OPENF1_RACE_YEAR") or 2025),
            ai_service_url=os.getenv("AI_SERVICE_URL") or None,
            ai_service_secret=os.getenv("AI_SERVICE_SECRET") or None,
            ai_service_timeout=float(os.getenv("AI_SERVICE_TIMEOUT") or 60),
            frontend_url=os.getenv("FRONTEND_URL") or None,
        )

    def require_ai_service(self) -> tuple[str, str]:
        """
        Return (url, secret) for the AI analysis service.
        Raises ConfigurationMissing if either is not configured.
        """
        if not self.ai_service_url:
            raise ConfigurationMissing("AI_SERVICE_URL")
        if not self.ai_service_secret:
            raise ConfigurationMissing("AI_SERVICE_SECRET")
        return self.ai_service_url.rstrip("/"), self.ai_service_secret
