"""
Error kinds raised by the OpenF1 service layer.
main.py maps each of them to an HTTP response.
"""
from typing import Any, Dict, Optional


class OpenF1ServiceError(Exception):
    """Base class carrying an HTTP status and structured context."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: Any = None,
        status_code: Optional[int] = None,
        **context: Any
    ):
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code
        self.context: Dict[str, Any] = context

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"message": self.message}
        if self.details is not None:
            body["details"] = self.details
        body.update(self.context)
        return body


class UpstreamUnavailable(OpenF1ServiceError):
    """OpenF1 request failed: transport error, non-2xx status or unreadable body."""

    status_code = 502

    def __init__(
        self,
        collection: str,
        details: Any = None,
        upstream_status: Optional[int] = None,
        params: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            "OpenF1 API error",
            details=details,
            status_code=upstream_status,
            collection=collection,
            params=params or {},
            upstream_status=upstream_status,
        )
        self.collection = collection
        self.upstream_status = upstream_status


class NotFound(OpenF1ServiceError):
    status_code = 404


class ConfigurationMissing(OpenF1ServiceError):
    """A required external-service setting is absent."""

    status_code = 500

    def __init__(self, setting: str):
        super().__init__(f"{setting} not configured in environment variables", setting=setting)
        self.setting = setting


class AnalysisUnavailable(OpenF1ServiceError):
    """
    The AI analysis service failed after telemetry was merged.
    A 404 from the service is reported as 503.
    """

    status_code = 503

    def __init__(
        self,
        details: Any = None,
        upstream_status: Optional[int] = None,
        **context: Any
    ):
        status = upstream_status
        if status is None or status == 404:
            status = 503
        super().__init__(
            "AI analysis service temporarily unavailable",
            details=details,
            status_code=status,
            upstream_status=upstream_status,
            **context
        )
        self.upstream_status = upstream_status
