from fastapi import FastAPI, APIRouter, Depends, Path, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Any, Dict, List
from config.service_config import ServiceConfig
from api_pydantic_models.drivers import DriverSummary
from api_pydantic_models.race_sesssions import LastRaceResult
from utils import drivers, race_session, telemetry, race_analysis
from utils.openf1_client import OpenF1Client
from utils.race_analysis import AIAnalysisClient
from utils.errors import OpenF1ServiceError
import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)

config = ServiceConfig.from_env()

app = FastAPI(
    title="OpenF1 Service",
    description="API proxy/orchestrator for OpenF1 public data",
    version="1.0.0",
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    # Allow all in dev if FRONTEND_URL is not set
    allow_origins=[config.frontend_url] if config.frontend_url else ["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)

router = APIRouter(prefix="/api/openf1", tags=["openf1"])


def get_config() -> ServiceConfig:
    return config


def get_openf1_client(service_config: ServiceConfig = Depends(get_config)) -> OpenF1Client:
    return OpenF1Client(service_config)


def get_ai_client(service_config: ServiceConfig = Depends(get_config)) -> AIAnalysisClient:
    return AIAnalysisClient(service_config)


@app.exception_handler(OpenF1ServiceError)
async def openf1_service_error_handler(request: Request, exc: OpenF1ServiceError) -> JSONResponse:
    logging.warning("%s %s failed with %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@router.get("/drivers")
async def get_active_drivers(client: OpenF1Client = Depends(get_openf1_client)) -> List[DriverSummary]:
    """List active drivers of the latest session, deduplicated by driver number."""
    logging.info("Request: active drivers")
    driver_list = await drivers.get_active_drivers(client)
    logging.info("Response: returning %d drivers", len(driver_list))
    return driver_list


@router.get("/drivers/{driver_number}/last-race")
async def get_last_race_result(
    driver_number: int = Path(..., description="Driver number (e.g., 1 = Max Verstappen)"),
    client: OpenF1Client = Depends(get_openf1_client),
    service_config: ServiceConfig = Depends(get_config)
) -> LastRaceResult:
    """
    Get the driver's result in the latest race of the configured year.

    - Uses session_result when it has position or points
    - Otherwise falls back to the last position sample (points unresolved)
    """
    logging.info("Request: last race result for driver_number=%s year=%s", driver_number, service_config.race_year)
    result = await race_session.get_last_race_result(client, driver_number, service_config.race_year)
    logging.info("Response: last race result session_key=%s position=%s points=%s",
                 result.session_key, result.position, result.points)
    return result


@router.get("/telemetry")
async def get_race_telemetry(
    session_key: int = Query(..., alias="sessionKey"),
    driver_number: int = Query(..., alias="driverNumber"),
    client: OpenF1Client = Depends(get_openf1_client)
) -> Dict[str, Any]:
    """
    Merged telemetry for a race session.

    Laps, stints, pit stops and weather are fetched in parallel and merged per
    lap with compound and nearest weather. Unknown values are omitted.
    """
    logging.info("Request: telemetry for session_key=%s driver_number=%s", session_key, driver_number)
    result = await telemetry.get_race_telemetry(client, session_key, driver_number)
    logging.info("Response: returning %d telemetry laps for session_key=%s",
                 result["raceSummary"]["totalLaps"], session_key)
    return result


@router.get("/analysis")
async def get_race_analysis(
    session_key: int = Query(..., alias="sessionKey"),
    driver_number: int = Query(..., alias="driverNumber"),
    client: OpenF1Client = Depends(get_openf1_client),
    ai_client: AIAnalysisClient = Depends(get_ai_client)
) -> Any:
    """Send merged telemetry to the AI analysis service and return its report as is."""
    logging.info("Request: AI analysis for session_key=%s driver_number=%s", session_key, driver_number)
    return await race_analysis.get_race_analysis(client, ai_client, session_key, driver_number)


app.include_router(router)
