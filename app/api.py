"""HTTP route definitions for the service."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.schemas import (
    AirportModel,
    AtmosphericInformation,
    HealthResponse,
    IngestResponse,
    ReadingModel,
)
from models.errors import (
    InvalidCoordinateError,
    InvalidRadiusError,
    UnknownLocationError,
    UnknownMetricError,
)
from services.query_engine import QueryEngine, build_default_engine

router = APIRouter()
collect_router = APIRouter(prefix="/collect", tags=["collect"])
query_router = APIRouter(prefix="/query", tags=["query"])


def get_engine() -> QueryEngine:
    return build_default_engine()


@collect_router.get("/ping", summary="Collector liveness probe.")
async def collect_ping() -> str:
    return "ready"


@collect_router.get(
    "/airports",
    response_model=list[str],
    summary="List the IATA codes of all known airports.",
)
async def list_airports(engine: QueryEngine = Depends(get_engine)) -> list[str]:
    return sorted(engine.registry.list_codes())


@collect_router.get(
    "/airport/{iata}",
    response_model=AirportModel,
    summary="Fetch a single airport.",
)
async def get_airport(iata: str, engine: QueryEngine = Depends(get_engine)) -> AirportModel:
    location = engine.registry.find_location(iata)
    if location is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Airport {iata!r} is not registered.",
        )
    return AirportModel.from_domain(location)


@collect_router.post(
    "/airport/{iata}/{lat}/{long}",
    response_model=AirportModel,
    summary="Register (or replace) an airport.",
)
async def add_airport(
    iata: str,
    lat: float,
    long: float,
    engine: QueryEngine = Depends(get_engine),
) -> AirportModel:
    try:
        location = engine.registry.add_location(iata, lat, long)
    except InvalidCoordinateError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    return AirportModel.from_domain(location)


@collect_router.delete(
    "/airport/{iata}",
    response_model=AirportModel,
    summary="Remove an airport and its weather summary.",
)
async def delete_airport(iata: str, engine: QueryEngine = Depends(get_engine)) -> AirportModel:
    removed = engine.registry.remove_location(iata)
    if removed is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Airport {iata!r} is not registered.",
        )
    return AirportModel.from_domain(removed)


@collect_router.post(
    "/weather/{iata}/{point_type}",
    response_model=IngestResponse,
    summary="Submit a reading summary for one metric at an airport.",
)
async def update_weather(
    iata: str,
    point_type: str,
    reading: ReadingModel,
    engine: QueryEngine = Depends(get_engine),
) -> IngestResponse:
    try:
        accepted = engine.ingest_reading(iata, point_type, reading.to_domain())
    except UnknownMetricError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except UnknownLocationError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return IngestResponse(accepted=accepted)


@query_router.get(
    "/weather/{iata}/{radius}",
    response_model=list[AtmosphericInformation],
    summary="Weather summaries within a radius (km) of an airport.",
)
async def query_weather(
    iata: str,
    radius: float,
    engine: QueryEngine = Depends(get_engine),
) -> list[AtmosphericInformation]:
    try:
        summaries = engine.query_by_code(iata, radius)
    except InvalidRadiusError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except UnknownLocationError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return [AtmosphericInformation.from_domain(summary) for summary in summaries]


@query_router.get(
    "/ping",
    response_model=HealthResponse,
    summary="Data size and request frequency statistics.",
)
async def query_ping(engine: QueryEngine = Depends(get_engine)) -> HealthResponse:
    return HealthResponse.from_snapshot(engine.health_snapshot())


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}
