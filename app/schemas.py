"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from models.records import Location, LocationSummary, Reading
from services.query_engine import HealthSnapshot


class ReadingModel(BaseModel):
    """Summary of collected sensor samples for one metric."""

    mean: float = Field(..., description="Mean of the observations.")
    first: int = Field(0, description="1st quartile, a useful lower bound.")
    second: int = Field(0, description="2nd quartile (median).")
    third: int = Field(0, description="3rd quartile, a less noisy upper value.")
    count: int = Field(0, description="Total number of measurements.")

    def to_domain(self) -> Reading:
        return Reading(
            mean=self.mean,
            first=self.first,
            second=self.second,
            third=self.third,
            count=self.count,
        )

    @classmethod
    def from_domain(cls, reading: Optional[Reading]) -> Optional["ReadingModel"]:
        if reading is None:
            return None
        return cls(
            mean=reading.mean,
            first=reading.first,
            second=reading.second,
            third=reading.third,
            count=reading.count,
        )


class AirportModel(BaseModel):
    iata: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    @classmethod
    def from_domain(cls, location: Location) -> "AirportModel":
        return cls(iata=location.code, latitude=location.latitude, longitude=location.longitude)


class AtmosphericInformation(BaseModel):
    """Latest accepted reading per metric for one airport."""

    iata: str
    temperature: Optional[ReadingModel] = None
    wind: Optional[ReadingModel] = None
    humidity: Optional[ReadingModel] = None
    precipitation: Optional[ReadingModel] = None
    pressure: Optional[ReadingModel] = None
    cloud_cover: Optional[ReadingModel] = None
    last_update_time: Optional[datetime] = None

    @classmethod
    def from_domain(cls, summary: LocationSummary) -> "AtmosphericInformation":
        return cls(
            iata=summary.code,
            temperature=ReadingModel.from_domain(summary.temperature),
            wind=ReadingModel.from_domain(summary.wind),
            humidity=ReadingModel.from_domain(summary.humidity),
            precipitation=ReadingModel.from_domain(summary.precipitation),
            pressure=ReadingModel.from_domain(summary.pressure),
            cloud_cover=ReadingModel.from_domain(summary.cloud_cover),
            last_update_time=summary.last_update,
        )


class IngestResponse(BaseModel):
    accepted: bool = Field(
        ..., description="False when the reading was outside its metric's sensor range."
    )


class HealthResponse(BaseModel):
    """Fresh data size and request frequency statistics."""

    datasize: int = Field(..., ge=0)
    iata_freq: Dict[str, float] = Field(default_factory=dict)
    radius_freq: List[int] = Field(default_factory=list)

    @classmethod
    def from_snapshot(cls, snapshot: HealthSnapshot) -> "HealthResponse":
        return cls(
            datasize=snapshot.datasize,
            iata_freq=dict(snapshot.iata_freq),
            radius_freq=list(snapshot.radius_freq),
        )
