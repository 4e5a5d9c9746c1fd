"""Data models for the PWS weather service."""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


class ImperialMeasurements(BaseModel):
    """Imperial measurement block of a PWS observation (units=e)."""

    # NaN and Infinity are not readings
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    temp: float
    humidity: float
    wind_speed: float = Field(..., alias="windSpeed")
    wind_gust: float = Field(..., alias="windGust")
    # Not every provider deployment sends wind direction
    wind_dir: Optional[float] = Field(default=None, alias="windDir")
    pressure: float
    precip_rate: float = Field(..., alias="precipRate")


class PwsObservation(BaseModel):
    """One record from the provider's observation list."""

    model_config = ConfigDict(populate_by_name=True)

    station_id: str = Field(..., alias="stationID")
    obs_time_local: str = Field(..., alias="obsTimeLocal")
    neighborhood: Optional[str] = None
    imperial: ImperialMeasurements


class PwsEnvelope(BaseModel):
    """Top-level body of the current observations endpoint."""

    observations: List[PwsObservation] = Field(default_factory=list)

    @field_validator("observations", mode="before")
    @classmethod
    def null_observations_as_empty(cls, value):
        return [] if value is None else value


class WeatherResponse(BaseModel):
    """Normalized current conditions returned by /api/weather.

    wind_dir_deg and neighborhood stay None when the provider omits them and
    are dropped from the serialized body.
    """

    station_id: str
    observed_at: str
    temperature_f: float
    humidity_pct: float
    wind_mph: float
    wind_gust_mph: float
    pressure_in: float
    precip_in_hr: float
    wind_dir_deg: Optional[float] = None
    neighborhood: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str
