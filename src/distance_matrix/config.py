from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict

from distance_matrix.models import Units

DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api/distancematrix/json"


class DistanceMatrixSettings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    DISTANCE_MATRIX_API_KEY: str = ""
    DISTANCE_MATRIX_UNITS: Units = Units.IMPERIAL
    DISTANCE_MATRIX_BASE_URL: str = DEFAULT_BASE_URL
    DISTANCE_MATRIX_TIMEOUT_SECONDS: float = 10.0


def load_settings(**overrides: Any) -> DistanceMatrixSettings:
    return DistanceMatrixSettings(**overrides)
