"""Application configuration and settings management."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="PINCODE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    pincode_file: Path = Field(
        default=PACKAGE_DATA_DIR / "pincodes.csv",
        description="Reference table of known pincodes (CSV or XLSX).",
    )
    courier_separator: str = Field(
        default="|",
        min_length=1,
        description="Separator used between courier names in the courier_services column.",
    )
    nearby_radius_km: float = Field(
        default=50.0,
        ge=0.0,
        description="Default search radius for nearby pincode lookups.",
    )
    nearby_max_results: int = Field(
        default=20,
        ge=1,
        description="Maximum number of entries returned by a nearby pincode lookup.",
    )

    @field_validator("pincode_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()


settings = Settings()
