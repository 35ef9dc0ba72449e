"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="HAULPLAN_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Haul Plan API"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("ml_data"), description="Directory holding the processed CSV datasets.")
    roads_file: str = Field(
        default="roads_processed.csv",
        description="Road-condition dataset used for truck allocation, relative to data_root.",
    )
    route_plan_max_rows: int = Field(default=400, ge=1)
    default_total_trucks: int = Field(default=200, ge=0)
    read_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Optional upper bound on how long a dataset read may take.",
    )
    datasets: tuple[str, ...] = Field(
        default=("equipment", "operations", "price", "production", "roads", "vessels", "weather"),
        description="Processed datasets exposed for browsing.",
    )
    dataset_default_limit: int = Field(default=200, ge=1)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(),
        description="Permitted web origins for browser clients (CORS). Empty means allow all.",
    )
    log_level: str = Field(default="INFO")

    @field_validator("data_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", "datasets", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("log_level", mode="after")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def roads_path(self) -> Path:
        return self.data_root / self.roads_file


settings = Settings()
