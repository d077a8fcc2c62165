import os
from typing import List, Mapping, Optional
from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Runtime configuration, built once at startup and handed to create_app."""

    database_url: str = "sqlite:///./data/rooms_booking.db"
    host: str = "0.0.0.0"
    port: int = Field(default=5000, gt=0, lt=65536)
    api_prefix: str = "/api"
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ
        values = {}
        for field, var in (
            ("database_url", "DATABASE_URL"),
            ("host", "HOST"),
            ("port", "PORT"),
            ("api_prefix", "API_PREFIX"),
            ("log_level", "LOG_LEVEL"),
        ):
            if environ.get(var):
                values[field] = environ[var]
        if environ.get("CORS_ORIGINS"):
            values["cors_origins"] = [
                origin.strip() for origin in environ["CORS_ORIGINS"].split(",") if origin.strip()
            ]
        return cls(**values)
