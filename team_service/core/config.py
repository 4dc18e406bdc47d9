# team_service/core/config.py
from __future__ import annotations

import json
from typing import List, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


EnvType = Literal["local", "dev", "staging", "prod"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    APP_NAME: str = "TeamService"
    APP_ENV: EnvType = "local"
    LOG_LEVEL: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR, CRITICAL")
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000

    # CORS
    CORS_ORIGINS: str | List[str] = Field(
        default='["http://localhost:5173","http://127.0.0.1:5173"]',
        description='JSON list or comma-separated origins',
    )

    # DB
    DATABASE_URL: Optional[str] = None
    SQL_ECHO: bool = False
    CREATE_TABLES_ON_STARTUP: bool = True

    # Rosters
    ROSTER_CAPACITY: int = Field(default=8, description="Maximum number of players on a team")

    @property
    def IS_LOCAL(self) -> bool:
        return self.APP_ENV == "local"

    @property
    def database_url(self) -> str:
        return self.DATABASE_URL or "sqlite:///./team_service.db"

    # ---------- Validators ----------

    @field_validator("CORS_ORIGINS")
    @classmethod
    def _parse_cors(cls, v):
        # Accept JSON list or comma-separated string
        if isinstance(v, list):
            return v
        s = str(v).strip()
        if not s:
            return []
        try:
            parsed = json.loads(s)
            if isinstance(parsed, list):
                return parsed
        except ValueError:
            pass
        # fallback: comma-separated
        return [p.strip() for p in s.split(",") if p.strip()]

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper()

    # ---------- Runtime validations ----------

    def validate_at_startup(self) -> None:
        """Fail fast with clear messages for misconfigurations."""
        problems: list[str] = []

        # SQLite fallback is only acceptable for local runs
        if not self.IS_LOCAL and not self.DATABASE_URL:
            problems.append("DATABASE_URL is required in non-local env.")

        if not self.IS_LOCAL and not self.CORS_ORIGINS:
            problems.append("CORS_ORIGINS must contain at least one allowed origin in non-local env.")

        if self.ROSTER_CAPACITY < 1:
            problems.append("ROSTER_CAPACITY must be at least 1.")

        if problems:
            # Collapse to one helpful error line
            raise RuntimeError("Config validation failed: " + " ".join(problems))


settings = Settings()
