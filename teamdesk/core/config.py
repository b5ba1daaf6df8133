from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Teamdesk"

    # the database name comes from the URI path; mongodb_db is only a fallback
    mongodb_uri: str = Field("mongodb://localhost:27017/teamdesk", validation_alias="MONGODB_URI")
    mongodb_db: str = Field("teamdesk", validation_alias="MONGODB_DB")
    teams_collection: str = Field("teams", validation_alias="TEAMS_COLLECTION")

    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        validation_alias="CORS_ORIGINS",
    )
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    host: str = Field("127.0.0.1", validation_alias="HOST")
    port: int = Field(8000, validation_alias="PORT")


@lru_cache
def get_settings() -> Settings:
    return Settings()
