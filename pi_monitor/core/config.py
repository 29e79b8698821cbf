from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

from pi_monitor import constants


class Settings(BaseSettings):
    API_STR: str = constants.API_STR

    PROJECT_NAME: str = constants.PROJECT_NAME

    PROJECT_DESCRIPTION: str = constants.PROJECT_DESCRIPTION

    TAGS_METADATA: list = [
        {
            "name": "metrics",
            "description": "Host specs and point-in-time metrics snapshots",
        },
        {
            "name": "streaming",
            "description": "Server-Sent Events stream of metrics snapshots",
        },
    ]

    HOST: str = "0.0.0.0"

    PORT: int = 3000

    STREAM_INTERVAL: float = constants.STREAM_INTERVAL

    STATIC_DIR: Path = Path.cwd() / "public"

    RATE_LIMIT: str = "300/minute"

    LOG_DIR: Optional[Path] = None

    DF_TIMEOUT: int = 5

    class Config:
        case_sensitive = True


settings = Settings()

# when app is created, endpoints will be stored here for the api listing
endpoints = []
