# wms_api/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./wms.db"
    SQL_ECHO: bool = False

    API_PREFIX: str = "/api/v1"
    APP_TITLE: str = "WMS API"
    LOG_LEVEL: str = "INFO"

    # Extra origin allowed by CORS (e.g. a deployed frontend)
    FRONTEND_URL: Optional[str] = None

    model_config = SettingsConfigDict(env_file=str(env_path), extra="ignore")

settings = Settings()
