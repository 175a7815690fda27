# backend/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

DEFAULT_USERS = ["Farid", "Elias", "Younes", "Noa", "Maxence", "Alexis", "Gab", "Monel"]


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./database.db"

    # Directory holding uploaded part photos, served under /uploads
    UPLOAD_DIR: str = "uploads"

    # Operators created at startup if missing
    SEED_USERS: List[str] = DEFAULT_USERS

    FRONTEND_URL: Optional[str] = None
    LOG_LEVEL: str = "INFO"
    PORT: int = 3001

    model_config = SettingsConfigDict(env_file=str(env_path), extra="ignore")


settings = Settings()
