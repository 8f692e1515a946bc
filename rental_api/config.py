# rental_api/config.py
from typing import List
from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # MongoDB settings
    MONGODB_URI: str
    MONGODB_DB_NAME: str = "rental"
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    MONGODB_SOCKET_TIMEOUT_MS: int = 45000

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    RELOAD: bool = False
    ENVIRONMENT: str = "development"

    # API settings
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "https://ramsisrentacar.netlify.app",
    ]

    # Upload settings
    UPLOAD_DIR: str = "uploads"

    class Config:
        env_file = ".env"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

@lru_cache()
def get_settings():
    return Settings()
