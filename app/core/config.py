from pydantic_settings import BaseSettings
from typing import List, Optional, Union
from pydantic import field_validator
from urllib.parse import quote_plus
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Job Posting System API"

    # MongoDB Settings
    MONGO_USER: Optional[str] = None
    MONGO_PASSWORD: Optional[str] = None
    MONGO_HOST: str = "localhost"
    MONGO_PORT: int = 27017
    MONGO_DB: str = "jps"

    @property
    def MONGODB_URL(self) -> str:
        if self.MONGO_USER:
            credentials = f"{quote_plus(self.MONGO_USER)}:{quote_plus(self.MONGO_PASSWORD or '')}@"
        else:
            credentials = ""
        return f"mongodb://{credentials}{self.MONGO_HOST}:{self.MONGO_PORT}"

    # Fail fast instead of hanging when MongoDB is unreachable
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    # Logging
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    # CORS Settings - can be set as JSON string in .env
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["http://localhost:5173", "http://localhost:3000"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Union[List[str], str]) -> List[str]:
        """Parse CORS origins from JSON string or list"""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not valid JSON, split by comma
                return [origin.strip() for origin in v.split(",")]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
