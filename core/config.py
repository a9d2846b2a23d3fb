from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # 1️⃣ Database
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "nesswearDB"

    # 2️⃣ JWT / Auth
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 30

    # 3️⃣ Server
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # frontend origins
    FRONTEND_ORIGINS: List[str] = [
        "http://localhost:5173",
        "https://nesswearforyou.netlify.app",
    ]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @field_validator("JWT_SECRET")
    @classmethod
    def secret_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("JWT_SECRET must not be empty")
        return value

settings = Settings()
