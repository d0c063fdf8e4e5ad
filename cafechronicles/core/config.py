from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "mysql+pymysql://root@localhost:3306/cafechronicles"
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 10  # seconds waiting for a free connection
    DB_POOL_RECYCLE: int = 1800
    DB_ECHO: bool = False

    # Passport
    STAMP_CLAIM_RADIUS_METERS: float = 100.0
    NEARBY_RADIUS_METERS: float = 500.0
    STAMP_DAY_TIMEZONE: str = "UTC"

    # Google Maps
    GOOGLE_MAPS_API_KEY: Optional[str] = None
    GOOGLE_MAPS_TIMEOUT: float = 5.0

    CORS_ORIGINS: List[str] = [
        "https://cafechronicles.vercel.app",
        "https://orbital-5c65d.web.app",
        "http://localhost:3000",
    ]

    LOG_LEVEL: str = "INFO"

    @field_validator("STAMP_DAY_TIMEZONE")
    @classmethod
    def check_timezone(cls, value: str) -> str:
        if value.upper() == "UTC":
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown IANA timezone: {value!r}") from None
        return value

    class Config:
        env_file = ".env"


settings = Settings()
