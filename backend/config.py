import json

from pydantic_settings import BaseSettings
from pydantic import field_validator
from pathlib import Path

VERSION = "0.1.0"

_BACKEND_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    country_data_path: Path = _BACKEND_DIR / "data" / "countries.csv"
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]
    rate_limit: str = "120/minute"
    rate_limit_enabled: bool = True
    log_level: str = "INFO"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Accept JSON array or comma-separated string
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    model_config = {
        "env_file": str(_BACKEND_DIR.parent / ".env"),
        "env_file_encoding": "utf-8",
    }


settings = Settings()
