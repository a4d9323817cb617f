import os

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mflix_api.exceptions import ConfigError

# hosting platforms set one of these in production; .env is only read locally
PRODUCTION_MARKERS = ("RAILWAY_ENVIRONMENT", "RENDER_SERVICE_ID")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    MONGOURI: str
    MONGODB_DB_NAME: str = "sample_mflix"
    MONGODB_COLLECTION: str = "movies"
    MONGODB_TIMEOUT_SECONDS: float = 10
    ALLOWED_ORIGIN: str = "http://localhost:5173"
    SAMPLE_SIZE: int = 10
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    @field_validator("MONGOURI")
    @classmethod
    def uri_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("MONGOURI must not be empty")
        return v.strip()

    @field_validator("SAMPLE_SIZE")
    @classmethod
    def positive_sample_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("SAMPLE_SIZE must be at least 1")
        return v

    @field_validator("MONGODB_TIMEOUT_SECONDS")
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("MONGODB_TIMEOUT_SECONDS must be positive")
        return v


def is_production() -> bool:
    return any(os.environ.get(marker) for marker in PRODUCTION_MARKERS)


def load_settings(env_file: str | None = ".env") -> Settings:
    """Read and validate settings from the environment.

    Outside production the given `env_file` is read as well. Raises
    ConfigError instead of exiting so the caller decides what to do.
    """
    if is_production():
        env_file = None
    try:
        return Settings(_env_file=env_file)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'settings'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e
