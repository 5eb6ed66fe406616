from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# levels known to both loguru and uvicorn
_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    DISABLE_PERSISTENCE_AUTOWIRING: bool = True
    DATABASE_URL: str | None = None
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    @field_validator("PORT")
    @classmethod
    def check_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {value}")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}")
        return level


settings = Settings()
