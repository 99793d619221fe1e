from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Service settings, read from ``RECEIPTS_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="RECEIPTS_", frozen=True)

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    log_level: str = Field(default="INFO")
    strict_validation: bool = Field(default=True)

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level is not a log level: {value!r}")
        return value
