"""Application configuration via environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

from rulechain.validators.models import ResultMode


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Validation
    RESULT_MODE: ResultMode = ResultMode.ACCUMULATE
    RULES_METADATA_KEY: str = "rules"
    KEY_METADATA_KEY: str = "key"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # API guard
    MAX_FIELDS_PER_REQUEST: int = 500

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("RESULT_MODE", mode="before")
    @classmethod
    def _parse_result_mode(cls, value):
        return ResultMode.parse(value, ResultMode.ACCUMULATE)


@lru_cache
def get_settings() -> Settings:
    return Settings()
