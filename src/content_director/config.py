from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Validator settings loaded from environment variables."""

    # Language of violation messages and report prefixes
    locale: Literal["en", "zh-TW"] = "en"

    # Root log level applied by configure_logging()
    log_level: str = "INFO"

    model_config = {"env_prefix": "CONTENT_DIRECTOR_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
