# office_terms\shared\config.py
from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "office-terms"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # --- Extraction ---
    # Locale key used when a caller does not name one (see dates.locales)
    DEFAULT_LOCALE: str = "en"

    # When a date cannot be normalized, emit the raw text (and log it)
    # instead of failing the whole record.
    RAW_DATE_FALLBACK: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
