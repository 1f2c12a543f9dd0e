from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum

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
    APP_NAME: str = "text-transformation"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.JSON
    OTEL_SERVICE_NAME: str = "text-transformation"

    # --- Transformation Config ---
    # Relative paths resolve against the working directory of the process.
    TRANSFORMATION_CONFIG_PATH: str = "data/config/transformation-config.json"

    # Load and resolve the configuration when the container starts, instead of
    # on the first transformation call.
    EAGER_LOAD_CONFIG: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
