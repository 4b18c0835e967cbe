"""Application configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # API settings
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # Max SVG / background bytes per request
    DOWNLOAD_FILENAME: str = "neonified.svg"

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = {"env_prefix": "NEONSTAG_"}


settings = Settings()
