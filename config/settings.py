"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    log_level: str = "INFO"
    auth_username: str = ""
    auth_password: str = ""
    currency_symbol: str = "₹"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
