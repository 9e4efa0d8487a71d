"""Configuration management using Pydantic Settings"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "ledger-gateway"
    log_level: str = "INFO"

    # Numeric input handling: "reject" raises MalformedInputError, "coerce" logs and uses 0
    malformed_input_policy: Literal["reject", "coerce"] = "reject"

    # GST: state the business is registered in, used to derive inter-state supply
    home_state: str = "Maharashtra"


settings = Settings()
