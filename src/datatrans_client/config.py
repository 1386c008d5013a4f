"""Configuration management for the Datatrans client."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_API_URLS = {
    "sandbox": "https://api.sandbox.datatrans.com/v1",
    "production": "https://api.datatrans.com/v1",
}

_PAY_URLS = {
    "sandbox": "https://pay.sandbox.datatrans.com/v1",
    "production": "https://pay.datatrans.com/v1",
}


class DatatransSettings(BaseSettings):
    """
    Gateway context passed to every Transaction.

    Loaded from DATATRANS_* environment variables (or a .env file) when not
    given explicitly.
    """

    merchant_id: str = Field(default="", description="Datatrans merchant ID (basic auth user)")
    password: str = Field(default="", description="Datatrans server-to-server password")
    environment: Literal["sandbox", "production"] = Field(
        default="sandbox",
        description="Which Datatrans environment to talk to"
    )
    timeout_seconds: float = Field(default=10.0, description="HTTP request timeout")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool = Field(default=True, description="Render logs as JSON")

    model_config = SettingsConfigDict(
        env_prefix="DATATRANS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def api_url(self) -> str:
        """Base URL of the server-to-server JSON API."""
        return _API_URLS[self.environment]

    @property
    def pay_url(self) -> str:
        """Base URL of the hosted payment pages."""
        return _PAY_URLS[self.environment]

    def start_url(self, transaction_id: str) -> str:
        """URL the shopper's browser is sent to after a successful init."""
        return f"{self.pay_url}/start/{transaction_id}"


# Global settings instance
settings = DatatransSettings()
