"""Configuration settings for the JSON Wire client."""

from typing import Optional
from pydantic_settings import BaseSettings

DEFAULT_EXECUTOR = "http://127.0.0.1:4444/wd/hub"


class Settings(BaseSettings):
    """Client configuration from environment variables."""

    # Remote end
    executor_url: str = DEFAULT_EXECUTOR

    # HTTP behaviour
    max_redirects: int = 10
    request_timeout_seconds: Optional[float] = None  # None = wait forever

    # Logging
    trace: bool = False  # Dump full request/response headers and bodies at INFO
    log_level: str = "INFO"

    model_config = {"env_prefix": "JSONWIRE_"}

    @property
    def executor_base(self) -> str:
        """Executor URL without a trailing slash, ready for path templating."""
        return self.executor_url.rstrip("/")


# Global settings instance
settings = Settings()
