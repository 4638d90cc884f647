import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Remote entity service (Supabase)
    supabase_url: str = os.getenv("SUPABASE_URL", "http://localhost:54321")
    supabase_anon_key: str = os.getenv("SUPABASE_ANON_KEY", "")
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "30.0"))

    # Notifications
    notification_buffer: int = int(os.getenv("NOTIFICATION_BUFFER", "50"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.request_timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be greater than 0")

        if self.notification_buffer <= 0:
            raise ValueError(
                f"NOTIFICATION_BUFFER must be a positive integer, got {self.notification_buffer}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
