"""
Configuration settings for the client, CLI and web app.
Environment variables override defaults.
"""
import logging
import os
from dataclasses import dataclass, field
from typing import List

from forecast_table.i18n import DEFAULT_LOCALE, available_locales

_logger = logging.getLogger(__name__)

DEFAULT_BACKEND_API_URL = "https://pohodvsesvit.onrender.com/api/weather"


@dataclass
class Settings:
    """Runtime configuration"""

    # Upstream forecast API
    BACKEND_API_URL: str = DEFAULT_BACKEND_API_URL
    REQUEST_TIMEOUT: float = 30.0  # seconds

    # Presentation
    ICON_BASE: str = "img"
    LOCALE: str = "uk"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Logging
    LOG_LEVEL: str = "WARNING"

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type == int:
                    setattr(self, key, int(env_value))
                elif field_type == float:
                    setattr(self, key, float(env_value))
                elif field_type == List[str]:
                    setattr(self, key, env_value.split(","))
                else:
                    setattr(self, key, env_value)

        if self.LOCALE not in available_locales():
            _logger.warning(
                "Unknown LOCALE %r, falling back to %r", self.LOCALE, DEFAULT_LOCALE
            )
            self.LOCALE = DEFAULT_LOCALE


# Global settings instance
settings = Settings()
