# mvp_creator/config.py
"""
Configuration settings for the service.
Environment variables (or a local .env file) override defaults.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from mvp_creator.errors import ConfigurationError
from mvp_creator.models import DEFAULT_MODEL

load_dotenv()


@dataclass
class Settings:
    """Service configuration"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Providers
    GOOGLE_API_KEY: Optional[str] = None
    TOGETHER_API_KEY: Optional[str] = None

    # Generation
    DEFAULT_MODEL: str = DEFAULT_MODEL
    REQUEST_TIMEOUT: float = 0  # seconds, 0 waits indefinitely
    MAX_OUTPUT_TOKENS: int = 8192
    TEMPERATURE: float = 0.2

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is None:
                continue
            field_type = self.__dataclass_fields__[key].type
            if field_type == bool:
                setattr(self, key, env_value.lower() in ("true", "1", "yes"))
            elif field_type == int:
                setattr(self, key, int(env_value))
            elif field_type == float:
                setattr(self, key, float(env_value))
            elif field_type == List[str]:
                setattr(self, key, [v.strip() for v in env_value.split(",") if v.strip()])
            else:
                setattr(self, key, env_value)

        # API_KEY is the name the hosted deployment injects the Gemini secret under.
        if not self.GOOGLE_API_KEY and os.getenv("API_KEY"):
            self.GOOGLE_API_KEY = os.getenv("API_KEY")


def load_settings() -> Settings:
    settings = Settings()
    if not settings.GOOGLE_API_KEY:
        raise ConfigurationError("GOOGLE_API_KEY environment variable not set")
    if not settings.TOGETHER_API_KEY:
        print("Warning: TOGETHER_API_KEY not found. Together AI models will not be available.")
    return settings
