"""
NAVCORE Configuration Module.

Centralized configuration management using environment variables.
Supports .env files for local development.

Usage:
    from navcore.config import settings

    print(settings.path_points)
    settings.configure_logging()

Units (nautical miles, knots, decimal degrees), the Earth radius and the
score tiers are constants and are never configurable.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
import logging

from dotenv import load_dotenv

# Load .env file if present
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


DEFAULT_PATH_POINTS = 100


def get_int(key: str, default: int) -> int:
    """Get int from environment variable."""
    try:
        return int(os.getenv(key, str(default)))
    except (ValueError, TypeError):
        return default


@dataclass
class Settings:
    """Engine settings loaded from environment."""

    # Chart paths
    path_points: int = field(
        default_factory=lambda: get_int("NAVCORE_PATH_POINTS", DEFAULT_PATH_POINTS)
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = field(
        default_factory=lambda: os.getenv(
            "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.path_points < 1:
            logging.warning(
                f"Path point count {self.path_points} must be at least 1, "
                f"using {DEFAULT_PATH_POINTS}"
            )
            self.path_points = DEFAULT_PATH_POINTS

    def configure_logging(self):
        """Configure logging based on settings."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        logging.basicConfig(level=level, format=self.log_format)


# Singleton instance
settings = Settings()


# Convenience function for testing
def get_settings() -> Settings:
    """Get the settings instance (useful for dependency injection)."""
    return settings
