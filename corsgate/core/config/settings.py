"""
Main configuration class that composes all configs.
"""

import json
import os

from dotenv import load_dotenv

from corsgate.core.config.cors_config import CORSConfig
from corsgate.core.config.logging_config import LoggingConfig
from corsgate.core.config.resources_config import ResourcesConfig
from corsgate.core.errors import AccessControlConfigError
from corsgate.cors.policy import parse_allow_origin

# Load environment variables from a .env file
load_dotenv()


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.parse_errors: list[str] = []

        # CORS configuration
        default_allow_origin = os.getenv("DEFAULT_ALLOW_ORIGIN")

        try:
            self.cors = CORSConfig(
                default_allow_origin=json.loads(default_allow_origin) if default_allow_origin else None,
            )
        except json.JSONDecodeError as e:
            bare_value = default_allow_origin.strip()
            if bare_value.startswith(("[", "{", '"')):
                self.parse_errors.append(f"DEFAULT_ALLOW_ORIGIN is not valid JSON: {e}")
                self.cors = CORSConfig(default_allow_origin=None)
            else:
                # A bare value such as * or http://localhost is taken as-is
                self.cors = CORSConfig(default_allow_origin=bare_value)

        self.resources = ResourcesConfig(
            file_path=os.getenv("RESOURCES_FILE", "resources.yaml"),
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "console"),
        )

        # Development settings
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.environment = os.getenv("ENVIRONMENT", "development")

    def validate(self) -> bool:
        """Validate configuration."""
        errors = list(self.parse_errors)

        if self.logging.format not in ("console", "json"):
            errors.append("LOG_FORMAT must be 'console' or 'json'")

        if self.logging.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"LOG_LEVEL '{self.logging.level}' is not a valid level")

        if self.cors.default_allow_origin is not None:
            try:
                parse_allow_origin(self.cors.default_allow_origin)
            except AccessControlConfigError as e:
                errors.append(f"DEFAULT_ALLOW_ORIGIN is invalid: {e}")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
