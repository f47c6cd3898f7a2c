"""
Configuration module for Schema Form.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class SchemaFormConfig:
    """Configuration settings for Schema Form."""

    # Submission settings
    submit_delay_seconds: float = 1.0  # Simulated network round trip

    # Export settings
    export_filename: str = "form-schema.json"
    export_mime_type: str = "application/json"

    # Web UI settings
    server_name: str = "0.0.0.0"
    server_port: int = 7860
    default_dark_mode: bool = False

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "SchemaFormConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            submit_delay_seconds=float(os.getenv("SCHEMA_FORM_SUBMIT_DELAY", str(_defaults.submit_delay_seconds))),
            export_filename=os.getenv("SCHEMA_FORM_EXPORT_FILENAME", _defaults.export_filename),
            server_name=os.getenv("SCHEMA_FORM_SERVER_NAME", _defaults.server_name),
            server_port=int(os.getenv("SCHEMA_FORM_SERVER_PORT", str(_defaults.server_port))),
            default_dark_mode=os.getenv("SCHEMA_FORM_DARK_MODE", str(_defaults.default_dark_mode).lower()).lower() == "true",
            log_level=os.getenv("SCHEMA_FORM_LOG_LEVEL", _defaults.log_level).upper(),
        )


config = SchemaFormConfig.from_env()


def get_config() -> SchemaFormConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> SchemaFormConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
