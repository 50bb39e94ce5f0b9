"""
Environment configuration loader.

Logic for reading environment variables lives with the data source
(environment) rather than in the Config dataclasses.
"""
import os
from pathlib import Path

from config import (
    Config, LoggingConfig, ParserConfig,
    DEFAULT_MAX_FILE_SIZE, DEFAULT_MAX_JSON_SIZE
)
from errors import ValidationError

class EnvironmentConfigLoader:
    """Loads configuration from environment variables.

    Single Responsibility: Environment access logic.
    """

    def load(self) -> Config:
        """Create Config from environment variables"""
        return Config(
            parser=self._load_parser_config(),
            logging=self._load_logging_config()
        )

    def _load_parser_config(self) -> ParserConfig:
        """Load document parser configuration from environment"""
        return ParserConfig(
            base_dir=Path(self._get_optional("KNOWLEDGE_BASE_PATH", "/app/kb")),
            max_file_size=self._get_int("MAX_FILE_SIZE", DEFAULT_MAX_FILE_SIZE),
            max_json_size=self._get_int("MAX_JSON_SIZE", DEFAULT_MAX_JSON_SIZE)
        )

    def _load_logging_config(self) -> LoggingConfig:
        """Load logging configuration from environment"""
        return LoggingConfig(
            level=self._get_optional("LOG_LEVEL", "INFO").upper()
        )

    def _get_optional(self, key: str, default: str) -> str:
        """Get optional string environment variable"""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable"""
        value = os.getenv(key, str(default))
        try:
            return int(value)
        except ValueError:
            raise ValidationError(f"{key} must be an integer (received: {value!r})")
