"""
Configuration for the parsing front end
"""
from pathlib import Path
from dataclasses import dataclass, field

from errors import ValidationError

DEFAULT_MAX_FILE_SIZE = 100 * 1024 * 1024  # 100 MB
DEFAULT_MAX_JSON_SIZE = 10 * 1024 * 1024  # 10 MB, JSON is parsed fully in memory

@dataclass(frozen=True)
class ParserConfig:
    """Document parser configuration

    base_dir is the sandbox root: no file outside it is ever read.
    """
    base_dir: Path = Path("/app/kb")
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_json_size: int = DEFAULT_MAX_JSON_SIZE

    def __post_init__(self):
        if self.base_dir is None or str(self.base_dir).strip() == "":
            raise ValidationError("base_dir must be a non-empty path")
        # frozen dataclass: bypass __setattr__ to normalize the type
        object.__setattr__(self, 'base_dir', Path(self.base_dir))
        self._require_positive('max_file_size', self.max_file_size)
        self._require_positive('max_json_size', self.max_json_size)

    @staticmethod
    def _require_positive(name: str, value) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValidationError(
                f"{name} must be a positive integer (received: {value!r})"
            )

@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"

@dataclass(frozen=True)
class Config:
    """Main configuration container"""
    parser: ParserConfig = field(default_factory=ParserConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> 'Config':
        """Create config from environment - delegates to EnvironmentConfigLoader"""
        from environment_config_loader import EnvironmentConfigLoader
        return EnvironmentConfigLoader().load()
