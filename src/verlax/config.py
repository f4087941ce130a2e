import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field, ValidationError, model_validator, ConfigDict

from .version import VersionParser
from .exceptions import (
    ConfigParsingError,
    ConfigFileMissingError,
    ConfigValidationError,
)


logger = logging.getLogger(__name__)

_LEVEL_NAMES = {"CRITICAL", "FATAL", "ERROR", "WARNING", "WARN", "INFO", "DEBUG", "NOTSET"}


class ParserModel(BaseModel):
    """
        Class Config-Validation Model describe `parser`
    """
    markers_end_release: bool = False
    model_config = ConfigDict(extra="forbid")


class LoggingModel(BaseModel):
    """
        Class Config-Validation Model describe `logging`
    """
    debug: bool = False
    levels: Dict[str, str] = Field(default_factory=dict)
    file: Optional[str] = None
    model_config = ConfigDict(extra="forbid")

    @model_validator(mode='after')
    def validate_levels(self) -> 'LoggingModel':
        """Ensure every per-module level is a logging level name"""
        for name, lvl in self.levels.items():
            if lvl.upper() not in _LEVEL_NAMES:
                raise ConfigValidationError(f"Invalid log level '{lvl}' for module '{name}'.")
        return self


class ConfigModel(BaseModel):
    """
        Class Config-Validation Model desribe top-level of config
    """
    parser: ParserModel = Field(default_factory=ParserModel)
    logging: LoggingModel = Field(default_factory=LoggingModel)
    model_config = ConfigDict(extra="forbid")


class Config:
    """
    Loads and validates a verlax.yml file using Pydantic models.
    Without a path, every setting keeps its default.
    """
    def __init__(self, config_path: Optional[str] = None):
        self.path = config_path
        if self.path is None:
            self.model = ConfigModel()
            return

        logger.info(f"Loading configuration from '{self.path}'...")
        raw_data = self._load_raw_config()
        try:
            self.model = ConfigModel.model_validate(raw_data)
            logger.debug(f"Configuration model validated successfully: \n{self.model.model_dump_json(indent=2)}")
        except ValidationError as e:
            raise ConfigValidationError(f"Configuration validation failed:\n{e}")

    def _load_raw_config(self) -> Dict[str, Any]:
        try:
            content = Path(self.path).read_text(encoding='utf-8')
            config_data = yaml.safe_load(content)
        except FileNotFoundError:
            raise ConfigFileMissingError(f"Configuration file not found at: {self.path}")
        except yaml.YAMLError as e:
            raise ConfigParsingError(f"Error parsing YAML file: {e}")

        if config_data is None:
            return {}
        if not isinstance(config_data, dict):
            raise ConfigParsingError("Configuration file must be a YAML document containing a dictionary.")
        logger.debug(f"Successfully parsed YAML from '{self.path}'.")
        return config_data

    def parser(self) -> VersionParser:
        return VersionParser(markers_end_release=self.model.parser.markers_end_release)

    @property
    def debug(self) -> bool:
        return self.model.logging.debug

    @property
    def log_levels(self) -> Dict[str, str]:
        return {name: lvl.upper() for name, lvl in self.model.logging.levels.items()}

    @property
    def log_file(self) -> Optional[str]:
        return self.model.logging.file
