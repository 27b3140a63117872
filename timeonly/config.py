"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import List

import pendulum
import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.exceptions import ParseFailureError
from .domain.time_only import SUPPORTED_FORMATS, TimeOnly
from .services.time_windows import TimeWindow

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class DefaultsConfig(BaseModel):
    """Default settings for formatting and clock reading."""
    format: str = "t"
    timezone: str = "UTC"

    @field_validator("format")
    @classmethod
    def validate_format(cls, value: str) -> str:
        """Ensure the default format is one TimeOnly can render."""
        if value not in SUPPORTED_FORMATS:
            raise ValueError(f"format must be one of {', '.join(SUPPORTED_FORMATS)}, got '{value}'")
        return value

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the timezone is a known IANA zone name."""
        try:
            pendulum.timezone(value)
        except ValueError as exc:
            raise ValueError(f"Unknown timezone: '{value}'") from exc
        return value


class WindowConfig(BaseModel):
    """A named daily window, e.g. ``{name: night, start: "22:00", end: "06:00"}``."""
    name: str
    start: str
    end: str

    @field_validator("start", "end")
    @classmethod
    def validate_time(cls, value: str) -> str:
        """Validate the value parses as a time of day."""
        try:
            TimeOnly.parse(value)
        except ParseFailureError as exc:
            raise ValueError(str(exc)) from exc
        return value

    def to_window(self) -> TimeWindow:
        return TimeWindow(
            name=self.name,
            start=TimeOnly.parse(self.start),
            end=TimeOnly.parse(self.end),
        )


class AppConfig(BaseModel):
    """Application configuration."""
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    windows: List[WindowConfig] = Field(default_factory=list)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{value}'")
        return level

    @field_validator("windows")
    @classmethod
    def validate_windows(cls, value: List[WindowConfig]) -> List[WindowConfig]:
        """Ensure window names are unique."""
        seen: set[str] = set()
        for window in value:
            key = window.name.lower()
            if key in seen:
                raise ValueError(f"Duplicate window name detected: {window.name}")
            seen.add(key)
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a timeonly.yaml file."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)

    def build_windows(self) -> List[TimeWindow]:
        return [window.to_window() for window in self.windows]


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for timeonly.yaml in current directory
    config_path = Path.cwd() / "timeonly.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "timeonly.yaml"

    return config_path
