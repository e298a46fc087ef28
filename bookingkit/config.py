"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.slugs import is_valid_slug
from .domain.timezones import COMMON_TIMEZONES, resolve_timezone
from .services.slug_allocator import DEFAULT_FALLBACK, DEFAULT_MAX_ATTEMPTS

CONFIG_FILE_NAME = "bookingkit.yaml"


class SlugConfig(BaseModel):
    """
    Settings for unique slug allocation.

    Read by library callers through ``SlugAllocatorService.from_config``;
    the CLI does not allocate slugs.
    """
    fallback: str = DEFAULT_FALLBACK  # Used when a name has no sluggable characters
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    @field_validator("fallback")
    @classmethod
    def validate_fallback(cls, value: str) -> str:
        """Ensure the fallback is itself a canonical slug."""
        if not is_valid_slug(value):
            raise ValueError(f"fallback must be a valid slug, got {value!r}")
        return value

    @field_validator("max_attempts")
    @classmethod
    def validate_max_attempts(cls, value: int) -> int:
        """Ensure at least one candidate is tried."""
        if value <= 0:
            raise ValueError("max_attempts must be greater than zero")
        return value


class AppConfig(BaseModel):
    """Application configuration."""
    timezone: str = "UTC"  # Default display timezone
    slug: SlugConfig = Field(default_factory=SlugConfig)
    display_timezones: List[str] = Field(default_factory=lambda: list(COMMON_TIMEZONES))

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the timezone is a known IANA name."""
        resolve_timezone(value)
        return value

    @field_validator("display_timezones")
    @classmethod
    def validate_display_timezones(cls, value: List[str]) -> List[str]:
        """Ensure every timezone is known and listed once."""
        # Preserve order while removing duplicates
        seen: set[str] = set()
        deduped: List[str] = []
        for name in value:
            resolve_timezone(name)
            if name not in seen:
                deduped.append(name)
                seen.add(name)
        return deduped

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
                f"See bookingkit.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)

    @classmethod
    def load_or_default(cls, config_path: Optional[Path] = None) -> "AppConfig":
        """
        Load an explicit config file, or the default one when it exists.

        An explicitly given path must exist; a missing default file yields
        the built-in defaults.
        """
        if config_path is not None:
            return cls.load_from_yaml(config_path)

        default_path = get_default_config_path()
        if default_path.exists():
            return cls.load_from_yaml(default_path)

        return cls()


def get_default_config_path() -> Path:
    """Get the default configuration file path (bookingkit.yaml in the working directory)."""
    return Path.cwd() / CONFIG_FILE_NAME
