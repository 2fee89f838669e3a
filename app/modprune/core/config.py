"""User configuration for modprune.

Loads an optional TOML file that tunes the default worker count and
extends the built-in junk rules. The resulting JunkRules value is built
once, before a run, and never changes during it.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from modprune.core.paths import get_config_path
from modprune.prune.pruner import DEFAULT_CONCURRENCY
from modprune.prune.rules import DEFAULT_RULES, JunkRules

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when a configuration file cannot be read or validated."""


class RulesConfig(BaseModel):
    """The [rules] section: additions to the built-in junk table.

    Attributes:
        extra_dirs: Directory names to remove in addition to the defaults.
        extra_files: File names to remove in addition to the defaults.
        extra_extensions: Extensions (with leading dot) to remove.
        keep: Names that must never be removed.
    """

    model_config = ConfigDict(extra="forbid")

    extra_dirs: Annotated[list[str], Field(default_factory=list)]
    extra_files: Annotated[list[str], Field(default_factory=list)]
    extra_extensions: Annotated[list[str], Field(default_factory=list)]
    keep: Annotated[list[str], Field(default_factory=list)]

    @field_validator("extra_extensions")
    @classmethod
    def validate_extensions(cls, value: list[str]) -> list[str]:
        """Require every extension to carry its leading dot."""
        for ext in value:
            if not ext.startswith(".") or ext == ".":
                msg = f"extension must start with '.': {ext!r}"
                raise ValueError(msg)
        return value

    @field_validator("extra_dirs", "extra_files", "keep")
    @classmethod
    def validate_names(cls, value: list[str]) -> list[str]:
        """Reject empty names and names containing path separators."""
        for name in value:
            if not name or "/" in name:
                msg = f"invalid entry name: {name!r}"
                raise ValueError(msg)
        return value


class PrunerConfig(BaseModel):
    """Top-level modprune configuration."""

    model_config = ConfigDict(extra="forbid")

    concurrency: Annotated[int, Field(ge=1)] = DEFAULT_CONCURRENCY
    rules: RulesConfig = Field(default_factory=RulesConfig)

    def build_rules(self, base: JunkRules = DEFAULT_RULES) -> JunkRules:
        """Combine the built-in rules with configured additions."""
        return base.extend(
            dirs=self.rules.extra_dirs,
            files=self.rules.extra_files,
            extensions=self.rules.extra_extensions,
            keep=self.rules.keep,
        )


def load_config(path: Path | None = None) -> PrunerConfig:
    """Load configuration from a TOML file.

    With no explicit path, the XDG default location is used and a
    missing file yields the defaults. An explicitly given file must
    exist.

    Args:
        path: Optional path to a TOML configuration file.

    Returns:
        Validated PrunerConfig.

    Raises:
        ConfigError: If the file is missing (explicit path only),
            unreadable, not valid TOML, or fails validation.
    """
    explicit = path is not None
    config_path = path if path is not None else get_config_path()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        if explicit:
            msg = f"Config file not found: {config_path}"
            raise ConfigError(msg) from e
        logger.debug("No config at %s, using defaults", config_path)
        return PrunerConfig()
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse {config_path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Failed to read {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        config = PrunerConfig(**data)
    except ValidationError as e:
        msg = f"Invalid configuration in {config_path}: {e}"
        raise ConfigError(msg) from e

    logger.debug("Loaded config from %s", config_path)
    return config
