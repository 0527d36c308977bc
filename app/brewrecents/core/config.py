"""User configuration for brew-recents.

Configuration is optional and stored in ~/.config/brewrecents/config.toml.
Every value has a default; command line flags override the file.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from brewrecents.core.errors import ConfigError, ConfigParseError
from brewrecents.core.paths import get_config_path, get_default_history_path

logger = logging.getLogger(__name__)

DEFAULT_INDICATOR = "•"  # Bullet


class RecentsConfig(BaseModel):
    """Persistent defaults for the recents report.

    Attributes:
        days: Size of the change window in days.
        truncate_chars: Maximum displayed length of a package name.
        dim_looked_up: Dim packages found in the shell history.
        hide_looked_up: Hide packages found in the shell history.
        history_file: Shell history searched for ``brew info`` lookups.
        installed_indicator: Glyph prefixed to installed packages.
        git_timeout: Timeout in seconds for each git/brew command.
    """

    model_config = ConfigDict(extra="forbid")

    days: Annotated[int, Field(ge=1, le=3650, description="Change window in days")] = 7
    truncate_chars: Annotated[
        int,
        Field(ge=1, le=200, description="Truncate package names longer than this"),
    ] = 25
    dim_looked_up: Annotated[bool, Field(description="Dim looked-up packages")] = True
    hide_looked_up: Annotated[bool, Field(description="Hide looked-up packages")] = False
    history_file: Annotated[
        Path,
        Field(
            default_factory=get_default_history_path,
            description="Shell history file searched for lookups",
        ),
    ]
    installed_indicator: Annotated[
        str,
        Field(max_length=4, description="Glyph marking installed packages"),
    ] = DEFAULT_INDICATOR
    git_timeout: Annotated[
        int,
        Field(ge=5, le=600, description="Timeout in seconds for git/brew commands"),
    ] = 60

    @field_validator("history_file", mode="after")
    @classmethod
    def expand_home(cls, v: Path) -> Path:
        """Expand a leading ``~`` in the history path."""
        return v.expanduser()


def load_config(path: Path | None = None) -> RecentsConfig:
    """Load configuration from a TOML file.

    A missing file is not an error: the defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated RecentsConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return RecentsConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        config = RecentsConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config


def save_config(config: RecentsConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The RecentsConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: RecentsConfig) -> dict[str, object]:
    """Convert RecentsConfig to a dictionary for TOML serialization.

    Args:
        config: The RecentsConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    data = config.model_dump()
    data["history_file"] = str(config.history_file)
    return data
