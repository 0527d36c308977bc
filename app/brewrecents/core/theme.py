"""Colors of the report and of the console messages.

The bundled ``data/theme.toml`` holds the defaults. A ``[colors]`` table in
``~/.config/brewrecents/theme.toml`` overrides any of them.
"""

import logging
import re
import tomllib
from functools import lru_cache
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from brewrecents.core.paths import get_theme_path

logger = logging.getLogger(__name__)

HEX_COLOR_PATTERN = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Hex colors used by brew-recents.

    Attributes:
        header: Report title and table headers.
        summary: Closing summary line.
        info: Informational messages.
        success: Success messages.
        warning: Warning messages.
        error: Error messages.
        installed: Installed packages in the report.
        looked_up: Dimmed looked-up packages in the report.
    """

    model_config = ConfigDict(extra="forbid")

    header: str = "#69B9A1"
    summary: str = "#b2bec3"
    info: str = "#0ec1c8"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    installed: str = "#03b971"
    looked_up: str = "#7f8c8d"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, v: object) -> str:
        if not isinstance(v, str) or not HEX_COLOR_PATTERN.fullmatch(v.strip()):
            msg = f"invalid hex color {v!r}, expected #RGB or #RRGGBB"
            raise ValueError(msg)
        return v.strip()


def _read_colors(path: Path) -> dict[str, str]:
    """Read the ``[colors]`` table of a theme file.

    Unreadable files and non-string values are skipped with a warning.
    """
    try:
        with open(path, "rb") as f:
            table = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    if not isinstance(table, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return {key: value for key, value in table.items() if isinstance(value, str)}


def load_theme_colors() -> ThemeColors:
    """Load the bundled colors, then apply the user's overrides.

    Returns:
        Validated ThemeColors. An invalid user theme yields the defaults.
    """
    bundled = resources.files("brewrecents.data").joinpath("theme.toml")
    colors = _read_colors(Path(str(bundled)))

    user_path = get_theme_path()
    overrides = _read_colors(user_path)
    if overrides:
        logger.debug("Applying theme overrides from %s", user_path)
    colors.update(overrides)

    try:
        return ThemeColors.model_validate(colors)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def build_console_theme(colors: ThemeColors) -> Theme:
    """Build the rich theme behind the console markup."""
    return Theme(
        {
            "bold_header": f"bold {colors.header}",
            "dim": colors.summary,
            "info": colors.info,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
        }
    )


@lru_cache(maxsize=1)
def get_theme_colors() -> ThemeColors:
    """Return the theme colors, loaded once per process."""
    return load_theme_colors()


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    """Return the console theme, built once per process."""
    return build_console_theme(get_theme_colors())
