"""Colour theme for freshstart console output.

The bundled ``data/theme.toml`` provides defaults; a user file at
``~/.config/freshstart/theme.toml`` may override any subset of colours.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from freshstart.core.paths import get_config_dir

logger = logging.getLogger(__name__)


class ThemeColors(BaseModel):
    """Hex colours used by the console styles."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    # Repository and install outcome colours
    clean: str = "#03b971"
    changed: str = "#f5b332"
    skipped: str = "#226666"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Accept only ``#RGB`` or ``#RRGGBB`` strings."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        digits = color[1:]
        if not color.startswith("#") or len(digits) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        try:
            int(digits, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg) from None
        return color


def get_user_theme_path() -> Path:
    """Return the path of the user theme override file."""
    return get_config_dir() / "theme.toml"


def _read_colors(path: Path) -> dict[str, str]:
    """Read the ``[colors]`` table from a TOML file.

    Unreadable or malformed files yield an empty mapping.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Invalid 'colors' section in %s", path)
        return {}
    return {k: v for k, v in colors.items() if isinstance(v, str)}


def load_theme_colors(user_path: Path | None = None) -> ThemeColors:
    """Load bundled colours merged with the user's overrides.

    Args:
        user_path: Override file location. Defaults to :func:`get_user_theme_path`.

    Returns:
        Validated ThemeColors; built-in defaults when validation fails.
    """
    bundled = resources.files("freshstart.data").joinpath("theme.toml")
    user = _read_colors(user_path or get_user_theme_path())
    merged = {**_read_colors(Path(str(bundled))), **user}
    try:
        return ThemeColors(**merged)
    except ValidationError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        return ThemeColors()


def build_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert theme colours into Rich styles."""
    colors = colors or load_theme_colors()
    return Theme(
        {
            "text": colors.text,
            "muted": colors.muted,
            "header": colors.header,
            "bold_header": f"bold {colors.header}",
            "border": colors.border,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "repo.clean": colors.clean,
            "repo.changed": f"bold {colors.changed}",
            "skipped": colors.skipped,
        }
    )


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Return the Rich theme, loading it once per process."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = build_rich_theme()
    return _cached_theme
