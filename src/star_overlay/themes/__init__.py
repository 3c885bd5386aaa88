"""Theme definitions for overlay previews."""

from star_overlay.themes.dark import DARK_THEME
from star_overlay.themes.light import LIGHT_THEME

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]
