"""Light and dark theme state with derived palette colours."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class DarkMode(Enum):
    """How the theme decides between light and dark appearance."""

    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


@dataclass(frozen=True)
class ColorSet:
    """Accent shades from which the primary colour is chosen."""

    dark: Color
    lighter: Color


class Theme:
    """Theme settings; colours are recomputed whenever the appearance changes."""

    def __init__(
        self,
        theme_color: ColorSet,
        dark_mode: DarkMode = DarkMode.LIGHT,
        system_dark: bool = False,
    ) -> None:
        self._listeners: list[Callable[[], None]] = []
        self.theme_color = theme_color
        self.dark_mode = DarkMode(dark_mode)
        self.system_dark = bool(system_dark)
        self.native_text = False
        self.enable_animation = True
        self.refresh_colors()

    @property
    def dark(self) -> bool:
        """Whether the dark palette is in effect."""
        if self.dark_mode is DarkMode.DARK:
            return True
        if self.dark_mode is DarkMode.SYSTEM:
            return self.system_dark
        return False

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Call ``callback`` whenever the dark state may have changed.

        Returns a function that removes the subscription.
        """
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _dark_changed(self) -> None:
        self.refresh_colors()
        for callback in list(self._listeners):
            callback()

    def set_dark_mode(self, mode: DarkMode) -> None:
        """Choose light, dark or system-following appearance."""
        self.dark_mode = DarkMode(mode)
        self._dark_changed()

    def set_theme_color(self, color_set: ColorSet) -> None:
        """Replace the accent colour set."""
        self.theme_color = color_set
        self.refresh_colors()

    def set_system_dark(self, value: bool) -> None:
        """Record a change of the system appearance."""
        self.system_dark = bool(value)
        self._dark_changed()

    def refresh_colors(self) -> None:
        """Recompute every palette colour from the current appearance."""
        is_dark = self.dark
        self.primary_color = self.theme_color.lighter if is_dark else self.theme_color.dark
        self.background_color = Color(0, 0, 0, 255) if is_dark else Color(1, 1, 1, 255)
        self.window_background_color = (
            Color(32, 32, 32, 255) if is_dark else Color(237, 237, 237, 255)
        )
        self.window_active_background_color = (
            Color(26, 26, 26, 255) if is_dark else Color(243, 243, 243, 255)
        )
        self.font_primary_color = Color(248, 248, 248, 255) if is_dark else Color(7, 7, 7, 255)
        self.font_secondary_color = (
            Color(222, 222, 222, 255) if is_dark else Color(102, 102, 102, 255)
        )
        self.font_tertiary_color = (
            Color(200, 200, 200, 255) if is_dark else Color(153, 153, 153, 255)
        )
        base = 255 if is_dark else 0
        self.item_normal_color = Color(base, base, base, 0)
        self.item_hover_color = Color(base, base, base, int(255 * 0.03))
        self.item_press_color = Color(base, base, base, int(255 * 0.06))
        self.item_check_color = Color(base, base, base, int(255 * 0.09))