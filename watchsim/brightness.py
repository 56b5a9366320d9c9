"""Backlight brightness levels and the controller that steps between them."""

from __future__ import annotations

import enum


class BrightnessLevel(enum.Enum):
    """Backlight levels, from dark to bright."""

    OFF = "Off"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


_LOWER = {
    BrightnessLevel.HIGH: BrightnessLevel.MEDIUM,
    BrightnessLevel.MEDIUM: BrightnessLevel.LOW,
    BrightnessLevel.LOW: BrightnessLevel.OFF,
}

_HIGHER = {
    BrightnessLevel.OFF: BrightnessLevel.LOW,
    BrightnessLevel.LOW: BrightnessLevel.MEDIUM,
    BrightnessLevel.MEDIUM: BrightnessLevel.HIGH,
}

# Cycling skips OFF: the screen stays visible while the user steps through.
_STEP = {
    BrightnessLevel.LOW: BrightnessLevel.MEDIUM,
    BrightnessLevel.MEDIUM: BrightnessLevel.HIGH,
    BrightnessLevel.HIGH: BrightnessLevel.LOW,
}


class BrightnessController:
    """Holds the current backlight level and a saved level to return to."""

    def __init__(self) -> None:
        self.level = BrightnessLevel.HIGH
        self.backup_level = BrightnessLevel.HIGH

    def init(self) -> None:
        """Apply the current level to the backlight."""
        self.set(self.level)

    def set(self, level: BrightnessLevel) -> None:
        """Switch the backlight to ``level``."""
        self.level = BrightnessLevel(level)

    def lower(self) -> None:
        """Go one level darker; OFF stays OFF."""
        if self.level in _LOWER:
            self.set(_LOWER[self.level])

    def higher(self) -> None:
        """Go one level brighter; HIGH stays HIGH."""
        if self.level in _HIGHER:
            self.set(_HIGHER[self.level])

    def step(self) -> None:
        """Cycle LOW -> MEDIUM -> HIGH -> LOW; OFF is left alone."""
        if self.level in _STEP:
            self.set(_STEP[self.level])

    def backup(self) -> None:
        """Remember the current level."""
        self.backup_level = self.level

    def restore(self) -> None:
        """Return to the level saved by :meth:`backup`."""
        self.set(self.backup_level)

    def label(self) -> str:
        """Human-readable name of the current level."""
        return self.level.value