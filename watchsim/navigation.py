"""Turn-by-turn navigation data received from the phone."""

from __future__ import annotations

from typing import Any


class NavigationService:
    """Latest navigation instruction: icon flag, narrative, distance, progress."""

    def __init__(self, system: Any) -> None:
        self.system = system
        self.flag = ""
        self.narrative = ""
        self.man_dist = ""
        self.progress = 0
        self.initialized = False

    def init(self) -> None:
        """Register the service so the phone can reach it."""
        self.initialized = True