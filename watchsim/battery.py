"""Battery state as seen by the rest of the system."""

from __future__ import annotations

from typing import Any, ClassVar, Optional


class Battery:
    """Charge, power and measurement state of the battery."""

    instance: ClassVar[Optional["Battery"]] = None

    def __init__(self) -> None:
        self.voltage = 0
        self.percent_remaining = 0
        self.is_full = False
        self.is_charging = False
        self.is_power_present = False
        self.first_measurement = True
        self.is_reading = False
        self.system_task: Optional[Any] = None
        Battery.instance = self

    @property
    def charging(self) -> bool:
        """Charging and not yet full; the charge pin flickers once full."""
        return self.is_charging and not self.is_full

    def read_power_state(self) -> None:
        """Update the full flag from power and charging state."""
        if self.is_power_present and not self.is_charging:
            self.is_full = True
        elif not self.is_power_present:
            self.is_full = False

    def measure_voltage(self) -> None:
        """Refresh power state and begin a reading unless one is running."""
        self.read_power_state()
        if self.is_reading:
            return
        self.is_reading = True

    def register(self, system_task: Any) -> None:
        """Attach the system task that receives battery messages."""
        self.system_task = system_task