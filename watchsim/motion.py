"""Accelerometer readings, step counting and wrist-raise detection."""

from __future__ import annotations

import enum


class MotionDeviceType(enum.Enum):
    """Accelerometer chip fitted to the watch."""

    UNKNOWN = enum.auto()
    BMA421 = enum.auto()
    BMA425 = enum.auto()


def _int16(value: int) -> int:
    return (value + 0x8000) % 0x10000 - 0x8000


def _int32(value: int) -> int:
    return (value + 0x80000000) % 0x100000000 - 0x80000000


def _uint32(value: int) -> int:
    return value % 0x100000000


class MotionController:
    """Latest acceleration and step counts, plus wake-gesture checks."""

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self.z = 0
        self.nb_steps = 0
        self.trip_steps = 0
        self.last_y_for_wake_up = 0
        self.is_sensor_ok = False
        self.device_type = MotionDeviceType.UNKNOWN
        self.accumulated_speed = 0

    def update(self, x: int, y: int, z: int, nb_steps: int) -> None:
        """Store a new sample; step increases are added to the trip count."""
        self.x = _int16(x)
        self.y = _int16(y)
        self.z = _int16(z)
        nb_steps = _uint32(nb_steps)
        delta = _int32(nb_steps - self.nb_steps)
        self.nb_steps = nb_steps
        if delta > 0:
            self.trip_steps = _uint32(self.trip_steps + delta)

    def reset_trip(self) -> None:
        """Zero the trip step counter."""
        self.trip_steps = 0

    def should_raise_wake(self, is_sleeping: bool) -> bool:
        """True when the wrist has been raised enough to wake the screen."""
        if self.x + 335 <= 670 and self.z < 0:
            if not is_sleeping:
                if self.y > 0:
                    self.last_y_for_wake_up = 0
                return False
            if self.y >= 0:
                self.last_y_for_wake_up = 0
                return False
            if self.y + 230 < self.last_y_for_wake_up:
                self.last_y_for_wake_up = self.y
                return True
        return False

    def should_shake_wake(self, thresh: int) -> bool:
        """Shake-to-wake never triggers in the simulator."""
        return False

    def current_shake_speed(self) -> int:
        """Smoothed shake speed."""
        return self.accumulated_speed

    def init(self, device_type: MotionDeviceType) -> None:
        """Record which accelerometer chip was detected."""
        if device_type in (MotionDeviceType.BMA421, MotionDeviceType.BMA425):
            self.device_type = device_type
        else:
            self.device_type = MotionDeviceType.UNKNOWN