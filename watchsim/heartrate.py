"""Heart-rate measurement state and control of the measuring task."""

from __future__ import annotations

import enum
from typing import Optional, Protocol


class HeartRateState(enum.Enum):
    """State of the heart-rate measurement."""

    STOPPED = enum.auto()
    NOT_ENOUGH_DATA = enum.auto()
    NO_TOUCH = enum.auto()
    RUNNING = enum.auto()


class HeartRateMessage(enum.Enum):
    """Messages sent to the measuring task."""

    START_MEASUREMENT = enum.auto()
    STOP_MEASUREMENT = enum.auto()


class HeartRateTask(Protocol):
    def push_message(self, message: HeartRateMessage) -> None: ...


class HeartRateController:
    """Holds the latest reading and starts or stops the measuring task."""

    def __init__(self) -> None:
        self.task: Optional[HeartRateTask] = None
        self.state = HeartRateState.STOPPED
        self.heart_rate = 0

    def start(self) -> None:
        """Ask the task to start measuring; does nothing without a task."""
        if self.task is not None:
            self.state = HeartRateState.NOT_ENOUGH_DATA
            self.task.push_message(HeartRateMessage.START_MEASUREMENT)

    def stop(self) -> None:
        """Ask the task to stop measuring; does nothing without a task."""
        if self.task is not None:
            self.state = HeartRateState.STOPPED
            self.task.push_message(HeartRateMessage.STOP_MEASUREMENT)

    def update(self, new_state: HeartRateState, heart_rate: int) -> None:
        """Record a new state and reading from the measuring task."""
        if not 0 <= heart_rate <= 0xFF:
            raise ValueError(f"heart rate out of range: {heart_rate}")
        self.state = HeartRateState(new_state)
        if self.heart_rate != heart_rate:
            self.heart_rate = heart_rate

    def set_heart_rate_task(self, task: Optional[HeartRateTask]) -> None:
        """Attach the task that performs measurements."""
        self.task = task