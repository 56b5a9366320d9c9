"""Validation state of the running firmware image."""

from __future__ import annotations

VALID_BIT_ADDRESS = 0x7BFE8
VALID_BIT_VALUE = 1


class FirmwareValidator:
    """Tracks whether the running image has been marked valid.

    The simulated image is always considered validated, so writing the
    valid bit only happens for an image that is not.
    """

    def __init__(self) -> None:
        self.flash: dict[int, int] = {}
        self.reset_requested = False

    def is_validated(self) -> bool:
        """The simulated image is always validated."""
        return True

    def validate(self) -> None:
        """Mark the image valid if it is not already."""
        if not self.is_validated():
            self.flash[VALID_BIT_ADDRESS] = VALID_BIT_VALUE

    def reset(self) -> None:
        """Request a system reset."""
        self.reset_requested = True