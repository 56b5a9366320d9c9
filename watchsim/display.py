"""Display driver glue: refresh scrolling, buffer flushing and touch input."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Any, Optional

HOR_RES = 240
VER_RES = 240
TOTAL_NB_LINES = 320
VISIBLE_NB_LINES = 240

_UINT16 = 0x10000

# Direction codes handed to the graphics library when a full refresh starts.
_DIRECTION_CODES = {
    "DOWN": 1,
    "RIGHT": 2,
    "LEFT": 3,
    "LEFT_ANIM": 4,
    "RIGHT_ANIM": 5,
}


class FullRefreshDirection(enum.Enum):
    """Direction in which a full-screen refresh slides the new screen in."""

    NONE = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    LEFT_ANIM = enum.auto()
    RIGHT_ANIM = enum.auto()


@dataclass(frozen=True)
class Area:
    """Inclusive rectangle of screen coordinates."""

    x1: int
    y1: int
    x2: int
    y2: int

    def __post_init__(self) -> None:
        if min(self.x1, self.y1) < 0:
            raise ValueError(f"negative coordinate in {self}")
        if self.x2 < self.x1 or self.y2 < self.y1:
            raise ValueError(f"empty area {self}")

    @property
    def width(self) -> int:
        return self.x2 - self.x1 + 1

    @property
    def height(self) -> int:
        return self.y2 - self.y1 + 1


@dataclass(frozen=True)
class DrawCall:
    """One block of pixels sent to the screen.

    ``pixel_offset`` is where the block starts in the source pixel buffer.
    """

    x: int
    y: int
    width: int
    height: int
    pixel_offset: int = 0

    @property
    def size(self) -> int:
        """Number of bytes in the block at two bytes per pixel."""
        return self.width * self.height * 2


@dataclass(frozen=True)
class TouchState:
    """Last touch point and whether the panel is pressed."""

    x: int
    y: int
    pressed: bool


@dataclass
class DisplayDriver:
    """Turns graphics-library flushes into draw calls on the simulated screen."""

    lcd: Optional[Any] = None
    touch_panel: Optional[Any] = None
    frame_delay: float = 0.003

    full_refresh: bool = field(default=False, init=False)
    scroll_direction: FullRefreshDirection = field(default=FullRefreshDirection.NONE, init=False)
    disp_direction: int = field(default=0, init=False)
    write_offset: int = field(default=0, init=False)
    scroll_offset: int = field(default=0, init=False)
    draw_calls: list[DrawCall] = field(default_factory=list, init=False)
    tap_x: int = field(default=0, init=False)
    tap_y: int = field(default=0, init=False)
    tapped: bool = field(default=False, init=False)

    def set_full_refresh(self, direction: FullRefreshDirection) -> None:
        """Request a full refresh; the direction sticks until the slide ends."""
        direction = FullRefreshDirection(direction)
        if self.scroll_direction is FullRefreshDirection.NONE:
            self.scroll_direction = direction
            code = _DIRECTION_CODES.get(direction.name)
            if code is not None:
                self.disp_direction = code
        self.full_refresh = True

    def get_full_refresh(self) -> bool:
        """Return whether a full refresh is pending, clearing the request."""
        pending = self.full_refresh
        self.full_refresh = False
        return pending

    def _finish_slide(self) -> None:
        self.scroll_direction = FullRefreshDirection.NONE
        self.disp_direction = 0

    def _scroll_lcd(self) -> None:
        if self.lcd is not None:
            self.lcd.vertical_scroll_start_address(self.scroll_offset)

    def _move_screen(self, height: int) -> list[DrawCall]:
        """Redraw the current screen shifted by ``height`` lines."""
        if height == 0:
            return []
        if height > 0:
            return [DrawCall(0, height, HOR_RES, VER_RES, 0)]
        return [DrawCall(0, 0, HOR_RES, VER_RES, HOR_RES * abs(height))]

    def flush_display(self, area: Area) -> list[DrawCall]:
        """Draw the pixels of ``area``; returns the draw calls made."""
        y1 = (area.y1 + self.write_offset) % TOTAL_NB_LINES
        y2 = (area.y2 + self.write_offset) % TOTAL_NB_LINES
        width = area.width
        height = area.height
        calls: list[DrawCall] = []
        direction = self.scroll_direction

        if direction is FullRefreshDirection.DOWN:
            if area.y2 < VISIBLE_NB_LINES - 1:
                if area.y1 == 0:
                    to_scroll = height * 2
                    self._finish_slide()
                else:
                    to_scroll = height
                if self.scroll_offset >= to_scroll:
                    self.scroll_offset -= to_scroll
                else:
                    to_scroll -= self.scroll_offset
                    self.scroll_offset = (TOTAL_NB_LINES - to_scroll) % _UINT16
                self._scroll_lcd()
            calls.extend(self._move_screen(height))
            y1, y2 = 0, height
        elif direction is FullRefreshDirection.UP:
            if area.y1 > 0:
                if area.y2 == VISIBLE_NB_LINES - 1:
                    self.scroll_offset += height * 2
                    self._finish_slide()
                else:
                    self.scroll_offset += height
                self.scroll_offset %= TOTAL_NB_LINES
                self._scroll_lcd()
            calls.extend(self._move_screen(-height))
            y1, y2 = VER_RES - height, VER_RES
        elif direction in (FullRefreshDirection.LEFT, FullRefreshDirection.LEFT_ANIM):
            if area.x2 == VISIBLE_NB_LINES - 1:
                self._finish_slide()
        elif direction in (FullRefreshDirection.RIGHT, FullRefreshDirection.RIGHT_ANIM):
            if area.x1 == 0:
                self._finish_slide()

        if y2 < y1:
            first = TOTAL_NB_LINES - y1
            if first > 0:
                calls.append(DrawCall(area.x1, y1, width, first, 0))
            pix_offset = (width * first) % _UINT16
            calls.append(DrawCall(area.x1, 0, width, y2 + 1, pix_offset))
        else:
            calls.append(DrawCall(area.x1, y1, width, height, 0))

        self.draw_calls.extend(calls)
        if self.frame_delay > 0:
            time.sleep(self.frame_delay)
        return calls

    def set_new_touch_point(self, x: int, y: int, contact: bool) -> None:
        """Record the latest touch position and contact state."""
        if not (0 <= x < _UINT16 and 0 <= y < _UINT16):
            raise ValueError(f"touch point out of range: ({x}, {y})")
        self.tap_x = x
        self.tap_y = y
        self.tapped = bool(contact)

    def get_touchpad_info(self) -> TouchState:
        """Current touch point for the input driver."""
        return TouchState(self.tap_x, self.tap_y, self.tapped)