"""Weather timeline kept on the watch and queries over it."""

from __future__ import annotations

import calendar
from datetime import datetime
from typing import Any, Iterator, Mapping, Optional, Protocol

from .weather_events import EventType, Temperature, TimelineEvent, decode_event

NO_TEMPERATURE = -32768

_UINT64 = 2**64


class DateTimeSource(Protocol):
    def current_date_time(self) -> datetime: ...


class WeatherService:
    """Timeline of weather events received from the phone."""

    def __init__(self, system: Any, date_time_controller: DateTimeSource) -> None:
        self.system = system
        self.date_time_controller = date_time_controller
        self.timeline: list[TimelineEvent] = []
        self.initialized = False

    def init(self) -> None:
        """Register the service so the phone can reach it."""
        self.initialized = True

    def on_command(self, conn_handle: int, attr_handle: int, ctxt: Optional[Mapping[str, Any]]) -> int:
        """Handle a write of one decoded event map; returns the GATT status 0.

        A malformed map raises :class:`InvalidWeatherEvent`. ``None`` means
        there is nothing to store.
        """
        if ctxt is None:
            return 0
        event = decode_event(ctxt)
        self.add_event_to_timeline(event)
        self.tidy_timeline()
        return 0

    def _now(self) -> datetime:
        return self.date_time_controller.current_date_time()

    @staticmethod
    def _unix(moment: datetime) -> int:
        # Naive datetimes are taken to be UTC.
        return calendar.timegm(moment.utctimetuple())

    def _current_timestamp(self) -> int:
        return self._unix(self._now())

    def _valid_events(self, event_type: EventType, now: int) -> Iterator[TimelineEvent]:
        return (
            event
            for event in self.timeline
            if event.event_type == event_type and event.is_still_valid(now)
        )

    def get_current(self, event_type: EventType) -> Optional[TimelineEvent]:
        """First still-valid event of ``event_type`` on the timeline, or ``None``."""
        return next(self._valid_events(EventType(event_type), self._current_timestamp()), None)

    def _today_temperatures(self) -> list[int]:
        moment = self._now()
        now = self._unix(moment)
        day_end = (
            now
            - (24 - moment.hour) * 60 * 60
            - (60 - moment.minute) * 60
            - (60 - moment.second)
        ) % _UINT64
        return [
            event.temperature
            for event in self._valid_events(EventType.TEMPERATURE, now)
            if isinstance(event, Temperature)
            and event.timestamp < day_end
            and event.temperature != NO_TEMPERATURE
        ]

    def get_today_max_temp(self) -> int:
        """Highest temperature of the day (Celsius x 100), or -32768 without data."""
        return max(self._today_temperatures(), default=NO_TEMPERATURE)

    def get_today_min_temp(self) -> int:
        """Lowest temperature of the day (Celsius x 100), or -32768 without data."""
        return min(self._today_temperatures(), default=NO_TEMPERATURE)

    def add_event_to_timeline(self, event: TimelineEvent) -> None:
        """Append an event to the timeline."""
        if not isinstance(event, TimelineEvent):
            raise TypeError(f"not a timeline event: {event!r}")
        self.timeline.append(event)

    def timeline_length(self) -> int:
        """Number of events on the timeline."""
        return len(self.timeline)

    def has_timeline_event_of_type(self, event_type: EventType) -> bool:
        """True if a still-valid event of ``event_type`` is on the timeline."""
        now = self._current_timestamp()
        return any(True for _ in self._valid_events(EventType(event_type), now))

    def tidy_timeline(self) -> None:
        """Drop expired events and order the rest newest first."""
        now = self._current_timestamp()
        self.timeline = [event for event in self.timeline if event.is_still_valid(now)]
        self.timeline.sort(key=lambda event: event.timestamp, reverse=True)