# watchsim

Pure-Python models of the controllers, phone-fed data services and display
logic of a small smartwatch. It lets you drive a watch simulation on a
desktop machine and test application code without hardware.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `watchsim.brightness`: `BrightnessController` holds a `BrightnessLevel`
  (`OFF`, `LOW`, `MEDIUM`, `HIGH`; it starts at `HIGH`). `lower()` and
  `higher()` move one level and stop at the ends. `step()` cycles
  `LOW -> MEDIUM -> HIGH -> LOW` and leaves `OFF` alone. `backup()` and
  `restore()` save and return to a level. `label()` gives the level's name,
  such as `"Medium"`.
- `watchsim.firmware`: `FirmwareValidator`. `is_validated()` is always
  `True` in the simulator, so `validate()` writes nothing. `reset()` sets
  `reset_requested`.
- `watchsim.heartrate`: `HeartRateController` with a `HeartRateState` and
  the latest `heart_rate` (0–255). `start()` and `stop()` change the state
  and send a `HeartRateMessage` to the task attached with
  `set_heart_rate_task()`. Any object with a `push_message(message)` method
  can serve as that task. Without a task, both calls do nothing.
  `update(new_state, heart_rate)` records a reading and raises `ValueError`
  when the rate is out of range.
- `watchsim.motion`: `MotionController`.
  - `update(x, y, z, nb_steps)` stores a sample, wrapping the axes to
    16-bit values, and adds step increases to `trip_steps`. `reset_trip()`
    zeroes that count.
  - `should_raise_wake(is_sleeping)` detects a wrist raise.
  - `should_shake_wake()` always returns `False`.
  - `init(device_type)` records the `MotionDeviceType`.
- `watchsim.battery`: `Battery` with voltage, percentage, power and
  charging flags.
  - `read_power_state()` sets `is_full` when power is present and the
    battery is not charging.
  - `measure_voltage()` refreshes that state and marks a reading as
    started.
  - The `charging` property is true only while charging and not yet full.
- `watchsim.navigation`: `NavigationService` holding the turn-by-turn
  `flag`, `narrative`, `man_dist` and `progress`.
- `watchsim.weather_events`: the weather timeline events.
  - Event classes: `AirQuality`, `Obscuration`, `Precipitation`, `Wind`,
    `Temperature`, `Special`, `Pressure`, `Location`, `Clouds` and
    `Humidity`. They share the base `TimelineEvent`, which carries
    `timestamp`, `expires` and `is_still_valid(timestamp)`. `EventType`
    names the kinds.
  - `decode_event(fields)` builds an event from a map with keys such as
    `"Timestamp"`, `"Expires"`, `"EventType"` and `"Temperature"`. It checks
    every value's range and raises `InvalidWeatherEvent` (a `ValueError`)
    on bad input.
  - Two decoding rules to note: a `Wind` event takes its maximum speed from
    the `"SpeedMin"` key as well, and a `Location` event stores the decoded
    longitude in its `latitude` field.
- `watchsim.weather`: `WeatherService` keeps a timeline of events.
  - `on_command(conn_handle, attr_handle, ctxt)` decodes a map, adds the
    event and tidies the timeline.
  - `tidy_timeline()` drops expired events and sorts the rest newest
    first.
  - `get_current(event_type)` returns the first valid event of a kind, or
    `None`.
  - `get_today_max_temp()` and `get_today_min_temp()` return today's
    extremes, or `-32768` when there is no data.
  - Also available: `add_event_to_timeline()`, `timeline_length()` and
    `has_timeline_event_of_type()`.
  - The clock comes from any object with a `current_date_time()` method
    returning a `datetime`. Naive datetimes are taken as UTC.
- `watchsim.display`: `DisplayDriver` implements the refresh-scrolling and
  flushing logic of a 240×240 screen.
  - `set_full_refresh(direction)` takes a `FullRefreshDirection`.
    `get_full_refresh()` reads and clears the pending request.
  - `flush_display(area)` takes an `Area` and returns the `DrawCall`s
    made. It also appends them to `draw_calls`.
  - If an `lcd` object is given, its `vertical_scroll_start_address()` is
    called when the screen scrolls.
  - Each flush sleeps for `frame_delay` seconds (default 0.003). Set it to
    `0` to skip the pause.
  - Touch input goes in through `set_new_touch_point(x, y, contact)` and
    comes back from `get_touchpad_info()` as a `TouchState`.
- `watchsim.missing`: `screen_label(app)` gives the label shown for an
  `App` that has no screen of its own. Anything unknown gets
  `"unkown screen"`.

## Example

```python
from datetime import datetime

from watchsim.brightness import BrightnessController, BrightnessLevel
from watchsim.weather import WeatherService
from watchsim.weather_events import EventType

brightness = BrightnessController()
brightness.lower()
assert brightness.level is BrightnessLevel.MEDIUM
print(brightness.label())  # "Medium"


class Clock:
    def current_date_time(self):
        return datetime(2024, 5, 1, 12, 0, 0)


weather = WeatherService(system=None, date_time_controller=Clock())
weather.on_command(0, 0, {
    "Timestamp": 1714564800,
    "Expires": 3600,
    "EventType": int(EventType.CLOUDS),
    "Amount": 40,
})
print(weather.get_current(EventType.CLOUDS).amount)  # 40
```

## What the package does not do

- It has no Bluetooth stack and no object that owns and starts the
  services. The navigation and weather services only hold data that you
  hand them directly.
- It offers no music control and no notification or incoming-call
  handling.
- The display driver does not render pixels or open a window. It only
  computes where each block would be drawn.
- There is no command-line program. Everything is used as a library.