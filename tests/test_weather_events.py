import pytest

from watchsim.weather_events import (
    AirQuality,
    Clouds,
    EventType,
    Humidity,
    InvalidWeatherEvent,
    Location,
    Obscuration,
    ObscurationType,
    Precipitation,
    PrecipitationType,
    Pressure,
    Special,
    SpecialType,
    Temperature,
    TimelineEvent,
    Wind,
    decode_event,
)


def header(event_type, timestamp=1000, expires=60):
    return {"Timestamp": timestamp, "Expires": expires, "EventType": int(event_type)}


def test_is_still_valid_boundaries():
    event = TimelineEvent(timestamp=100, expires=50)
    assert event.is_still_valid(150) is True
    assert event.is_still_valid(151) is False
    assert event.is_still_valid(0) is True


def test_bare_header_has_no_event_type():
    assert TimelineEvent().event_type is None
    assert TimelineEvent().timestamp == 0


def test_decode_clouds():
    event = decode_event({**header(EventType.CLOUDS), "Amount": 42})
    assert isinstance(event, Clouds)
    assert event.event_type is EventType.CLOUDS
    assert (event.timestamp, event.expires, event.amount) == (1000, 60, 42)


def test_decode_temperature():
    event = decode_event({**header(EventType.TEMPERATURE), "Temperature": -500, "DewPoint": 1200})
    assert isinstance(event, Temperature)
    assert event.temperature == -500
    assert event.dew_point == 1200


def test_decode_air_quality():
    event = decode_event({**header(EventType.AIR_QUALITY), "Polluter": "NO2", "Amount": 4294967295})
    assert isinstance(event, AirQuality)
    assert event.polluter == "NO2"
    assert event.amount == 4294967295


def test_air_quality_requires_polluter():
    with pytest.raises(InvalidWeatherEvent):
        decode_event({**header(EventType.AIR_QUALITY), "Polluter": "", "Amount": 1})
    with pytest.raises(InvalidWeatherEvent):
        decode_event({**header(EventType.AIR_QUALITY), "Amount": 1})


def test_decode_obscuration_and_precipitation():
    obscuration = decode_event({**header(EventType.OBSCURATION), "Type": int(ObscurationType.FOG), "Amount": 65535})
    assert isinstance(obscuration, Obscuration)
    assert obscuration.type is ObscurationType.FOG
    assert obscuration.amount == 65535

    rain = decode_event({**header(EventType.PRECIPITATION), "Type": int(PrecipitationType.SNOW), "Amount": 7})
    assert isinstance(rain, Precipitation)
    assert rain.type is PrecipitationType.SNOW
    assert rain.amount == 7


def test_type_out_of_range_rejected():
    with pytest.raises(InvalidWeatherEvent):
        decode_event({**header(EventType.OBSCURATION), "Type": len(ObscurationType), "Amount": 1})
    with pytest.raises(InvalidWeatherEvent):
        decode_event({**header(EventType.SPECIAL), "Type": -1})


def test_decode_special():
    event = decode_event({**header(EventType.SPECIAL), "Type": int(SpecialType.TORNADO)})
    assert isinstance(event, Special)
    assert event.type is SpecialType.TORNADO


def test_wind_max_speed_follows_min_key():
    event = decode_event(
        {**header(EventType.WIND), "SpeedMin": 10, "SpeedMax": 20, "DirectionMin": 30, "DirectionMax": 40}
    )
    assert isinstance(event, Wind)
    assert event.speed_min == 10
    assert event.speed_max == event.speed_min
    assert (event.direction_min, event.direction_max) == (30, 40)


def test_pressure_upper_bound_exclusive():
    assert decode_event({**header(EventType.PRESSURE), "Pressure": 65534}).pressure == 65534
    assert isinstance(decode_event({**header(EventType.PRESSURE), "Pressure": 1013}), Pressure)
    with pytest.raises(InvalidWeatherEvent):
        decode_event({**header(EventType.PRESSURE), "Pressure": 65535})


def test_humidity_range():
    event = decode_event({**header(EventType.HUMIDITY), "Humidity": 80})
    assert isinstance(event, Humidity)
    assert event.humidity == 80
    with pytest.raises(InvalidWeatherEvent):
        decode_event({**header(EventType.HUMIDITY), "Humidity": 255})


def test_decode_location():
    event = decode_event(
        {
            **header(EventType.LOCATION),
            "Location": "Testville",
            "Altitude": 120,
            "Latitude": 5,
            "Longitude": 9,
        }
    )
    assert isinstance(event, Location)
    assert event.location == "Testville"
    assert event.altitude == 120
    assert event.latitude == 9


def test_location_altitude_upper_bound_exclusive():
    with pytest.raises(InvalidWeatherEvent):
        decode_event({**header(EventType.LOCATION), "Location": "X", "Altitude": 32767})


def test_missing_optional_integer_reads_zero():
    event = decode_event(header(EventType.CLOUDS))
    assert event.amount == 0


@pytest.mark.parametrize("key", ["Timestamp", "Expires", "EventType"])
def test_header_fields_required(key):
    fields = {**header(EventType.CLOUDS), "Amount": 1}
    del fields[key]
    with pytest.raises(InvalidWeatherEvent):
        decode_event(fields)


@pytest.mark.parametrize("expires", [-1, 4294967296])
def test_expires_range(expires):
    with pytest.raises(InvalidWeatherEvent):
        decode_event({**header(EventType.CLOUDS, expires=expires), "Amount": 1})


def test_unknown_event_type_rejected():
    with pytest.raises(InvalidWeatherEvent):
        decode_event({"Timestamp": 0, "Expires": 0, "EventType": len(EventType)})


def test_non_integer_value_rejected():
    with pytest.raises(InvalidWeatherEvent):
        decode_event({**header(EventType.CLOUDS), "Amount": "many"})
    with pytest.raises(InvalidWeatherEvent):
        decode_event({**header(EventType.CLOUDS), "Amount": True})


def test_non_mapping_rejected():
    with pytest.raises(InvalidWeatherEvent):
        decode_event([1, 2, 3])


def test_decoded_event_validity_uses_header():
    event = decode_event({**header(EventType.CLOUDS, timestamp=500, expires=10), "Amount": 3})
    assert event.is_still_valid(510)
    assert not event.is_still_valid(511)