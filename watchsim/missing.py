"""Labels for screens of applications the simulator does not provide."""

from __future__ import annotations

import enum
from typing import Any


class App(enum.Enum):
    """Applications and screens of the watch."""

    NONE = enum.auto()
    LAUNCHER = enum.auto()
    CLOCK = enum.auto()
    SYS_INFO = enum.auto()
    FIRMWARE_UPDATE = enum.auto()
    FIRMWARE_VALIDATION = enum.auto()
    NOTIFICATIONS_PREVIEW = enum.auto()
    NOTIFICATIONS = enum.auto()
    TIMER = enum.auto()
    ALARM = enum.auto()
    FLASH_LIGHT = enum.auto()
    BATTERY_INFO = enum.auto()
    MUSIC = enum.auto()
    PAINT = enum.auto()
    PADDLE = enum.auto()
    TWOS = enum.auto()
    HEART_RATE = enum.auto()
    NAVIGATION = enum.auto()
    STOP_WATCH = enum.auto()
    METRONOME = enum.auto()
    MOTION = enum.auto()
    STEPS = enum.auto()
    WEATHER = enum.auto()
    PASS_KEY = enum.auto()
    QUICK_SETTINGS = enum.auto()
    SETTINGS = enum.auto()
    SETTING_WATCH_FACE = enum.auto()
    SETTING_TIME_FORMAT = enum.auto()
    SETTING_DISPLAY = enum.auto()
    SETTING_WAKE_UP = enum.auto()
    SETTING_STEPS = enum.auto()
    SETTING_SET_DATE = enum.auto()
    SETTING_SET_TIME = enum.auto()
    SETTING_CHIMES = enum.auto()
    SETTING_SHAKE_THRESHOLD = enum.auto()
    ERROR = enum.auto()


UNKNOWN_LABEL = "unkown screen"

_LABELS = {
    App.NONE: "None",
    App.LAUNCHER: "Launcher",
    App.CLOCK: "Clock",
    App.SYS_INFO: "SysInfo",
    App.FIRMWARE_UPDATE: "FirmwareUpdate",
    App.FIRMWARE_VALIDATION: "FirmwareValidation",
    App.NOTIFICATIONS_PREVIEW: "NotificationPreview",
    App.NOTIFICATIONS: "Notifications",
    App.TIMER: "Timer",
    App.ALARM: "Alarm",
    App.FLASH_LIGHT: "FlashLight",
    App.BATTERY_INFO: "BatteryInfo",
    App.MUSIC: "Music",
    App.PAINT: "Paint",
    App.PADDLE: "Paddle",
    App.TWOS: "Twos",
    App.HEART_RATE: "HeartRate",
    App.NAVIGATION: "Navigation",
    App.STOP_WATCH: "StopWatch",
    App.METRONOME: "Metronome",
    App.MOTION: "Motion",
    App.STEPS: "Steps",
    App.WEATHER: "Weather",
    App.PASS_KEY: "PassKey",
    App.QUICK_SETTINGS: "QuickSettings",
    App.SETTINGS: "Settings",
    App.SETTING_WATCH_FACE: "SettingWatchFace",
    App.SETTING_TIME_FORMAT: "SettingTimeFormat",
    App.SETTING_DISPLAY: "SettingDisplay",
    App.SETTING_WAKE_UP: "SettingWakeUp",
    App.SETTING_STEPS: "SettingSteps",
    App.SETTING_SET_DATE: "SettingSetDate",
    App.SETTING_SET_TIME: "SettingSetTime",
    App.SETTING_CHIMES: "SettingChimes",
    App.SETTING_SHAKE_THRESHOLD: "SettingThreshold",
    App.ERROR: "Error",
}


def screen_label(app: Any) -> str:
    """Text shown on the placeholder screen for ``app``."""
    return _LABELS.get(app, UNKNOWN_LABEL)