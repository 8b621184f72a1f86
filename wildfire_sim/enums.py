"""Enumerations shared across the simulation."""

from __future__ import annotations

from enum import IntEnum


class TimeOfDay(IntEnum):
    MIDNIGHT = 0
    NOON = 1
    SUNRISE = 2
    SUNSET = 3
    MOONRISE = 4
    MOONSET = 5
    DAYLIGHT = 6
    TWILIGHT = 7
    DUSK = 8
    HIGH_NOON = 9
    NIGHTFALL = 10
    START_OF_BUSINESS = 11
    CLOSE_OF_BUSINESS = 12


class WeatherCondition(IntEnum):
    CLEAR = 0
    OVERCAST = 1
    CLOUDY = 2
    FOG = 3
    DENSE_FOG = 4
    RAIN = 5
    THUNDERSTORM = 6


class ClimateSeason(IntEnum):
    EARLY_WINTER = 0
    MID_WINTER = 1
    LATE_WINTER = 2
    EARLY_SPRING = 3
    LATE_SPRING = 4
    EARLY_SUMMER = 5
    MID_SUMMER = 6
    LATE_SUMMER = 7
    EARLY_AUTUMN = 8
    MID_AUTUMN = 9
    LATE_AUTUMN = 10


class AtmosphericStability(IntEnum):
    STABLE = 0
    UNSTABLE = 1
    CONDITIONAL = 2


class MessageAlertType(IntEnum):
    NONE = 0
    NOTICE = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4


_SCHEDULE_NAMES = {
    0: "California (3-on, 4-off)",
    1: "3-on 4-off Alternating",
    2: "24/48 (Kelly)",
}


class ScheduleType(IntEnum):
    CALIFORNIA = 0
    ALTERNATING = 1
    KELLY = 2

    @property
    def display_name(self) -> str:
        return _SCHEDULE_NAMES[self.value]