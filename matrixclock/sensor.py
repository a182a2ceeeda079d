"""Driver logic for the HC-SR04 ultrasonic distance sensor.

The sensor is triggered by a 10 µs high pulse on its trigger pin and answers
with a high pulse on its echo pin whose length is the time the sound took to
reach an obstacle and come back.  Pin access goes through a ``PinIO`` object
so that the logic can run against real hardware or a simulation.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Protocol

PULSE_TIMEOUT = 150_000
"""Longest echo pulse waited for, in microseconds."""

DEFAULT_DELAY = 10
"""Default pause between averaged measurements, in milliseconds."""

DEFAULT_PINGS = 5
"""Default number of measurements that are averaged."""

MIN_DELAY = 25
"""Pause after every measurement, in milliseconds."""

NO_DISTANCE = 999
"""Distance reported before the first ping."""

_ROUND_TRIP_US_PER_METRE = 5882


class PinMode(Enum):
    INPUT = "input"
    OUTPUT = "output"


class Level(IntEnum):
    LOW = 0
    HIGH = 1


class PinIO(Protocol):
    """Access to the digital pins and timing of a microcontroller."""

    def pin_mode(self, pin: int, mode: PinMode) -> None: ...

    def digital_write(self, pin: int, level: Level) -> None: ...

    def delay_microseconds(self, microseconds: int) -> None: ...

    def delay(self, milliseconds: int) -> None: ...

    def pulse_in(self, pin: int, level: Level, timeout: int) -> int: ...


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def microseconds_to_centimeters(duration: int) -> int:
    """Distance in centimetres for an echo round trip of ``duration`` µs.

    Sound travels about 340 m/s, so 100 cm there and back take 5882 µs.
    """
    return _trunc_div(duration * 100, _ROUND_TRIP_US_PER_METRE)


class SR04:
    """An HC-SR04 sensor wired to an echo pin and a trigger pin."""

    def __init__(self, echo_pin: int, trigger_pin: int, io: PinIO) -> None:
        self.echo_pin = echo_pin
        self.trigger_pin = trigger_pin
        self._io = io
        self._distance = NO_DISTANCE
        io.pin_mode(echo_pin, PinMode.INPUT)
        io.pin_mode(trigger_pin, PinMode.OUTPUT)

    @property
    def last_distance(self) -> int:
        """Distance measured by the latest ``ping``, in centimetres."""
        return self._distance

    def distance(self) -> int:
        """Take one measurement and return it in centimetres."""
        io = self._io
        io.digital_write(self.trigger_pin, Level.LOW)
        io.delay_microseconds(2)
        io.digital_write(self.trigger_pin, Level.HIGH)
        io.delay_microseconds(10)
        io.digital_write(self.trigger_pin, Level.LOW)
        io.delay_microseconds(2)
        duration = io.pulse_in(self.echo_pin, Level.HIGH, PULSE_TIMEOUT)
        result = microseconds_to_centimeters(duration)
        io.delay(MIN_DELAY)
        return result

    def distance_avg(self, wait: int = DEFAULT_DELAY, count: int = DEFAULT_PINGS) -> int:
        """Average ``count`` measurements, discarding the highest and lowest.

        ``count + 2`` measurements are taken in all.  ``wait`` is raised to at
        least 25 ms, the pause every measurement already makes.
        """
        wait = max(wait, MIN_DELAY)
        count = max(count, 1)
        lowest, highest, total = NO_DISTANCE, 0, 0
        for _ in range(count + 2):
            reading = self.distance()
            lowest = min(lowest, reading)
            highest = max(highest, reading)
            total += reading
        total -= highest + lowest
        return _trunc_div(total, count)

    def ping(self) -> None:
        """Measure once and keep the result in ``last_distance``."""
        self._distance = self.distance()