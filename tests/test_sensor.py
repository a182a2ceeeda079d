import pytest

from matrixclock.sensor import (
    DEFAULT_PINGS,
    PULSE_TIMEOUT,
    SR04,
    Level,
    PinMode,
    microseconds_to_centimeters,
)

ECHO = 7
TRIGGER = 8


class FakeIO:
    def __init__(self, durations=()):
        self.durations = list(durations)
        self.calls = []

    def pin_mode(self, pin, mode):
        self.calls.append(("pin_mode", pin, mode))

    def digital_write(self, pin, level):
        self.calls.append(("write", pin, level))

    def delay_microseconds(self, microseconds):
        self.calls.append(("delay_us", microseconds))

    def delay(self, milliseconds):
        self.calls.append(("delay", milliseconds))

    def pulse_in(self, pin, level, timeout):
        self.calls.append(("pulse_in", pin, level, timeout))
        return self.durations.pop(0)

    def pulses(self):
        return [call for call in self.calls if call[0] == "pulse_in"]


def test_constructor_sets_pin_modes():
    io = FakeIO()
    SR04(ECHO, TRIGGER, io)
    assert io.calls == [
        ("pin_mode", ECHO, PinMode.INPUT),
        ("pin_mode", TRIGGER, PinMode.OUTPUT),
    ]


@pytest.mark.parametrize("duration, expected", [(5882, 100), (0, 0)])
def test_microseconds_to_centimeters(duration, expected):
    assert microseconds_to_centimeters(duration) == expected


def test_conversion_is_monotonic():
    values = [microseconds_to_centimeters(d) for d in range(0, 20000, 37)]
    assert values == sorted(values)


def test_distance_trigger_sequence():
    io = FakeIO([5882])
    sensor = SR04(ECHO, TRIGGER, io)
    io.calls.clear()
    assert sensor.distance() == 100
    assert io.calls == [
        ("write", TRIGGER, Level.LOW),
        ("delay_us", 2),
        ("write", TRIGGER, Level.HIGH),
        ("delay_us", 10),
        ("write", TRIGGER, Level.LOW),
        ("delay_us", 2),
        ("pulse_in", ECHO, Level.HIGH, PULSE_TIMEOUT),
        ("delay", 25),
    ]


def test_distance_avg_constant_readings():
    io = FakeIO([5882] * (DEFAULT_PINGS + 2))
    sensor = SR04(ECHO, TRIGGER, io)
    assert sensor.distance_avg() == 100
    assert len(io.pulses()) == DEFAULT_PINGS + 2


def test_distance_avg_discards_extremes():
    io = FakeIO([0] + [5882] * 5 + [58820])
    sensor = SR04(ECHO, TRIGGER, io)
    assert sensor.distance_avg(10, 5) == 100


def test_distance_avg_count_below_one_uses_one():
    io = FakeIO([5882] * 3)
    sensor = SR04(ECHO, TRIGGER, io)
    assert sensor.distance_avg(0, 0) == 100
    assert len(io.pulses()) == 3


def test_ping_updates_last_distance():
    io = FakeIO([5882])
    sensor = SR04(ECHO, TRIGGER, io)
    assert sensor.last_distance == 999
    sensor.ping()
    assert sensor.last_distance == 100