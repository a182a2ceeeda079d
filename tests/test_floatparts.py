import pytest

from matrixclock.floatparts import FloatParts, normalize


def rebuild(parts):
    return (parts.integral + parts.decimal / 10 ** parts.decimal_places) * 10.0 ** parts.exponent


def test_pi_digits():
    parts = FloatParts.from_float(3.1415927)
    assert f"{parts.integral}.{parts.decimal}" == "3.1415927"
    assert parts.exponent == 0


def test_whole_number_has_no_decimals():
    parts = FloatParts.from_float(42.0)
    assert (parts.integral, parts.decimal, parts.decimal_places) == (42, 0, 0)


def test_zero():
    assert FloatParts.from_float(0.0) == FloatParts(0, 0, 0, 0)


def test_large_value_uses_exponent():
    parts = FloatParts.from_float(1e10)
    assert parts.exponent == 10
    assert parts.integral == 1


def test_small_value_uses_negative_exponent():
    parts = FloatParts.from_float(1e-6)
    assert parts.exponent == -6
    assert parts.integral == 1


@pytest.mark.parametrize(
    "value", [3.1415927, 123.45, 0.5, 9.9999999999, 296.15, 1e10, 9.99999999999e10, 2.5e-7, 1e300]
)
def test_double_parts_rebuild_value(value):
    assert rebuild(FloatParts.from_float(value)) == pytest.approx(value, rel=1e-9)


@pytest.mark.parametrize("value", [3.1415927, 123.45, 0.25, 1e20, 3e-9])
def test_single_parts_rebuild_value(value):
    parts = FloatParts.from_float(value, double=False)
    assert parts.decimal_places <= 6
    assert rebuild(parts) == pytest.approx(value, rel=1e-6)


@pytest.mark.parametrize("value", [3.1415927, 123.45, 0.1, 7e12, 4e-8])
def test_decimal_has_no_trailing_zero(value):
    parts = FloatParts.from_float(value)
    assert parts.decimal < 10 ** parts.decimal_places
    assert parts.decimal_places == 0 or parts.decimal % 10 != 0


@pytest.mark.parametrize("value", [1e7, 123456789.0, 1e-5, 3.3e-100, 5e200])
def test_normalize_brings_value_into_range(value):
    scaled, exponent = normalize(value)
    assert 1 <= scaled < 10 or scaled == pytest.approx(10, rel=1e-12)
    assert scaled * 10.0 ** exponent == pytest.approx(value, rel=1e-9)


def test_normalize_leaves_ordinary_values():
    assert normalize(123.45) == (123.45, 0)


@pytest.mark.parametrize("value", [-1.0, float("nan"), float("inf")])
def test_invalid_values_rejected(value):
    with pytest.raises(ValueError):
        FloatParts.from_float(value)