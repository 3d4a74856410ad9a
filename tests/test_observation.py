"""
Tests for observation normalization and validity classification.
"""

import math
from datetime import datetime, timezone

import pytest

from weatherlog.models.observation import Observation
from weatherlog.models.wigos import WigosStationIdentifier

NAN = float("nan")
INF = float("inf")


@pytest.fixture
def station():
    return WigosStationIdentifier.parse("0-20000-0-02126")


@pytest.fixture
def timestamp():
    return datetime(2025, 8, 7, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def observe(station, timestamp):
    """Build an observation for the test station and time."""
    def _observe(temperature, humidity):
        return Observation(
            station_id=station,
            timestamp=timestamp,
            temperature=temperature,
            humidity=humidity,
        )
    return _observe


def test_valid_observation(observe, station):
    obs = observe(22.5, 58.3)

    assert obs.temperature == 22.5
    assert obs.humidity == 58.3
    assert obs.station_id is station
    assert obs.is_valid()
    assert not obs.is_partial()
    assert not obs.is_invalid()


@pytest.mark.parametrize("temperature", [-100.0, 70.0, 0.0, -100, 70])
def test_temperature_range_is_inclusive(observe, temperature):
    assert observe(temperature, 50.0).temperature == temperature


@pytest.mark.parametrize("temperature", [200.0, 70.01, -100.1, INF, -INF])
def test_out_of_range_temperature_becomes_nan(observe, temperature):
    obs = observe(temperature, 60.1)

    assert math.isnan(obs.temperature)
    assert obs.humidity == 60.1
    assert obs.is_partial()


def test_nan_temperature_is_partial(observe):
    obs = observe(NAN, 60.1)

    assert math.isnan(obs.temperature)
    assert obs.is_partial()


def test_nan_humidity_keeps_temperature(observe):
    """Test that a NaN humidity is not treated as out of range."""
    obs = observe(22.5, NAN)

    assert obs.temperature == 22.5
    assert math.isnan(obs.humidity)
    assert obs.is_partial()


@pytest.mark.parametrize("humidity", [100.5, -0.1, INF])
def test_out_of_range_humidity_invalidates_temperature(observe, humidity):
    """Test that bad humidity replaces the temperature, not the humidity."""
    obs = observe(22.5, humidity)

    assert math.isnan(obs.temperature)
    assert obs.humidity == humidity
    assert obs.is_partial()


@pytest.mark.parametrize("humidity", [0.0, 100.0])
def test_humidity_range_is_inclusive(observe, humidity):
    assert observe(22.5, humidity).is_valid()


def test_both_nan_is_invalid(observe):
    obs = observe(NAN, NAN)

    assert obs.is_invalid()
    assert not obs.is_partial()
    assert not obs.is_valid()


@pytest.mark.parametrize("temperature,humidity", [
    (22.5, 58.3),
    (NAN, 58.3),
    (22.5, NAN),
    (NAN, NAN),
    (500.0, 500.0),
    (-500.0, NAN),
])
def test_exactly_one_class_applies(observe, temperature, humidity):
    obs = observe(temperature, humidity)
    flags = [obs.is_valid(), obs.is_partial(), obs.is_invalid()]
    assert flags.count(True) == 1


def test_missing_station_rejected(timestamp):
    with pytest.raises(ValueError):
        Observation(station_id=None, timestamp=timestamp, temperature=1.0, humidity=2.0)


def test_missing_timestamp_rejected(station):
    with pytest.raises(ValueError):
        Observation(station_id=station, timestamp=None, temperature=1.0, humidity=2.0)


def test_naive_timestamp_rejected(station):
    """Test that the timestamp must be an absolute instant."""
    with pytest.raises(ValueError):
        Observation(
            station_id=station,
            timestamp=datetime(2025, 8, 7, 10, 0),
            temperature=1.0,
            humidity=2.0,
        )
