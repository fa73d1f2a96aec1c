"""Tests for provider payload parsing."""

from datetime import UTC, date, datetime

import pytest

from nimbus.errors import MissingConditionData
from nimbus.models.met_no import parse_sun_moon, parse_timeseries
from nimbus.models.open_weather import parse_one_call


class TestMetNoTimeseries:
    def test_records_sorted_by_time(self, met_no_forecast: dict):
        records = parse_timeseries(met_no_forecast)
        assert [r.time for r in records] == [
            datetime(2026, 3, 9, 23, tzinfo=UTC),
            datetime(2026, 3, 10, 5, tzinfo=UTC),
            datetime(2026, 3, 10, 17, tzinfo=UTC),
            datetime(2026, 3, 10, 23, tzinfo=UTC),
        ]

    def test_instant_details(self, met_no_forecast: dict):
        instant = parse_timeseries(met_no_forecast)[1].instant
        assert instant.pressure == 1008.5
        assert instant.temperature == 0.5
        assert instant.fog == 25.0
        assert instant.wind_degrees == 200.0
        assert instant.code is None

    def test_windows(self, met_no_forecast: dict):
        rec = parse_timeseries(met_no_forecast)[1]
        assert rec.next_1h.code == "lightrain"
        assert rec.next_1h.pop == 60.0
        assert rec.next_6h.hours == 6
        assert rec.next_6h.temperature_min == 1.0
        assert rec.next_6h.precipitation == 3.2
        assert rec.next_12h.code == "heavyrain"
        assert rec.next_12h.precipitation is None

    def test_missing_windows_are_none(self, met_no_forecast: dict):
        last = parse_timeseries(met_no_forecast)[-1]
        assert last.next_1h is None
        assert [w.hours for w in last.windows] == [6, 12]

    def test_empty_body(self):
        assert parse_timeseries({}) == []


class TestMetNoSunMoon:
    def test_indexed_by_date(self, met_no_sun_moon: dict):
        days = parse_sun_moon(met_no_sun_moon)
        first = days[date(2026, 3, 10)]

        assert first.sunrise == int(datetime.fromisoformat("2026-03-10T06:58:00+01:00").timestamp())
        assert first.sunset == int(datetime.fromisoformat("2026-03-10T18:10:00+01:00").timestamp())
        assert first.moon_phase_fraction == pytest.approx(0.702)
        assert set(days) == {date(2026, 3, 10), date(2026, 3, 11)}

    def test_polar_day_has_no_sun_events(self):
        raw = {"location": {"time": [{"date": "2026-06-21", "moonposition": {"phase": "50.0"}}]}}
        day = parse_sun_moon(raw)[date(2026, 6, 21)]
        assert day.sunrise is None
        assert day.sunset is None
        assert day.moon_phase_fraction == 0.5


class TestOpenWeatherOneCall:
    def test_hourly(self, open_weather_one_call: dict):
        payload = parse_one_call(open_weather_one_call)
        wet = payload.hourly[1]

        assert payload.timezone == "Europe/Oslo"
        assert wet.datetime == 1773100800
        assert wet.weather_code == 502
        assert wet.rain_1h == 4.2
        assert wet.snow_1h == 0.3
        assert payload.hourly[0].rain_1h == 0.0

    def test_daily(self, open_weather_one_call: dict):
        first, second = parse_one_call(open_weather_one_call).daily

        assert first.moon_phase == 0.7
        assert first.min_temperature == -3.0
        assert first.max_temperature == 5.0
        assert first.rain == 12.5
        assert first.weather_code == 202
        assert second.snow == 0.5
        assert second.rain == 0.0

    def test_entry_without_condition_rejected(self, open_weather_one_call: dict):
        open_weather_one_call["hourly"][0]["weather"] = []
        with pytest.raises(MissingConditionData) as exc_info:
            parse_one_call(open_weather_one_call)
        assert exc_info.value.when == "1773097200"
