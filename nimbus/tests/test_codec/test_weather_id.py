"""Tests for the packed weather id codec."""

import pytest

from nimbus.codec import weather_id
from nimbus.codec.conditions import SHOWER, THUNDER, ScaleId, WeatherCondition
from nimbus.errors import InvalidArgument
from nimbus.models.forecast import PrecipitationForm


class TestEncodeDecode:
    def test_heavy_rain_and_thunder_layout(self):
        wid = weather_id.encode(WeatherCondition.RAIN, 2, ScaleId.PRECIPITATION, THUNDER)
        assert wid == 22203

        parts = weather_id.decode(22203)
        assert parts.base == 3
        assert parts.scale_position == 2
        assert parts.scale_id == 2
        assert parts.shower_thunder == 2

    def test_defaults_encode_base_only(self):
        assert weather_id.encode(WeatherCondition.FOG) == 8

    def test_round_trip_over_every_field_combination(self):
        for base in range(100):
            for position in range(4):
                for scale in range(3):
                    for flags in range(4):
                        wid = weather_id.encode(base, position, scale, flags)
                        assert weather_id.decode(wid) == (base, position, scale, flags)

    @pytest.mark.parametrize(
        "args",
        [(100,), (-1,), (3, 4, 2), (3, 0, 3), (3, 0, 0, 4), (3, -1)],
    )
    def test_out_of_range_fields_rejected(self, args):
        with pytest.raises(InvalidArgument):
            weather_id.encode(*args)

    def test_negative_id_rejected(self):
        with pytest.raises(InvalidArgument):
            weather_id.decode(-3)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            weather_id.encode(100)


class TestPrecipitation:
    @pytest.mark.parametrize("base", range(2, 8))
    def test_precipitation_bases(self, base):
        assert weather_id.is_precipitation(base)
        assert weather_id.is_precipitation(base + 22200)

    @pytest.mark.parametrize("wid", [0, 1, 1301, 8, 9, 17, 19, 10019])
    def test_non_precipitation(self, wid):
        assert not weather_id.is_precipitation(wid)
        assert weather_id.get_intensity(wid) == 0.0

    @pytest.mark.parametrize(
        "wid,expected",
        [
            (3, 0.5),  # unscaled rain
            (10003, 0.5),
            (2003, 0.1),
            (2103, 0.3),
            (2203, 0.8),
            (2303, 1.0),
            (22206, 0.8),
        ],
    )
    def test_intensity_steps(self, wid, expected):
        assert weather_id.get_intensity(wid) == pytest.approx(expected)

    def test_precipitation_iff_base_in_range_over_all_ids(self):
        for wid in range(40000):
            assert weather_id.is_precipitation(wid) == (wid % 100 in range(2, 8)), wid

    def test_intensity_never_decreases_along_precipitation_scale(self):
        for base in range(100):
            for flags in range(4):
                steps = [
                    weather_id.get_intensity(
                        weather_id.encode(base, position, ScaleId.PRECIPITATION, flags)
                    )
                    for position in range(4)
                ]
                assert steps == sorted(steps), (base, flags)

    def test_unscaled_precipitation_is_half_intensity(self):
        for base in range(2, 8):
            for flags in range(4):
                assert weather_id.get_intensity(weather_id.encode(base, 0, 0, flags)) == 0.5

    @pytest.mark.parametrize(
        "wid,form",
        [
            (3, PrecipitationForm.RAIN),
            (2, PrecipitationForm.RAIN),
            (4, PrecipitationForm.RAIN),
            (2105, PrecipitationForm.RAIN),
            (12106, PrecipitationForm.SNOW),
            (7, PrecipitationForm.RAIN_AND_SNOW),
        ],
    )
    def test_form(self, wid, form):
        assert weather_id.get_form(wid) == form

    def test_form_of_dry_condition_rejected(self):
        with pytest.raises(InvalidArgument):
            weather_id.get_form(1301)


class TestFlags:
    def test_thunder_and_shower_bits(self):
        both = weather_id.encode(WeatherCondition.RAIN, 0, 0, SHOWER | THUNDER)
        assert weather_id.has_thunder(both)
        assert weather_id.is_shower_variant(both)

        assert weather_id.has_thunder(20003)
        assert not weather_id.is_shower_variant(20003)
        assert weather_id.is_shower_variant(10003)
        assert not weather_id.has_thunder(10003)
        assert not weather_id.has_thunder(3)


class TestDescribe:
    @pytest.mark.parametrize(
        "wid,text",
        [
            (0, "clear sky"),
            (1101, "scattered clouds"),
            (1301, "overcast clouds"),
            (22203, "heavy rain and thunder"),
            (3, "rain"),
            (12106, "light snow showers"),
            (32106, "light snow and thunder showers"),
            (8, "fog"),
        ],
    )
    def test_text(self, wid, text):
        assert weather_id.describe(wid) == text

    def test_unknown_base_rejected(self):
        with pytest.raises(InvalidArgument):
            weather_id.describe(18)
