"""Tests for the MET Norway symbol code table."""

import pytest

from nimbus.codec import weather_id
from nimbus.errors import UnknownConditionCode
from nimbus.providers import met_no


class TestTranslate:
    @pytest.mark.parametrize(
        "code,expected",
        [
            ("clearsky_day", 0),
            ("fair_night", 0),
            ("partlycloudy_polartwilight", 1101),
            ("cloudy", 1301),
            ("fog", 8),
            ("lightrain", 2103),
            ("rain", 3),
            ("heavyrain", 2203),
            ("heavyrainandthunder", 22203),
            ("rainshowers_day", 10003),
            ("heavysnowshowersandthunder_night", 32206),
            ("lightssleetshowersandthunder_day", 32105),
            ("sleet", 5),
            ("lightsnow", 2106),
        ],
    )
    def test_known_codes(self, code, expected):
        assert met_no.translate(code) == expected

    def test_variants_translate_identically(self):
        for base in ("clearsky", "partlycloudy", "lightrainshowers", "heavysnowshowers"):
            ids = {met_no.translate(f"{base}_{v}") for v in ("day", "night", "polartwilight")}
            assert len(ids) == 1

    def test_every_entry_is_decodable(self):
        for code, wid in met_no.SYMBOL_CODES.items():
            assert weather_id.describe(wid), code

    def test_table_size(self):
        assert len(met_no.SYMBOL_CODES) == 21 * 3 + 20

    @pytest.mark.parametrize(
        "code",
        [
            "heavyrainandthundr",  # typo
            "cloudy_day",  # has no daylight variant
            "clearsky",  # requires one
            "lightsleetshowersandthunder_day",  # MET spells it "lightssleet"
            "",
            None,
        ],
    )
    def test_unknown_codes_raise(self, code):
        with pytest.raises(UnknownConditionCode) as exc_info:
            met_no.translate(code)
        assert exc_info.value.provider == "met_no"
        assert exc_info.value.code == code

    def test_unknown_code_is_lookup_error(self):
        with pytest.raises(LookupError):
            met_no.translate("sunny")

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            met_no.SYMBOL_CODES["sunny"] = 0
