"""Tests for the moon phase transition encoding."""

import pytest

from nimbus.codec import phase_transition
from nimbus.errors import InvalidArgument
from nimbus.models.forecast import MoonPhase


class TestEncode:
    def test_first_day_is_plain(self):
        assert phase_transition.encode(MoonPhase.FULL_MOON) == 4

    def test_unchanged_phase_is_plain(self):
        assert phase_transition.encode(3, 3) == 3
        assert type(phase_transition.encode(MoonPhase.FULL_MOON, 4)) is int

    def test_changed_phase_is_composite(self):
        assert phase_transition.encode(MoonPhase.FIRST_QUARTER, MoonPhase.WAXING_CRESCENT) == 12
        assert phase_transition.encode(MoonPhase.NEW_MOON, MoonPhase.WANING_CRESCENT) == 70

    @pytest.mark.parametrize("today,previous", [(8, -1), (-2, -1), (3, 9), (3, -5)])
    def test_invalid_indices_rejected(self, today, previous):
        with pytest.raises(InvalidArgument):
            phase_transition.encode(today, previous)


class TestDecode:
    def test_plain_value_ignores_sunrise(self):
        assert phase_transition.decode(5, True) == MoonPhase.WANING_GIBBOUS
        assert phase_transition.decode(5, False) == MoonPhase.WANING_GIBBOUS

    def test_composite_depends_on_sunrise(self):
        assert phase_transition.decode(12, True) == MoonPhase.WAXING_CRESCENT
        assert phase_transition.decode(12, False) == MoonPhase.FIRST_QUARTER

    def test_round_trip_for_all_pairs(self):
        for previous in MoonPhase:
            for today in MoonPhase:
                encoded = phase_transition.encode(today, previous)
                assert phase_transition.decode(encoded, False) == today
                if previous not in (today, MoonPhase.NEW_MOON):
                    assert phase_transition.decode(encoded, True) == previous

    def test_leaving_new_moon_collapses_to_plain_index(self):
        encoded = phase_transition.encode(MoonPhase.WAXING_CRESCENT, MoonPhase.NEW_MOON)
        assert encoded == 1
        assert phase_transition.decode(encoded, True) == MoonPhase.WAXING_CRESCENT

    @pytest.mark.parametrize("encoded", [8, 9, 18, 78, 80, 100, -1])
    def test_invalid_values_rejected(self, encoded):
        with pytest.raises(InvalidArgument):
            phase_transition.decode(encoded, False)
