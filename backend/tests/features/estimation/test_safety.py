"""
Tests for safety recommendations.

Start/turnaround times and daylight warnings.
"""

from datetime import date

import pytest

from guidepace.features.estimation import safety as safety_module
from guidepace.features.estimation.safety import (
    get_safety_recommendations,
    get_safety_recommendations_for_location,
    recommendations_for_daylight,
)
from guidepace.services.sun import SunTimes
from guidepace.shared.constants import (
    AlertLevel,
    Season,
    HEADLAMP_WARNING,
    EXCEEDS_DAYLIGHT_WARNING,
    TIGHT_TURNAROUND_WARNING,
)


# =============================================================================
# Seasonal Daylight
# =============================================================================

class TestSeasonalRecommendations:
    """Tests for get_safety_recommendations with the season table."""

    def test_short_summer_route(self):
        """3h in summer: plenty of daylight."""
        result = get_safety_recommendations(3, Season.SUMMER)

        assert result.latest_start_time == "9:00"
        assert result.recommended_start_time == "8:00"
        assert result.turnaround_time == "1:48"
        assert result.daylight_hours == 14
        assert result.daylight_margin == pytest.approx(9)
        assert result.warnings == []
        assert result.alert_level == AlertLevel.SUCCESS

    def test_long_winter_route(self):
        """10h in winter: all three warnings, in order."""
        result = get_safety_recommendations(10, Season.WINTER)

        assert result.latest_start_time == "-4:00"
        assert result.recommended_start_time == "5:00"
        assert result.turnaround_time == "6:00"
        assert result.daylight_margin == pytest.approx(-4)
        assert result.warnings == [
            HEADLAMP_WARNING,
            EXCEEDS_DAYLIGHT_WARNING,
            TIGHT_TURNAROUND_WARNING,
        ]
        assert result.alert_level == AlertLevel.DANGER

    def test_headlamp_and_tight_turnaround(self):
        """12.5h in summer fits the daylight but not the buffer."""
        result = get_safety_recommendations(12.5, Season.SUMMER)

        assert result.latest_start_time == "-1:30"
        assert result.warnings == [HEADLAMP_WARNING, TIGHT_TURNAROUND_WARNING]
        assert result.alert_level == AlertLevel.WARNING

    def test_recommended_start_never_before_5(self):
        result = get_safety_recommendations(6, Season.FALL)
        # latest start 2:00, one hour earlier would be 1:00
        assert result.latest_start_time == "2:00"
        assert result.recommended_start_time == "5:00"

    def test_no_season_means_summer(self):
        assert get_safety_recommendations(5, None) == get_safety_recommendations(5, Season.SUMMER)

    def test_season_string(self):
        assert get_safety_recommendations(5, "spring").daylight_hours == 12

    @pytest.mark.parametrize("season,hours", [
        (Season.SPRING, 12),
        (Season.SUMMER, 14),
        (Season.FALL, 10),
        (Season.WINTER, 8),
    ])
    def test_daylight_table(self, season, hours):
        assert get_safety_recommendations(1, season).daylight_hours == hours


class TestWarningThresholds:
    """Warning boundaries are strict comparisons."""

    def test_exactly_daylight_minus_buffer(self):
        result = recommendations_for_daylight(12, 14)
        assert HEADLAMP_WARNING not in result.warnings

    def test_exactly_daylight(self):
        result = recommendations_for_daylight(10, 10)
        assert HEADLAMP_WARNING in result.warnings
        assert EXCEEDS_DAYLIGHT_WARNING not in result.warnings

    def test_infinite_total(self):
        """An overflowing total still produces recommendations."""
        result = recommendations_for_daylight(float("inf"), 14)

        assert result.latest_start_time == "--:--"
        assert result.turnaround_time == "--:--"
        assert result.recommended_start_time == "5:00"
        assert result.alert_level == AlertLevel.DANGER

    def test_infinite_total_via_season(self):
        result = get_safety_recommendations(float("inf"), Season.WINTER)
        assert len(result.warnings) == 3

    def test_zero_hours(self):
        result = recommendations_for_daylight(0, 14)
        assert result.turnaround_time == "0:00"
        assert result.warnings == []


# =============================================================================
# Location-Based Daylight
# =============================================================================

class TestLocationRecommendations:
    """Tests for get_safety_recommendations_for_location."""

    def test_uses_sun_times(self, monkeypatch):
        monkeypatch.setattr(
            safety_module, "get_sun_times",
            lambda lat, lon, date_=None: SunTimes(sunrise="05:30", sunset="21:30", daylight_hours=16.0),
        )
        result = get_safety_recommendations_for_location(3, 46.5, 7.9, date(2024, 6, 21))

        assert result.daylight_hours == 16.0
        assert result.latest_start_time == "11:00"
        assert result.sunrise == "05:30"
        assert result.sunset == "21:30"

    def test_polar_day_falls_back_to_season(self, monkeypatch):
        def no_sunset(lat, lon, date_=None):
            raise ValueError("Sun never sets")

        monkeypatch.setattr(safety_module, "get_sun_times", no_sunset)
        result = get_safety_recommendations_for_location(
            3, 78.2, 15.6, date(2024, 6, 21), fallback_season=Season.WINTER
        )

        assert result.daylight_hours == 8
        assert result.sunrise is None

    def test_real_alpine_winter_day(self):
        result = get_safety_recommendations_for_location(7, 46.5, 7.9, date(2024, 12, 21))
        assert 8 <= result.daylight_hours <= 9.5
        assert HEADLAMP_WARNING in result.warnings
