import pytest

from laundry.domain import scoring
from laundry.domain.models import DryingFactors, WeatherObservation


def make_observation(**overrides) -> WeatherObservation:
    payload = {
        "temperature": 30.0,
        "feels_like": 31.0,
        "humidity": 50.0,
        "wind_speed": 2.78,
        "cloudiness": 10.0,
        "description": "few clouds",
        "precipitation": 0.0,
        "timestamp": "2026-03-01T10:00:00Z",
    }
    payload.update(overrides)
    return WeatherObservation(**payload)


def test_sunny_breezy_day_is_excellent():
    result = scoring.calculate_drying_index(make_observation())
    assert result.factors == DryingFactors(
        temperature_factor=100,
        humidity_factor=85,
        wind_factor=100,
        cloudiness_factor=90,
        uv_factor=50,
    )
    assert result.drying_index == 93
    assert result.conditions == "Excellent drying conditions"
    assert result.optimal_for_drying is True
    assert result.recommendations == ("Perfect time to dry laundry outside!",)


def test_cold_humid_calm_day_is_poor():
    observation = make_observation(temperature=10, humidity=90, wind_speed=0, cloudiness=90)
    result = scoring.calculate_drying_index(observation)
    assert result.factors == DryingFactors(
        temperature_factor=40,
        humidity_factor=45,
        wind_factor=20,
        cloudiness_factor=10,
        uv_factor=50,
    )
    assert result.drying_index == 32
    assert result.conditions == "Poor drying conditions"
    assert result.optimal_for_drying is False
    assert list(result.recommendations) == [
        "Temperature is too low. Consider drying indoors with ventilation.",
        "Very high humidity. Drying will be significantly slower.",
        "Very calm conditions. Wind speed is too low for optimal drying.",
    ]


def test_weighted_index_uses_fixed_weights():
    assert scoring.weighted_index(100, 85, 100, 90) == pytest.approx(93.25)
    assert scoring.weighted_index(40, 45, 20, 10) == pytest.approx(32.25)
    assert sum(scoring.WEIGHTS.values()) == pytest.approx(1.0)


def test_uv_factor_is_reported_but_not_weighted():
    result = scoring.calculate_drying_index(make_observation())
    assert result.factors.uv_factor == 50
    assert "uv" not in scoring.WEIGHTS


@pytest.mark.parametrize(
    "raw, label",
    [
        (100, "Excellent drying conditions"),
        (80, "Excellent drying conditions"),
        (79.99, "Good drying conditions"),
        (60, "Good drying conditions"),
        (59.6, "Fair drying conditions"),
        (40, "Fair drying conditions"),
        (39.9, "Poor drying conditions"),
        (20, "Poor drying conditions"),
        (19.99, "Very poor drying conditions"),
        (0, "Very poor drying conditions"),
    ],
)
def test_classify_conditions_thresholds(raw, label):
    assert scoring.classify_conditions(raw) == label


def test_classification_uses_unrounded_index():
    # temp 100, humidity 70, wind 20, cloud 35 -> raw 59.75, rounds to 60
    observation = make_observation(temperature=30, humidity=60, wind_speed=0, cloudiness=65)
    result = scoring.calculate_drying_index(observation)
    assert result.drying_index == 60
    assert result.conditions == "Fair drying conditions"


def test_optimal_flag_uses_unrounded_index():
    # temp 100, humidity 70, wind 100, cloud 0 -> raw 74.5
    result = scoring.calculate_drying_index(make_observation(humidity=60, cloudiness=100))
    assert result.optimal_for_drying is True
    # temp 100, humidity 55, wind 100, cloud 0 -> raw 69.25, rounds to 69
    result = scoring.calculate_drying_index(make_observation(humidity=75, cloudiness=100))
    assert result.drying_index == 69
    assert result.optimal_for_drying is False


def test_optimal_flag_below_seventy_even_when_rounding_up():
    # temp 98, humidity 55, wind 100, cloud 7 -> raw 69.8, rounds to 70
    observation = make_observation(temperature=24.75, humidity=75, cloudiness=93)
    result = scoring.calculate_drying_index(observation)
    assert result.factors.temperature_factor == 98
    assert result.drying_index == 70
    assert result.optimal_for_drying is False


def test_missing_precipitation_counts_as_dry():
    result = scoring.calculate_drying_index(make_observation(precipitation=None))
    assert "Rain or precipitation expected. Consider indoor drying." not in result.recommendations


def test_result_to_dict_keeps_contract_names():
    payload = scoring.calculate_drying_index(make_observation()).to_dict()
    assert set(payload) == {"drying_index", "conditions", "recommendations", "optimal_for_drying", "factors"}
    assert set(payload["factors"]) == {
        "temperature_factor",
        "humidity_factor",
        "wind_factor",
        "cloudiness_factor",
        "uv_factor",
    }
    assert isinstance(payload["recommendations"], list)


def test_repeated_calls_are_identical():
    observation = make_observation(temperature=17.3, humidity=66.6, wind_speed=7.1, cloudiness=42)
    first = scoring.calculate_drying_index(observation)
    second = scoring.calculate_drying_index(observation)
    assert first == second
