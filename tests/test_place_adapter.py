import json

import pandas as pd
import pytest

from workability.models import NoiseBucket, Place, PowerTier
from workability.place_adapter import (
    load_places_from_csv,
    load_places_from_json,
    noise_bucket,
    parse_flag,
    parse_number,
    parse_place,
    power_tier,
)
from workability.scoring.scorer import score


@pytest.mark.parametrize("value, expected", [
    ("1", True),
    (" Yes ", True),
    ("true", True),
    (True, True),
    (1, True),
    ("0", False),
    ("", False),
    ("false", False),
    (0, False),
    (None, False),
    (float("nan"), False),
    ("maybe", False),
])
def test_parse_flag(value, expected):
    assert parse_flag(value) is expected


@pytest.mark.parametrize("value, expected", [
    (42, 42.0),
    ("42.5", 42.5),
    ("1,200", 1200.0),
    ("30+", 30.0),
    ("18 Mbps", 18.0),
    ("0.3 miles", 0.3),
    (" 7 ", 7.0),
    ("abc", None),
    ("", None),
    (None, None),
    (True, None),
    (float("nan"), None),
    (float("inf"), None),
])
def test_parse_number(value, expected):
    assert parse_number(value) == expected


@pytest.mark.parametrize("text, expected", [
    ("Quiet", NoiseBucket.QUIET),
    ("below average", NoiseBucket.QUIET),
    ("average", NoiseBucket.MODERATE),
    ("Moderate chatter", NoiseBucket.MODERATE),
    ("noisy", NoiseBucket.NOISY),
    ("HIGH", NoiseBucket.NOISY),
    ("", NoiseBucket.UNKNOWN),
    (None, NoiseBucket.UNKNOWN),
])
def test_noise_bucket(text, expected):
    assert noise_bucket(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("range3", PowerTier.ABUNDANT),
    ("good", PowerTier.ABUNDANT),
    ("range2", PowerTier.GOOD),
    ("Range1", PowerTier.LIMITED),
    ("little", PowerTier.LIMITED),
    ("none", PowerTier.NONE),
    (None, PowerTier.NONE),
    ("outlets everywhere", PowerTier.UNKNOWN),
])
def test_power_tier(text, expected):
    assert power_tier(text) == expected


def test_parse_place_normalizes_fields():
    record = {
        "ID": 7,
        "name": "Blue Door Cafe",
        "distance": "0.4",
        "download": "55.2",
        "no_wifi": "0",
        "power": "range2",
        "noise_level": "",
        "noise": "Quiet",
        "type": "coffee",
        "coffee": "1",
        "outdoor_seating": "1",
    }

    place = parse_place(record)

    assert place.id == "7"
    assert place.title == "Blue Door Cafe"
    assert place.distance == 0.4
    assert place.download == 55.2
    assert place.no_wifi is False
    assert place.power_tier == PowerTier.GOOD
    assert place.noise == "Quiet"
    assert place.noise_bucket == NoiseBucket.QUIET
    assert place.coffee and place.outdoor_seating
    assert not place.food and not place.alcohol
    assert place.amenities == ["Coffee", "Outdoor Seating"]
    assert place.raw == record
    assert place.raw is not record


def test_parse_place_title_takes_precedence_over_name():
    assert parse_place({"title": "Library", "name": "Branch"}).title == "Library"


def test_outdoor_seating_requires_literal_one():
    assert parse_place({"outdoor_seating": "yes"}).outdoor_seating is False
    assert parse_place({"outdoor_seating": 1}).outdoor_seating is True


def test_parse_place_returns_place_unchanged():
    place = Place(title="Already parsed")
    assert parse_place(place) is place


def test_parse_place_ignores_non_mappings():
    assert parse_place(["not", "a", "dict"]) == Place()


def test_wifi_speed_falls_back_to_legacy_field():
    assert parse_place({"wifi": "40"}).wifi_speed == 40.0
    assert parse_place({"wifi": "40", "download": 12}).wifi_speed == 12.0


def test_load_places_from_json_envelope(tmp_path):
    path = tmp_path / "places.json"
    path.write_text(json.dumps({
        "meta": {"code": 200},
        "response": [{"ID": 1, "title": "A", "download": 20}, {"ID": 2, "title": "B"}],
    }))

    places = load_places_from_json(str(path))

    assert [p.title for p in places] == ["A", "B"]
    assert places[0].download == 20.0


def test_load_places_from_json_bare_list(tmp_path):
    path = tmp_path / "places.json"
    path.write_text(json.dumps([{"title": "Solo"}]))

    assert [p.title for p in load_places_from_json(str(path))] == ["Solo"]


def test_load_places_from_json_error_status(tmp_path):
    path = tmp_path / "places.json"
    path.write_text(json.dumps({"meta": {"code": 404, "error_type": "NO_RESULTS"}, "response": []}))

    assert load_places_from_json(str(path)) == []


def test_load_places_from_csv(tmp_path):
    path = tmp_path / "places.csv"
    path.write_text(
        "ID,title,distance,download,no_wifi,power,noise,type,coffee,food,outdoor_seating\n"
        "1,Corner Cafe,0.5,25,0,range3,quiet,coffee,1,1,1\n"
        "2,Hub,,,1,,,coworking,,,\n"
    )

    places = load_places_from_csv(str(path))

    assert len(places) == 2
    cafe, hub = places
    assert cafe.id == "1"
    assert cafe.distance == 0.5
    assert cafe.download == 25.0
    assert cafe.amenities == ["Coffee", "Food", "Outdoor Seating"]
    assert hub.distance is None
    assert hub.no_wifi is True
    assert hub.power_tier == PowerTier.NONE
    assert hub.noise_bucket == NoiseBucket.UNKNOWN


def test_pandas_missing_values_are_treated_as_absent():
    record = {
        "download": pd.NA,
        "noise": pd.NA,
        "noise_level": float("nan"),
        "coffee": pd.NA,
        "distance": pd.NaT,
        "power": "range3",
    }

    place = parse_place(record)

    assert place.download is None
    assert place.distance is None
    assert place.noise == ""
    assert place.noise_bucket == NoiseBucket.UNKNOWN
    assert place.coffee is False
    assert place.power_tier == PowerTier.ABUNDANT


def test_score_with_pandas_missing_values():
    result = score({"download": pd.NA, "noise": pd.NA, "coffee": pd.NA, "power": "range3"})

    assert [f.detail for f in result.factors] == ["Unknown", "Abundant", "Unknown", "Limited"]
    assert result.score == 2.5


def test_list_values_are_not_missing():
    assert parse_flag(["1"]) is False
    assert parse_number([42]) is None
    assert isinstance(parse_place({"type": ["cafe"], "download": [1, 2]}), Place)
