"""
Workability scoring: four independent factors summed onto a 0-10 scale.
"""
from dataclasses import replace
from typing import Any, List

from workability.models import Factor, NoiseBucket, Place, PowerTier, ScoreResult
from workability.place_adapter import parse_place

WIFI_MAX = 3.0
POWER_MAX = 2.5
NOISE_MAX = 2.5
AMENITIES_MAX = 2.0
AMENITY_POINTS = 0.5

SCALE = 10.0

# (minimum Mbps, points, detail), checked top-down; any positive speed below is Basic
WIFI_TIERS = [
    (50, 3.0, "Excellent"),
    (20, 2.5, "Very Good"),
    (10, 2.0, "Good"),
]

POWER_SCORES = {
    PowerTier.ABUNDANT: (2.5, "Abundant"),
    PowerTier.GOOD: (2.0, "Good"),
    PowerTier.LIMITED: (1.5, "Limited"),
    PowerTier.NONE: (0.0, "No outlets"),
    PowerTier.UNKNOWN: (0.0, "Unknown"),
}

NOISE_SCORES = {
    NoiseBucket.QUIET: (2.5, "Lower than average"),
    NoiseBucket.MODERATE: (2.0, "Average level"),
    NoiseBucket.NOISY: (1.0, "Higher than average"),
    NoiseBucket.UNKNOWN: (0.0, "Unknown"),
}


def wifi_factor(place: Place) -> Factor:
    if place.no_wifi:
        return Factor("WiFi Speed", 0.0, WIFI_MAX, "No WiFi")
    if place.download is not None and place.download > 0:
        for minimum, points, detail in WIFI_TIERS:
            if place.download >= minimum:
                return Factor("WiFi Speed", points, WIFI_MAX, detail)
        return Factor("WiFi Speed", 1.0, WIFI_MAX, "Basic")
    return Factor("WiFi Speed", 0.0, WIFI_MAX, "Unknown")


def power_factor(place: Place) -> Factor:
    points, detail = POWER_SCORES[place.power_tier]
    return Factor("Power Outlets", points, POWER_MAX, detail)


def noise_factor(place: Place) -> Factor:
    points, detail = NOISE_SCORES[place.noise_bucket]
    return Factor("Background Noise", points, NOISE_MAX, detail)


def amenities_factor(place: Place) -> Factor:
    names = place.amenities
    points = min(AMENITY_POINTS * len(names), AMENITIES_MAX)
    return Factor("Amenities", points, AMENITIES_MAX, ", ".join(names) if names else "Limited")


def score(place: Any) -> ScoreResult:
    """
    Calculate the workability score of a single place. Total over any input.

    Args:
        place: A `Place` or a raw place record (dict).

    Returns:
        ScoreResult: Score in [0, 10] rounded to one decimal, the ordered
                     factor breakdown and the share of factors with real signal.
    """
    place = parse_place(place)
    factors = [
        wifi_factor(place),
        power_factor(place),
        noise_factor(place),
        amenities_factor(place),
    ]

    earned = sum(f.score for f in factors)
    possible = sum(f.max_score for f in factors)
    final_score = round((earned / possible) * SCALE, 1) if possible > 0 else 0.0

    return ScoreResult(
        score=final_score,
        factors=factors,
        reliability=len([f for f in factors if f.score > 0]) / len(factors),
    )


def score_places(places: List[Any]) -> List[Place]:
    """
    Score every place, returning copies with `workability_score` attached.

    Args:
        places: Places or raw place records. Never mutated.

    Returns:
        List[Place]: New `Place` objects in input order.
    """
    return [
        replace(parsed, workability_score=score(parsed).score)
        for parsed in (parse_place(p) for p in places or [])
    ]
