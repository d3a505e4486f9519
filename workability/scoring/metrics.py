"""
Area-level statistics and patterns over a list of places.

Every reduction guards the empty list and yields zeros, never NaN.
"""
import math
from collections import Counter
from typing import List

from workability.models import (
    Metrics,
    NoiseBucket,
    NoiseDistribution,
    Pattern,
    Place,
    StrategicInsight,
)

AMENITY_KINDS = 4

# Checked top-down against the raw power token
POWER_WEIGHTS = [
    ("range3", 1.0),
    ("range2", 0.7),
    ("range1", 0.3),
]

HIGH_SPEED_MBPS = 50
HIGH_SPEED_SHARE = 0.7
DOMINANT_TYPE_SHARE = 0.5
FULL_SERVICE_SHARE = 0.6


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def percentage(count: float, total: float) -> int:
    """Rounded percentage of `count` over `total`; 0 when total is 0."""
    if not total:
        return 0
    return round_half_up(100 * count / total)


def power_weight(place: Place) -> float:
    power = place.power.lower()
    for token, weight in POWER_WEIGHTS:
        if token in power:
            return weight
    return 0.0


def summarize(places: List[Place]) -> Metrics:
    """
    Summarize a place list for area displays.

    Args:
        places (List[Place]): Places to summarize. Never mutated.

    Returns:
        Metrics: Average WiFi speed, power and amenity coverage percentages,
                 and noise bucket counts. Unknown noise is not counted.
    """
    total = len(places)

    speeds = [p.wifi_speed for p in places if p.wifi_speed is not None]
    average_speed = round_half_up(sum(speeds) / len(speeds)) if speeds else 0

    noise = NoiseDistribution()
    for place in places:
        if place.noise_bucket == NoiseBucket.QUIET:
            noise.quiet += 1
        elif place.noise_bucket == NoiseBucket.MODERATE:
            noise.moderate += 1
        elif place.noise_bucket == NoiseBucket.NOISY:
            noise.noisy += 1

    power_total = sum(power_weight(p) for p in places)
    amenity_total = sum(len(p.amenities) / AMENITY_KINDS for p in places)

    return Metrics(
        average_wifi_speed=average_speed,
        power_availability=percentage(power_total, total),
        noise_distribution=noise,
        amenity_coverage=percentage(amenity_total, total),
    )


def top_patterns(places: List[Place]) -> List[Pattern]:
    """Detect area-wide patterns in connectivity, venue type and amenities."""
    total = len(places)
    if not total:
        return []

    patterns = []

    high_speed = len([
        p for p in places
        if p.wifi_speed is not None and p.wifi_speed >= HIGH_SPEED_MBPS
    ])
    if high_speed / total >= HIGH_SPEED_SHARE:
        patterns.append(Pattern("connectivity", "Strong presence of high-speed internet options"))

    types = Counter(p.type for p in places if p.type)
    if types:
        dominant_type, count = types.most_common(1)[0]
        if count / total >= DOMINANT_TYPE_SHARE:
            patterns.append(Pattern("environment", f"Predominant workspace type: {dominant_type}"))

    full_service = len([p for p in places if p.has_coffee and p.food])
    if full_service / total >= FULL_SERVICE_SHARE:
        patterns.append(Pattern("amenities", "High availability of full-service workspaces"))

    return patterns


def strategic_insights(places: List[Place]) -> List[StrategicInsight]:
    insights = [
        StrategicInsight(
            title=f"{pattern.type.capitalize()} Trend",
            description=pattern.description,
            category=pattern.type,
            importance=4,
        )
        for pattern in top_patterns(places)
    ]

    if len(places) >= 3:
        # first of equal scores wins
        best = max(places, key=lambda p: p.score_or_zero)
        insights.append(StrategicInsight(
            title="Optimal Workspace Profile",
            description=f"{best.title or 'This workspace'} exemplifies the ideal balance of amenities and environment in this area",
            category="productivity",
            importance=5,
        ))

    return insights
