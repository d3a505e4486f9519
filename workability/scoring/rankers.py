"""
Named views over a scored place list.

Every ranker is a pure filter + sort returning a new list. Ties are broken by
ascending distance; places without a distance sort last.
"""
import math
from typing import Callable, Dict, List

from workability.config import MEETING_MIN_DOWNLOAD
from workability.models import NoiseBucket, Place

NOISE_QUALITY = {
    NoiseBucket.QUIET: 3,
    NoiseBucket.MODERATE: 2,
    NoiseBucket.NOISY: 1,
    NoiseBucket.UNKNOWN: 0,
}


def _distance(place: Place) -> float:
    return place.distance if place.distance is not None else math.inf


def noise_quality_score(place: Place) -> int:
    return NOISE_QUALITY[place.noise_bucket]


def meetup_score(place: Place) -> int:
    points = 0
    if place.food:
        points += 2
    if place.has_coffee:
        points += 2
    if place.outdoor_seating:
        points += 1
    if "coworking" in place.type_lower:
        points += 2
    return points


def privacy_score(place: Place) -> int:
    points = 0
    if "coworking" in place.type_lower:
        points += 3
    if "dedicated" in place.type_lower:
        points += 2
    if place.score_or_zero >= 7:
        points += 1
    return points


def closest(places: List[Place]) -> List[Place]:
    return sorted(places, key=_distance)


def fastest_wifi(places: List[Place]) -> List[Place]:
    with_speed = [p for p in places if p.download is not None and p.has_wifi]
    return sorted(with_speed, key=lambda p: (-p.download, _distance(p)))


def meeting_ready(places: List[Place]) -> List[Place]:
    """Quiet or moderate places with WiFi fast enough for video calls."""
    matches = [
        p for p in places
        if p.noise_bucket in (NoiseBucket.QUIET, NoiseBucket.MODERATE)
        and p.has_wifi
        and p.download is not None
        and p.download >= MEETING_MIN_DOWNLOAD
    ]
    return sorted(matches, key=_distance)


def social(places: List[Place]) -> List[Place]:
    matches = [p for p in places if p.noise_bucket in (NoiseBucket.NOISY, NoiseBucket.MODERATE)]
    return sorted(matches, key=_distance)


def _is_focus_spot(place: Place) -> bool:
    if place.noise_bucket == NoiseBucket.QUIET:
        return True
    if "coffee" in place.type_lower and place.noise_bucket == NoiseBucket.MODERATE:
        return True
    if "library" in place.type_lower:
        return True
    return place.score_or_zero >= 7 and place.noise_bucket != NoiseBucket.NOISY


def focus(places: List[Place]) -> List[Place]:
    """Quiet or cozy places for concentrated work, quietest first."""
    matches = [p for p in places if _is_focus_spot(p)]
    return sorted(matches, key=lambda p: (-noise_quality_score(p), _distance(p)))


def _is_meetup_spot(place: Place) -> bool:
    if any(token in place.type_lower for token in ("cafe", "coffee", "coworking")):
        return True
    if place.food or place.has_coffee:
        return True
    return place.score_or_zero >= 6 and place.noise_bucket != NoiseBucket.QUIET


def group_friendly(places: List[Place]) -> List[Place]:
    matches = [p for p in places if _is_meetup_spot(p)]
    return sorted(matches, key=lambda p: (-meetup_score(p), _distance(p)))


def private(places: List[Place]) -> List[Place]:
    """Coworking and dedicated workspaces, most private first."""
    matches = [
        p for p in places
        if "coworking" in p.type_lower or "dedicated" in p.type_lower
    ]
    return sorted(matches, key=lambda p: (-privacy_score(p), _distance(p)))


RANKERS: Dict[str, Callable[[List[Place]], List[Place]]] = {
    "closest": closest,
    "fastest_wifi": fastest_wifi,
    "meeting_ready": meeting_ready,
    "social": social,
    "focus": focus,
    "group_friendly": group_friendly,
    "private": private,
}


def rank_all(places: List[Place]) -> Dict[str, List[Place]]:
    """Build every named view over the same place list."""
    return {name: ranker(places) for name, ranker in RANKERS.items()}
