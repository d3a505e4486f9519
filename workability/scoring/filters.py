from typing import List, Optional

from workability.models import NoiseBucket, Place, PostSearchFilters

ANY = "any"
SCORE_HIGH = "score_high"


def matches_filters(place: Place, filters: PostSearchFilters) -> bool:
    if filters.type != ANY and place.type != filters.type:
        return False

    if filters.noise != ANY:
        try:
            wanted = NoiseBucket(filters.noise)
        except ValueError:
            return False
        if wanted == NoiseBucket.UNKNOWN or place.noise_bucket != wanted:
            return False

    if filters.power != ANY and filters.power.lower() not in place.power.lower():
        return False

    return True


def apply_filters(places: List[Place], filters: Optional[PostSearchFilters] = None) -> List[Place]:
    """
    Restrict a result list by space type, noise bucket and power token.

    Args:
        places (List[Place]): Scored places.
        filters (Optional[PostSearchFilters]): Filter selection; None or "any" values keep everything.

    Returns:
        List[Place]: Matching places in input order.
    """
    filters = filters or PostSearchFilters()
    return [p for p in places if matches_filters(p, filters)]


def sort_places(places: List[Place], sort_by: str = SCORE_HIGH) -> List[Place]:
    """'score_high' orders by workability score, highest first; anything else keeps input order."""
    if sort_by == SCORE_HIGH:
        return sorted(places, key=lambda p: -p.score_or_zero)
    return list(places)


def filter_and_sort(
    places: List[Place],
    filters: Optional[PostSearchFilters] = None,
    sort_by: str = SCORE_HIGH,
) -> List[Place]:
    return sort_places(apply_filters(places, filters), sort_by)
