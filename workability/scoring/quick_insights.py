from typing import List

from workability.config import MEETING_MIN_DOWNLOAD, NEARBY_MILES, QUICK_INSIGHT_LIMIT
from workability.models import NoiseBucket, Place, QuickInsight

MORNING_END_HOUR = 11
LUNCH_END_HOUR = 14
AFTERNOON_END_HOUR = 17
PRODUCTIVE_SCORE = 7


def _by_score(places: List[Place]) -> List[Place]:
    return sorted(places, key=lambda p: -p.score_or_zero)


def greeting(hour: int) -> str:
    return "Afternoon" if hour < AFTERNOON_END_HOUR else "Evening"


def time_slot_insight(places: List[Place], hour: int, limit: int = QUICK_INSIGHT_LIMIT) -> QuickInsight:
    """Recommendation for the time of day: coffee before 11, food until 14, fast WiFi after."""
    if hour < MORNING_END_HOUR:
        picks = _by_score([
            p for p in places
            if p.coffee and p.noise_bucket != NoiseBucket.NOISY
        ])
        return QuickInsight(
            category="time",
            title="Perfect for Morning Work",
            description="Quiet spaces with great coffee to start your day",
            places=picks[:limit],
        )

    if hour < LUNCH_END_HOUR:
        picks = _by_score([p for p in places if p.food])
        return QuickInsight(
            category="time",
            title="Work Through Lunch",
            description="Spaces with food options and good workability",
            places=picks[:limit],
        )

    picks = sorted(
        [p for p in places if p.score_or_zero >= PRODUCTIVE_SCORE],
        key=lambda p: -(p.download or 0),
    )
    return QuickInsight(
        category="time",
        title=f"Best for {greeting(hour)} Productivity",
        description="High-performing spaces with fast WiFi",
        places=picks[:limit],
    )


def quick_insights(places: List[Place], hour: int, limit: int = QUICK_INSIGHT_LIMIT) -> List[QuickInsight]:
    """
    Build the quick recommendation cards for a result list.

    Args:
        places (List[Place]): Scored places.
        hour (int): Local hour of day, 0-23.
        limit (int): Maximum places per card.

    Returns:
        List[QuickInsight]: Cards in display order. Empty input gives no cards.
    """
    if not places:
        return []

    insights = []

    nearby = _by_score([
        p for p in places
        if p.distance is not None and p.distance <= NEARBY_MILES
    ])
    if nearby:
        insights.append(QuickInsight(
            category="location",
            title="Closest High-Rated Spaces",
            description="Top workspaces within a mile of you",
            places=nearby[:limit],
        ))

    insights.append(time_slot_insight(places, hour, limit))

    quiet = _by_score([p for p in places if p.noise_bucket == NoiseBucket.QUIET])
    if quiet:
        insights.append(QuickInsight(
            category="noise",
            title="Best for Deep Focus",
            description="Quieter spaces perfect for concentrated work",
            places=quiet[:limit],
        ))

    teams = _by_score([
        p for p in places
        if p.download is not None
        and p.download >= MEETING_MIN_DOWNLOAD
        and p.noise_bucket != NoiseBucket.QUIET
        and p.food
    ])
    if teams:
        insights.append(QuickInsight(
            category="users",
            title="Great for Teams",
            description="Spacious venues with amenities for group work",
            places=teams[:limit],
        ))

    return insights
