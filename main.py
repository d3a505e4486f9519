import os
import asyncio
import csv
import sys
from datetime import datetime
from typing import Dict, List
from loguru import logger

from workability.models import Place
from workability.place_adapter import load_places_from_csv, load_places_from_json
from workability.scoring import quick_insights, rank_all, score, score_places, strategic_insights, summarize
from workability.analysis.workspace_analyzer import analyze_workspaces
from workability.config import INPUT_PATH, OUTPUT_CSV, LOG_LEVEL, ENABLE_AI_ANALYSIS

OUTPUT_HEADER = ["ID", "Name", "workabilityScore", "reliability", "distance", "download", "noise", "power", "type", "views"]


def load_places(file_path: str) -> List[Place]:
    """Load places from a .json places API dump or a CSV export."""
    if file_path.lower().endswith(".json"):
        return load_places_from_json(file_path)
    return load_places_from_csv(file_path)


def views_by_place(views: Dict[str, List[Place]]) -> Dict[int, List[str]]:
    """
    Invert the ranked views into a lookup of view names per place.

    Args:
        views (Dict[str, List[Place]]): View name → ranked places.

    Returns:
        Dict[int, List[str]]: id(place) → names of the views containing it.
    """
    lookup: Dict[int, List[str]] = {}
    for name, ranked in views.items():
        if name == "closest":
            continue
        for place in ranked:
            lookup.setdefault(id(place), []).append(name)
    return lookup


def write_results(output_path: str, views: Dict[str, List[Place]]) -> None:
    memberships = views_by_place(views)
    with open(output_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(OUTPUT_HEADER)
        for place in views["closest"]:
            result = score(place)
            writer.writerow([
                place.id or "",
                place.title,
                place.workability_score,
                f"{result.reliability:.2f}",
                "" if place.distance is None else place.distance,
                "" if place.download is None else place.download,
                place.noise_bucket.value,
                place.power_tier.value,
                place.type,
                ";".join(memberships.get(id(place), [])),
            ])


async def main():
    """
    Run the scoring pipeline over one search result dump.

    - Loads and normalizes place records.
    - Scores every place and builds the ranked views and area summary.
    - Optionally asks the LLM for a workspace recommendation.
    - Writes one row per place, closest first, to the output CSV.
    """
    # Initialize logs
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=LOG_LEVEL, format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>")

    input_path = sys.argv[1] if len(sys.argv) > 1 else INPUT_PATH
    output_path = sys.argv[2] if len(sys.argv) > 2 else OUTPUT_CSV

    places = score_places(load_places(input_path))
    views = rank_all(places)

    metrics = summarize(places)
    logger.info(
        f"📊 {len(places)} places | avg WiFi {metrics.average_wifi_speed} Mbps | "
        f"power {metrics.power_availability}% | amenities {metrics.amenity_coverage}% | "
        f"noise q/m/n {metrics.noise_distribution.quiet}/"
        f"{metrics.noise_distribution.moderate}/{metrics.noise_distribution.noisy}"
    )
    for insight in strategic_insights(places):
        logger.info(f"💡 {insight.title}: {insight.description}")
    for card in quick_insights(places, datetime.now().hour):
        logger.info(f"⭐ {card.title}: {', '.join(p.title for p in card.places) or 'no matches'}")

    if ENABLE_AI_ANALYSIS:
        recommendation = await analyze_workspaces(views["closest"][:10])
        if recommendation:
            logger.info(f"🤖 Recommended: {recommendation.name} - {recommendation.personal_note}")

    if os.path.exists(output_path):
        os.remove(output_path)
    write_results(output_path, views)
    logger.info(f"✅ Wrote {len(places)} scored places to {output_path}")

if __name__ == "__main__":
    asyncio.run(main())
