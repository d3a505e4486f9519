from typing import Any, Dict, List, Optional

from loguru import logger

from workability.clients import OpenAIClient
from workability.labels import format_distance, noise_label, wifi_status
from workability.models import Place, StandoutFeature, WorkspaceRecommendation

SYSTEM_PROMPT = (
    "You're a friendly local remote worker who's spent countless hours working from these spaces. "
    "Your task is to provide recommendations in JSON format. Your response must be a valid JSON object "
    "that matches the specified structure. Keep the content authentic and personal while maintaining "
    "proper JSON syntax."
)

PROMPT_TEMPLATE = """Hey there! I'm a local remote worker who knows these spots inside and out.
Let me help you find the perfect workspace that'll feel like your second home office.

I've checked out these places recently:
{place_text}

Please provide your response in JSON format. The response should be a valid JSON object with the following structure:
{{
  "recommendation": {{
    "name": "The spot you'd recommend to a friend",
    "personalNote": "Share what it's really like working here - the vibe, the regulars, the hidden perks (2-3 conversational sentences)",
    "standoutFeatures": [
      {{
        "category": "wifi/power/quiet/amenities",
        "title": "What makes this feature special",
        "description": "The real deal about this feature, like you're telling a friend"
      }}
    ],
    "finalNote": "A friendly wrap-up that helps them feel confident about trying this place"
  }}
}}

Keep your content conversational and focus on what actually matters when you're trying to get work done.
If you notice any unique patterns in the data (like unusually fast wifi or super quiet spots), point those out!
"""


def describe_place(place: Place) -> str:
    """Render one place as a bullet block for the prompt."""
    wifi = wifi_status(place)
    internet = f"{wifi.label} ({place.download:.0f} Mbps)" if wifi.value not in ("Unknown", "Not Available") else wifi.label
    score = f"{place.workability_score}/10" if place.workability_score is not None else "not rated"
    return "\n".join([
        f"{place.title or 'Unnamed workspace'}:",
        f"- {format_distance(place.distance)}",
        f"- Internet: {internet}",
        f"- Noise level: {noise_label(place)}",
        f"- Power outlets: {place.power or 'Unknown'}",
        f"- Type: {place.type or 'Unknown'}",
        f"- Overall score: {score}",
        f"- The extras: {', '.join(place.amenities) or 'none listed'}",
    ])


def build_prompt(places: List[Place]) -> str:
    return PROMPT_TEMPLATE.format(place_text="\n\n".join(describe_place(p) for p in places))


def parse_recommendation(payload: Dict[str, Any]) -> Optional[WorkspaceRecommendation]:
    """
    Convert the model's JSON object into a WorkspaceRecommendation.

    Args:
        payload (Dict[str, Any]): Decoded JSON response.

    Returns:
        Optional[WorkspaceRecommendation]: None when the payload has no named recommendation.
    """
    rec = payload.get("recommendation") if isinstance(payload, dict) else None
    if not isinstance(rec, dict) or not rec.get("name"):
        return None

    features = [
        StandoutFeature(
            category=str(f.get("category", "")),
            title=str(f.get("title", "")),
            description=str(f.get("description", "")),
        )
        for f in rec.get("standoutFeatures") or []
        if isinstance(f, dict)
    ]
    return WorkspaceRecommendation(
        name=str(rec["name"]),
        personal_note=str(rec.get("personalNote", "")),
        standout_features=features,
        final_note=str(rec.get("finalNote", "")),
    )


async def analyze_workspaces(places: List[Place]) -> Optional[WorkspaceRecommendation]:
    """
    Ask the LLM to pick and describe the best workspace among `places`.

    Args:
        places (List[Place]): Scored places to choose from.

    Returns:
        Optional[WorkspaceRecommendation]: The recommendation, or None when there is
                                           nothing to analyze or the request fails.
    """
    if not places:
        logger.debug("No places to analyze, skipping LLM recommendation")
        return None

    try:
        openai_client = OpenAIClient()
        payload = await openai_client.json_completion(SYSTEM_PROMPT, build_prompt(places))
        recommendation = parse_recommendation(payload)
        if recommendation is None:
            logger.warning("LLM response did not contain a recommendation")
        return recommendation
    except Exception as e:
        logger.debug(f"⚠️ Workspace analysis failed for {len(places)} places: {e}")
        return None
