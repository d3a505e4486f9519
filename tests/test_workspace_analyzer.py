import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from workability.models import WorkspaceRecommendation
from workability.analysis.workspace_analyzer import analyze_workspaces, build_prompt, parse_recommendation
from workability.scoring.scorer import score_places


@pytest.fixture
def places():
    return score_places([
        {"title": "Corner Cafe", "distance": 0.4, "download": 60, "power": "range3",
         "noise_level": "quiet", "coffee": "1", "food": "1", "type": "coffee"},
        {"title": "Night Owl", "distance": 2, "noise": "noisy", "alcohol": "1"},
    ])


@pytest.fixture(autouse=True)
def reset_openai_singleton():
    from workability.clients import openai_client as oai_client_module
    oai_client_module.OpenAIClient._instance = None
    oai_client_module.OpenAIClient._initialized = False
    yield
    oai_client_module.OpenAIClient._instance = None
    oai_client_module.OpenAIClient._initialized = False


def test_build_prompt_lists_every_place(places):
    prompt = build_prompt(places)

    assert "Corner Cafe:" in prompt
    assert "- Overall score: 9.0/10" in prompt
    assert "- Internet: Fast WiFi (60 Mbps)" in prompt
    assert "- The extras: Coffee, Food" in prompt
    assert "Night Owl:" in prompt
    assert "- Noise level: Above average" in prompt
    assert '"recommendation"' in prompt


def test_parse_recommendation_requires_a_name():
    assert parse_recommendation({"recommendation": {"personalNote": "nice"}}) is None
    assert parse_recommendation({"something": "else"}) is None
    assert parse_recommendation([]) is None


@pytest.mark.asyncio
async def test_analyze_workspaces_parses_model_json(places):
    """Mocked OpenAI response is turned into a WorkspaceRecommendation."""
    payload = {
        "recommendation": {
            "name": "Corner Cafe",
            "personalNote": "Regulars grab the window seats by nine.",
            "standoutFeatures": [
                {"category": "wifi", "title": "Blazing WiFi", "description": "60 Mbps down."},
                "not a feature",
            ],
            "finalNote": "Go early.",
        }
    }

    with patch("workability.analysis.workspace_analyzer.OpenAIClient") as mock_openai:
        mock_instance = MagicMock()
        mock_instance.json_completion = AsyncMock(return_value=payload)
        mock_openai.return_value = mock_instance

        result = await analyze_workspaces(places)

    assert isinstance(result, WorkspaceRecommendation)
    assert result.name == "Corner Cafe"
    assert result.final_note == "Go early."
    assert [f.title for f in result.standout_features] == ["Blazing WiFi"]

    system_prompt, user_prompt = mock_instance.json_completion.call_args.args
    assert "JSON" in system_prompt
    assert "Corner Cafe" in user_prompt


@pytest.mark.asyncio
async def test_analyze_workspaces_skips_empty_input():
    with patch("workability.analysis.workspace_analyzer.OpenAIClient") as mock_openai:
        result = await analyze_workspaces([])

    assert result is None
    assert not mock_openai.called


@pytest.mark.asyncio
async def test_analyze_workspaces_returns_none_on_bad_json(places):
    with patch("workability.analysis.workspace_analyzer.OpenAIClient") as mock_openai:
        mock_instance = MagicMock()
        mock_instance.json_completion = AsyncMock(side_effect=json.JSONDecodeError("Expecting value", "not json", 0))
        mock_openai.return_value = mock_instance

        assert await analyze_workspaces(places) is None


@pytest.mark.asyncio
async def test_analyze_workspaces_returns_none_on_api_error(places):
    with patch("workability.analysis.workspace_analyzer.OpenAIClient") as mock_openai:
        mock_instance = MagicMock()
        mock_instance.json_completion = AsyncMock(side_effect=RuntimeError("rate limited"))
        mock_openai.return_value = mock_instance

        assert await analyze_workspaces(places) is None


@pytest.mark.asyncio
async def test_analyze_workspaces_without_api_key(places):
    """The real client refuses to start without a key; the analyzer degrades to None."""
    with patch("workability.clients.openai_client.OPENAI_API_KEY", None), \
         patch.dict("os.environ", {}, clear=True):
        assert await analyze_workspaces(places) is None
