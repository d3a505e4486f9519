"""Pure scoring, ranking and summary functions over place lists."""
from workability.scoring.scorer import score, score_places
from workability.scoring.rankers import RANKERS, rank_all
from workability.scoring.filters import apply_filters, filter_and_sort, sort_places
from workability.scoring.metrics import percentage, strategic_insights, summarize, top_patterns
from workability.scoring.quick_insights import quick_insights

__all__ = [
    "score",
    "score_places",
    "RANKERS",
    "rank_all",
    "apply_filters",
    "filter_and_sort",
    "sort_places",
    "percentage",
    "strategic_insights",
    "summarize",
    "top_patterns",
    "quick_insights",
]
