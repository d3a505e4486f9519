"""
Typed data models for the workspace scoring pipeline.
All data structures used throughout the codebase should be defined here.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class NoiseBucket(str, Enum):
    """Noise bucket derived from free-text noise fields."""
    QUIET = "quiet"
    MODERATE = "moderate"
    NOISY = "noisy"
    UNKNOWN = "unknown"


class PowerTier(str, Enum):
    """Power outlet availability derived from the upstream power token."""
    NONE = "none"
    LIMITED = "limited"
    GOOD = "good"
    ABUNDANT = "abundant"
    UNKNOWN = "unknown"


@dataclass
class Place:
    """A workspace record normalized at the input boundary."""
    id: Optional[str] = None
    title: str = ""
    distance: Optional[float] = None  # miles from the search origin
    download: Optional[float] = None  # Mbps
    wifi: Optional[float] = None  # legacy speed field, used only by area metrics
    no_wifi: bool = False
    power: str = ""
    power_tier: PowerTier = PowerTier.NONE
    noise: str = ""  # noise_level, falling back to noise
    noise_bucket: NoiseBucket = NoiseBucket.UNKNOWN
    type: str = ""
    coffee: bool = False
    food: bool = False
    alcohol: bool = False
    outdoor_seating: bool = False
    workability_score: Optional[float] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def type_lower(self) -> str:
        return self.type.lower()

    @property
    def has_coffee(self) -> bool:
        return self.coffee or "coffee" in self.type_lower

    @property
    def has_wifi(self) -> bool:
        return not self.no_wifi

    @property
    def wifi_speed(self) -> Optional[float]:
        return self.download if self.download is not None else self.wifi

    @property
    def score_or_zero(self) -> float:
        return self.workability_score if self.workability_score is not None else 0.0

    @property
    def amenities(self) -> List[str]:
        """Matched amenity names in display order."""
        names = []
        if self.has_coffee:
            names.append("Coffee")
        if self.food:
            names.append("Food")
        if self.outdoor_seating:
            names.append("Outdoor Seating")
        if self.alcohol:
            names.append("Alcohol")
        return names


@dataclass
class Factor:
    """One scoring dimension of a workability score."""
    name: str
    score: float
    max_score: float
    detail: str


@dataclass
class ScoreResult:
    """Workability score with its per-factor breakdown."""
    score: float  # 0-10, one decimal
    factors: List[Factor]
    reliability: float  # share of factors with a non-zero sub-score

    @property
    def earned(self) -> float:
        return sum(f.score for f in self.factors)

    @property
    def possible(self) -> float:
        return sum(f.max_score for f in self.factors)


@dataclass
class NoiseDistribution:
    quiet: int = 0
    moderate: int = 0
    noisy: int = 0


@dataclass
class Metrics:
    """Area-level summary over a list of places."""
    average_wifi_speed: int = 0
    power_availability: int = 0  # percent
    noise_distribution: NoiseDistribution = field(default_factory=NoiseDistribution)
    amenity_coverage: int = 0  # percent


@dataclass
class Pattern:
    type: str  # connectivity, environment, amenities
    description: str


@dataclass
class StrategicInsight:
    title: str
    description: str
    category: str
    importance: int


@dataclass
class QuickInsight:
    """A short themed list of places for the current time of day."""
    category: str
    title: str
    description: str
    places: List[Place]


@dataclass
class PostSearchFilters:
    """Filters applied to a result list after a search."""
    type: str = "any"
    noise: str = "any"
    power: str = "any"


@dataclass
class WifiStatus:
    label: str
    value: str


@dataclass
class StandoutFeature:
    category: str
    title: str
    description: str


@dataclass
class WorkspaceRecommendation:
    """LLM-written recommendation of a single workspace."""
    name: str
    personal_note: str = ""
    standout_features: List[StandoutFeature] = field(default_factory=list)
    final_note: str = ""
