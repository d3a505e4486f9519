"""
Input boundary: turns loosely-typed place records into `Place` objects.

Upstream records encode booleans as "1"/"0" strings, numbers as strings with
units, and leave most fields out entirely. Everything past this module works
on normalized values only.
"""
import json
import math
import re
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
from loguru import logger

from workability.models import NoiseBucket, Place, PowerTier

TRUE_STRINGS = {"1", "true", "yes", "y", "on"}

NOISE_KEYWORDS = [
    (NoiseBucket.QUIET, ("quiet", "low")),
    (NoiseBucket.MODERATE, ("moderate", "average")),
    (NoiseBucket.NOISY, ("noisy", "high")),
]

_NUMBER_RE = re.compile(r"^(-?\d+(?:\.\d+)?|-?\.\d+)\s*[a-z/]*$", re.IGNORECASE)


def _is_missing(value: Any) -> bool:
    """None, NaN, NaT and pd.NA; list-like values are never missing."""
    if value is None:
        return True
    if not pd.api.types.is_scalar(value):
        return False
    return bool(pd.isna(value))


def parse_flag(value: Any) -> bool:
    """Parse a boolean-ish upstream flag ("1", "0", True, 1, None...)."""
    if _is_missing(value):
        return False
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (int, float, np.integer, np.floating)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return False


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a numeric or numeric-string value.

    Args:
        value: Raw upstream value, e.g. 42, "42.5", "1,200", "30+", "18 Mbps".

    Returns:
        Optional[float]: The parsed number, or None when absent or unparseable.
    """
    if _is_missing(value) or isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, float, np.integer, np.floating)):
        number = float(value)
        return number if math.isfinite(number) else None
    if isinstance(value, str):
        s = value.strip().replace(",", "")
        if s.endswith("+"):
            s = s[:-1].strip()
        match = _NUMBER_RE.match(s)
        if match:
            return float(match.group(1))
        if s:
            logger.debug(f"Discarding unparseable number {value!r}")
    return None


def _text(value: Any) -> str:
    if _is_missing(value):
        return ""
    return str(value).strip()


def noise_bucket(text: Any) -> NoiseBucket:
    """Bucket free-text noise by substring match, first match wins."""
    lowered = _text(text).lower()
    for bucket, keywords in NOISE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return bucket
    return NoiseBucket.UNKNOWN


def power_tier(text: Any) -> PowerTier:
    """Map the upstream power token family onto a tier."""
    lowered = _text(text).lower()
    if not lowered or lowered == "none":
        return PowerTier.NONE
    if "range3" in lowered or "good" in lowered:
        return PowerTier.ABUNDANT
    if "range2" in lowered:
        return PowerTier.GOOD
    if "range1" in lowered or "little" in lowered:
        return PowerTier.LIMITED
    return PowerTier.UNKNOWN


def parse_place(record: Any) -> Place:
    """
    Normalize one raw place record. Never raises.

    Args:
        record: Dict from the places API or a CSV row. A `Place` is returned as-is.

    Returns:
        Place: Normalized place; the raw record is kept on `Place.raw`.
    """
    if isinstance(record, Place):
        return record
    if not isinstance(record, dict):
        logger.debug(f"Ignoring non-mapping place record of type {type(record).__name__}")
        return Place()

    def get(*keys):
        for key in keys:
            value = record.get(key)
            if not _is_missing(value) and not (isinstance(value, str) and value == ""):
                return value
        return None

    raw_id = get("id", "ID")
    noise = _text(get("noise_level", "noise"))
    power = _text(get("power"))

    return Place(
        id=str(raw_id) if raw_id is not None else None,
        title=_text(get("title", "name")),
        distance=parse_number(get("distance")),
        download=parse_number(get("download")),
        wifi=parse_number(get("wifi")),
        no_wifi=parse_flag(get("no_wifi")),
        power=power,
        power_tier=power_tier(power),
        noise=noise,
        noise_bucket=noise_bucket(noise),
        type=_text(get("type")),
        coffee=parse_flag(get("coffee")),
        food=parse_flag(get("food")),
        alcohol=parse_flag(get("alcohol")),
        # outdoor_seating only counts as the literal "1"; `outside` is any truthy flag
        outdoor_seating=_text(get("outdoor_seating")) == "1" or parse_flag(get("outside")),
        workability_score=parse_number(get("workabilityScore", "workability_score")),
        raw=dict(record),
    )


def parse_places(records: List[Any]) -> List[Place]:
    return [parse_place(record) for record in records or []]


def load_places_from_csv(file_path: str, nrows: int = None) -> List[Place]:
    """Load place records from CSV. Every column is read as text and parsed here."""
    df = pd.read_csv(file_path, nrows=nrows, dtype=str)
    records: List[Dict[str, Any]] = []
    for _, row in df.iterrows():
        records.append({col: (None if pd.isna(val) else val) for col, val in row.items()})
    logger.info(f"Loaded {len(records)} places from {file_path}")
    return parse_places(records)


def load_places_from_json(file_path: str) -> List[Place]:
    """
    Load place records from a JSON file.

    Accepts either a bare list of records or the places API envelope
    {"meta": {"code": 200}, "response": [...]}.
    """
    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        meta = data.get("meta") or {}
        code = meta.get("code", 200)
        if code != 200:
            logger.warning(
                f"Places response {file_path} has status {code}: "
                f"{meta.get('error_detail') or meta.get('error_type') or 'no detail'}"
            )
            return []
        data = data.get("response", [])

    if not isinstance(data, list):
        logger.warning(f"Unexpected places payload in {file_path}: {type(data).__name__}")
        return []

    logger.info(f"Loaded {len(data)} places from {file_path}")
    return parse_places(data)
