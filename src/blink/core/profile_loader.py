"""
Business profile persistence.

Reads BusinessProfile records from YAML (``.yaml``/``.yml``) or JSON files
and serializes models back to plain data for output.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from .errors import ErrorContext, ProfileLoadError
from .ir.business import BusinessProfile

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def load_profile(path: Path) -> BusinessProfile:
    """Load a BusinessProfile from a YAML or JSON file.

    Args:
        path: Profile file. JSON is used for ``.json``, YAML otherwise.

    Returns:
        BusinessProfile instance.

    Raises:
        ProfileLoadError: If the file doesn't exist or holds invalid data.
    """
    if not path.exists():
        raise ProfileLoadError(f"Profile not found: {path}")

    context = ErrorContext(file=path)
    content = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ProfileLoadError(f"Invalid YAML: {e}", context) from e
    except json.JSONDecodeError as e:
        raise ProfileLoadError(f"Invalid JSON: {e}", context) from e

    if not data or not isinstance(data, dict):
        raise ProfileLoadError("Empty or invalid profile data", context)

    logger.debug(f"Loaded profile data from {path}")
    return parse_profile(data, context)


def parse_profile(data: dict[str, Any], context: ErrorContext | None = None) -> BusinessProfile:
    """Build a BusinessProfile from raw mapping data.

    Accepts the camelCase keys used by prospect records
    (``businessName``, ``fixtureId``, ``reviewCount``, ``priceLevel``)
    alongside the snake_case field names.
    """
    try:
        return BusinessProfile(**_normalize_keys(data))
    except ValidationError as e:
        raise ProfileLoadError(f"Invalid profile schema: {e}", context) from e


_KEY_ALIASES = {
    "businessName": "name",
    "business_name": "name",
    "fixtureId": "fixture_id",
    "opportunityScore": "opportunity_score",
    "prospectId": "prospect_id",
    "reviewCount": "review_count",
    "priceLevel": "price_level",
    "reviewHighlights": "review_highlights",
    "yelpUrl": "yelp_url",
    "googleMapsUrl": "google_maps_url",
}

_RESEARCH_KEYS = {
    "rating",
    "review_count",
    "price_level",
    "categories",
    "hours",
    "photos",
    "review_highlights",
    "yelp_url",
    "google_maps_url",
}


def _normalize_keys(data: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    research: dict[str, Any] = {}
    for key, value in data.items():
        key = _KEY_ALIASES.get(key, key)
        if key == "research":
            if isinstance(value, dict):
                research.update({_KEY_ALIASES.get(k, k): v for k, v in value.items()})
            elif value is not None:
                result[key] = value
        elif key in _RESEARCH_KEYS:
            # Flat prospect records carry research signals at the top level
            research.setdefault(key, value)
        else:
            result[key] = value
    if research:
        result["research"] = research
    return result


def dump_model(model: BaseModel) -> dict[str, Any]:
    """Serialize a model to JSON-compatible data."""
    return model.model_dump(mode="json")


__all__ = ["dump_model", "load_profile", "parse_profile"]
