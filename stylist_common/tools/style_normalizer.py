from stylist_common.tools.fallback_data import (
    DEFAULT_OUTFIT_IDEA,
    SEASONS,
    SMART_CASUAL_IDEA,
    default_color_matching,
    default_seasonal_recommendations,
    outfit_idea,
)


def _as_mapping(value) -> dict:
    return value if isinstance(value, dict) else {}


def _str_items(value) -> list[str] | None:
    """Keep only the string elements of a non-empty list; None when nothing survives."""
    if not isinstance(value, list) or not value:
        return None
    items = [item for item in value if isinstance(item, str)]
    return items or None


def _str_field(value, default: str) -> str:
    return value if isinstance(value, str) else default


def _normalize_outfit_idea(raw) -> dict:
    outfit = _as_mapping(raw)
    items = _str_items(outfit.get("items"))
    return {
        "title": _str_field(outfit.get("title"), DEFAULT_OUTFIT_IDEA["title"]),
        "description": _str_field(outfit.get("description"), DEFAULT_OUTFIT_IDEA["description"]),
        "items": items if items is not None else list(DEFAULT_OUTFIT_IDEA["items"]),
    }


def _normalize_outfit_ideas(value) -> list[dict]:
    if not isinstance(value, list):
        return [outfit_idea(DEFAULT_OUTFIT_IDEA), outfit_idea(SMART_CASUAL_IDEA)]

    ideas = [_normalize_outfit_idea(outfit) for outfit in value]
    if not ideas:
        ideas.append(outfit_idea(DEFAULT_OUTFIT_IDEA))
    return ideas


def _normalize_color_matching(value) -> dict:
    colors = default_color_matching()
    raw = _as_mapping(value)
    for key in ("complementaryColors", "avoidColors"):
        items = _str_items(raw.get(key))
        if items is not None:
            colors[key] = items
    return colors


def _normalize_seasonal(value) -> dict:
    seasonal = default_seasonal_recommendations()
    raw = _as_mapping(value)
    for season in SEASONS:
        if isinstance(raw.get(season), str):
            seasonal[season] = raw[season]
    return seasonal


def normalize_style_suggestion(raw_suggestion) -> dict:
    """Coerce an untrusted model payload into the full style suggestion shape.

    Fields that are missing or of the wrong type fall back to the defaults;
    non-string list elements are dropped, never converted. Normalizing an
    already normalized suggestion returns an equal value.
    """
    suggestion = _as_mapping(raw_suggestion)

    return {
        "outfitIdeas": _normalize_outfit_ideas(suggestion.get("outfitIdeas")),
        "colorMatching": _normalize_color_matching(suggestion.get("colorMatching")),
        "seasonalRecommendations": _normalize_seasonal(suggestion.get("seasonalRecommendations")),
        "moodBoards": [],
    }
