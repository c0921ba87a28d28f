import json
import logging
import re
from collections.abc import Callable, Sequence

from stylist_common.tools.fallback_data import (
    EXTRACTED_DESCRIPTION_PLACEHOLDER,
    EXTRACTED_ITEMS_PLACEHOLDER,
    default_style_suggestion,
)
from stylist_common.tools.style_normalizer import normalize_style_suggestion

logger = logging.getLogger(__name__)

TITLE_PATTERN = re.compile(r'"title"\s*:\s*"([^"]+)"')
DESCRIPTION_PATTERN = re.compile(r'"description"\s*:\s*"([^"]+)"')
COLOR_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")
SEASON_PATTERN = re.compile(r'"(spring|summer|fall|winter)"\s*:\s*"([^"]+)"')

Strategy = Callable[[str], object]

_UNPARSED = object()


def _parse_json(text: str, default=None):
    try:
        return json.loads(text)
    except (TypeError, ValueError, RecursionError):
        return default


def greedy_span(text: str, opener: str, closer: str) -> str | None:
    """Return the text from the first opener to the last closer, inclusive.

    Two disjoint JSON values in one reply come back as a single span, which
    then fails to parse.
    """
    match = re.search(re.escape(opener) + r"[\s\S]*" + re.escape(closer), text or "")
    return match.group(0) if match else None


def _direct(kind: type) -> Strategy:
    def strategy(text: str):
        parsed = _parse_json((text or "").strip())
        return parsed if isinstance(parsed, kind) else None

    strategy.__name__ = f"direct_{kind.__name__}"
    return strategy


def direct_style_suggestion(text: str) -> dict | None:
    """Normalize any value the whole text parses to, including arrays, strings and null."""
    parsed = _parse_json((text or "").strip(), default=_UNPARSED)
    if parsed is _UNPARSED:
        return None
    return normalize_style_suggestion(parsed)


def _span(kind: type, opener: str, closer: str) -> Strategy:
    def strategy(text: str):
        snippet = greedy_span(text, opener, closer)
        if snippet is None:
            return None
        parsed = _parse_json(snippet)
        return parsed if isinstance(parsed, kind) else None

    strategy.__name__ = f"span_{kind.__name__}"
    return strategy


def extract_style_fields(text: str) -> dict | None:
    """Pull titles, descriptions, colors and seasonal notes out of broken JSON text.

    Returns None when none of them are present.
    """
    text = text or ""
    titles = TITLE_PATTERN.findall(text)
    descriptions = DESCRIPTION_PATTERN.findall(text)
    colors = COLOR_PATTERN.findall(text)
    seasons = dict(SEASON_PATTERN.findall(text))

    logger.info(
        "Field extraction found %d outfits, %d colors, %d seasons",
        len(titles),
        len(colors),
        len(seasons),
    )
    if not titles and not colors and not seasons:
        return None

    extracted = default_style_suggestion()
    if titles:
        extracted["outfitIdeas"] = [
            {
                "title": title,
                "description": descriptions[idx] if idx < len(descriptions) else EXTRACTED_DESCRIPTION_PLACEHOLDER,
                "items": list(EXTRACTED_ITEMS_PLACEHOLDER),
            }
            for idx, title in enumerate(titles)
        ]
    if colors:
        extracted["colorMatching"]["complementaryColors"] = colors[:3]
        if len(colors) > 3:
            extracted["colorMatching"]["avoidColors"] = colors[3:5]
    extracted["seasonalRecommendations"].update(seasons)
    return extracted


OBJECT_STRATEGIES: Sequence[Strategy] = (
    _direct(dict),
    _span(dict, "{", "}"),
)

ARRAY_STRATEGIES: Sequence[Strategy] = (
    _direct(list),
    _span(list, "[", "]"),
)

STYLE_STRATEGIES: Sequence[Strategy] = (
    direct_style_suggestion,
    _span(dict, "{", "}"),
    extract_style_fields,
)


def run_strategies(text: str, strategies: Sequence[Strategy]):
    for strategy in strategies:
        result = strategy(text)
        if result is not None:
            logger.debug("Recovered JSON with %s", strategy.__name__)
            return result
        logger.debug("Strategy %s found nothing usable", strategy.__name__)
    return None


def recover_json_object(text: str) -> dict | None:
    return run_strategies(text, OBJECT_STRATEGIES)


def recover_json_array(text: str) -> list | None:
    return run_strategies(text, ARRAY_STRATEGIES)


def recover_style_suggestion(text: str) -> dict:
    """Turn raw model text into a normalized style suggestion. Never raises."""
    recovered = run_strategies(text, STYLE_STRATEGIES)
    if recovered is None:
        logger.info("No structure recovered from model text, using default suggestion")
        recovered = default_style_suggestion()
    return normalize_style_suggestion(recovered)
