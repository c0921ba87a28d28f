import logging

from stylist_api import settings
from stylist_api.services.vendor_clients import WEB_SEARCH_TOOL, create_anthropic_message_text
from stylist_common.schemas import ImageSearchResult
from stylist_common.tools.fallback_data import generate_mock_images
from stylist_common.tools.json_recovery import recover_json_array
from stylist_common.tools.prompt_builders import IMAGE_SEARCH_SYSTEM_PROMPT, build_image_search_prompt

logger = logging.getLogger(__name__)

SEARCH_BETAS = ("web-search-2025-03-05",)


def _non_empty_str(value, default: str) -> str:
    return value if isinstance(value, str) and value else default


def validate_image_results(raw_images: list, query: str, limit: int) -> list[dict]:
    images: list[dict] = []
    for raw in raw_images:
        if not isinstance(raw, dict):
            continue
        url = raw.get("url")
        if not isinstance(url, str) or not url:
            continue
        result = ImageSearchResult(
            url=url,
            title=_non_empty_str(raw.get("title"), query),
            source=_non_empty_str(raw.get("source"), "Web"),
        )
        images.append(result.model_dump())
    return images[: max(0, limit)]


def search_images(query: str, limit: int = 6) -> list[dict]:
    """Find fashion images for a query, falling back to the mock table on any failure."""
    if not settings.ANTHROPIC_API_KEY:
        logger.error("ANTHROPIC_API_KEY is not set, serving mock images")
        return generate_mock_images(query, limit)

    payload = {
        "model": settings.SEARCH_MODEL,
        "max_tokens": 1024,
        "temperature": 0.1,
        "system": IMAGE_SEARCH_SYSTEM_PROMPT,
        "messages": [{"role": "user", "content": build_image_search_prompt(query, limit)}],
        "tools": [WEB_SEARCH_TOOL],
    }
    try:
        response_text = create_anthropic_message_text(payload, betas=SEARCH_BETAS)
    except Exception:
        logger.exception("Image search model call failed, serving mock images")
        return generate_mock_images(query, limit)

    logger.info("Image search response: %s...", response_text[:200])
    raw_images = recover_json_array(response_text)
    if raw_images is None:
        logger.info("No JSON array in image search response, serving mock images")
        return generate_mock_images(query, limit)

    images = validate_image_results(raw_images, query, limit)
    logger.info("Found %d images for %r", len(images), query)
    return images
