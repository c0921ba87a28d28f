import logging

from pydantic import ValidationError

from stylist_api import settings
from stylist_api.services.vendor_clients import openai_chat_json, openai_image_edit
from stylist_common.schemas import OutfitDetails
from stylist_common.tools.prompt_builders import KEYWORD_SYSTEM_PROMPT, build_edit_prompt, build_keyword_input

logger = logging.getLogger(__name__)


def parse_outfit_details(raw: str) -> OutfitDetails:
    try:
        return OutfitDetails.model_validate_json(raw)
    except ValidationError as exc:
        raise ValueError("Invalid outfit details format.") from exc


def extract_keywords(details: OutfitDetails) -> str:
    """Ask the chat model for style keywords; an empty string when that fails."""
    try:
        parsed = openai_chat_json(
            KEYWORD_SYSTEM_PROMPT,
            build_keyword_input(details),
            model=settings.OPENAI_KEYWORD_MODEL,
            temperature=0.5,
        )
    except Exception:
        logger.exception("Keyword extraction failed, continuing without keywords")
        return ""

    keywords = parsed.get("keywords")
    if isinstance(keywords, str):
        logger.info("Extracted keywords: %s", keywords)
        return keywords
    logger.warning("Keywords missing or not a string in response: %s", parsed)
    return ""


def visualize_outfit(image_bytes: bytes, filename: str | None, content_type: str | None, details: OutfitDetails) -> str:
    if not settings.OPENAI_API_KEY:
        raise RuntimeError("Configuration error: OpenAI API key not set.")

    keywords = extract_keywords(details)
    prompt = build_edit_prompt(details, keywords)
    logger.info("Edit prompt for %s: %s...", filename, prompt[:150])

    return openai_image_edit(
        image_bytes,
        filename or "uploaded_image.png",
        content_type or "image/png",
        prompt,
    )
