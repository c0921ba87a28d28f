import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from pathlib import Path

from stylist_api import settings
from stylist_api.services.vendor_clients import WEB_SEARCH_TOOL, stream_anthropic_text
from stylist_common.tools.fallback_data import PRIVACY_NOTE, default_style_suggestion
from stylist_common.tools.json_recovery import recover_style_suggestion
from stylist_common.tools.prompt_builders import STYLE_SYSTEM_PROMPT, build_image_block, build_style_messages
from stylist_common.tools.style_normalizer import normalize_style_suggestion

logger = logging.getLogger(__name__)

STYLE_BETAS = ("web-search-2025-03-05", "output-128k-2025-02-19")


def _encode_upload(upload) -> dict | None:
    if isinstance(upload, str):
        logger.info("Skipping non-file image part")
        return None
    data = upload.file.read()
    if not data:
        logger.info("Skipping empty upload %s", upload.filename)
        return None
    logger.info("Encoding image %s (%d bytes, type: %s)", upload.filename, len(data), upload.content_type)
    return build_image_block(data, upload.content_type)


def encode_uploads(uploads: list) -> list[dict]:
    """Encode every upload on a worker thread; results keep upload order."""
    if not uploads:
        return []
    workers = max(1, min(settings.UPLOAD_ENCODE_WORKERS, len(uploads)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        blocks = list(executor.map(_encode_upload, uploads))
    return [block for block in blocks if block is not None]


def _dump_raw_response(raw_text: str) -> None:
    if settings.APP_ENV != "development":
        return
    try:
        dump_dir = Path(settings.DEBUG_DUMP_DIR)
        dump_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S-%f")
        path = dump_dir / f"style-response-{stamp}.txt"
        path.write_text(raw_text, encoding="utf-8")
        logger.info("Saved raw style response to %s", path)
    except OSError:
        logger.exception("Could not save raw style response")


def _style_payload(image_blocks: list[dict]) -> dict:
    return {
        "model": settings.STYLE_MODEL,
        "max_tokens": 16000,
        "temperature": 0.7,
        "system": STYLE_SYSTEM_PROMPT,
        "messages": build_style_messages(image_blocks),
        "tools": [WEB_SEARCH_TOOL],
    }


def get_style_suggestions(uploads: list) -> dict:
    try:
        image_blocks = encode_uploads(uploads)
        logger.info("Processed %d valid images", len(image_blocks))
        if not image_blocks:
            raise RuntimeError("No valid images to process")

        raw_text = stream_anthropic_text(_style_payload(image_blocks), betas=STYLE_BETAS)
        logger.info("Received %d characters from style model", len(raw_text))
        _dump_raw_response(raw_text)
        return recover_style_suggestion(raw_text)
    except Exception:
        logger.exception("Style model call failed, serving default suggestions")
        return default_style_suggestion()


def _envelope(success: bool, suggestions: dict, error: str | None = None) -> dict:
    body = {
        "success": success,
        "suggestions": suggestions,
        "privacy_note": PRIVACY_NOTE,
    }
    if error:
        body["error"] = error
    return body


def build_suggestion_response(uploads: list | None) -> tuple[int, dict]:
    """Return (status_code, body) for a style suggestion request."""
    uploads = uploads or []
    logger.info("Received %d images for processing", len(uploads))

    if not uploads:
        return 500, _envelope(False, default_style_suggestion(), "No images provided")

    if not settings.ANTHROPIC_API_KEY:
        logger.error("ANTHROPIC_API_KEY is not set")
        return 500, _envelope(False, default_style_suggestion(), "Configuration error: API key not set")

    try:
        suggestions = normalize_style_suggestion(get_style_suggestions(uploads))
    except Exception as exc:
        logger.exception("Error processing style suggestions")
        return 500, _envelope(False, default_style_suggestion(), str(exc) or "An unknown error occurred")

    return 200, _envelope(True, suggestions)
