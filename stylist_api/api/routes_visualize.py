import logging

from fastapi import APIRouter, File, Form, UploadFile
from fastapi.responses import JSONResponse

from stylist_api import settings
from stylist_api.services.visualize_service import parse_outfit_details, visualize_outfit

logger = logging.getLogger(__name__)

router = APIRouter(tags=["visualize"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@router.post("/visualize-outfit")
def post_visualize_outfit(
    image: UploadFile | None = File(None),
    outfit_details: str | None = Form(None, alias="outfitDetails"),
):
    if not settings.OPENAI_API_KEY:
        logger.error("OPENAI_API_KEY is not set")
        return _error(500, "Configuration error: OpenAI API key not set.")
    if image is None:
        return _error(400, "Image file is required for visualization.")
    if not outfit_details:
        return _error(400, "Outfit details are required.")

    try:
        details = parse_outfit_details(outfit_details)
    except ValueError as exc:
        return _error(400, str(exc))

    logger.info("Visualizing outfit %r", details.title)
    try:
        b64_json = visualize_outfit(image.file.read(), image.filename, image.content_type, details)
    except Exception as exc:
        logger.exception("Outfit visualization failed")
        return _error(500, str(exc) or "An unknown error occurred.")

    return {"b64_json": b64_json}
