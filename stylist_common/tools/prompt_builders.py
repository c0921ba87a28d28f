import base64
import logging
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from stylist_common.schemas import OutfitDetails

logger = logging.getLogger(__name__)

ALLOWED_MEDIA_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")
DEFAULT_MEDIA_TYPE = "image/jpeg"

STYLE_SYSTEM_PROMPT = """Style Recommendation API System Prompt
You are an AI assistant operating as a clothing style recommendation service. Your primary function is to analyze clothing images uploaded by users and provide personalized style suggestions.

CRITICAL INSTRUCTION: You must ONLY output a valid JSON object and nothing else. Do not include any explanatory text, markdown formatting, or code blocks. Just the raw JSON.

Follow these steps precisely:
1. Analyze the clothing images
2. Create style recommendations
3. Output ONLY a JSON object with this exact structure:

{
  "outfitIdeas": [
    {
      "title": "Urban Casual",
      "description": "A relaxed yet stylish look perfect for city outings",
      "items": [
        "Pair with dark wash slim jeans",
        "Add white sneakers for a clean look",
        "Layer with a denim or leather jacket for cooler weather"
      ]
    }
  ],
  "colorMatching": {
    "complementaryColors": ["#3B5F41", "#2B4073", "#6B4C39"],
    "avoidColors": ["#FF5733", "#D1B000"]
  },
  "seasonalRecommendations": {
    "spring": "Light layering with pastels",
    "summer": "Keep it breathable with lighter fabrics",
    "fall": "Add earth tones and light outerwear",
    "winter": "Layer with heavier items in darker tones"
  }
}"""

STYLE_USER_INSTRUCTION = (
    "Analyze these clothing items and provide style recommendations in JSON format only. "
    "Just give me the raw JSON with no explanations or markdown."
)

KEYWORD_SYSTEM_PROMPT = (
    "You are given a description of an outfit/clothing style. Generate 5-10 keywords as a comma "
    'separated string. Return JSON only in this format: { "keywords": "keyword1, keyword2, ..." }'
)

IMAGE_SEARCH_SYSTEM_PROMPT = (
    "You are a helpful assistant specialized in finding fashion-related images. "
    "Only respond with valid JSON arrays following the requested format."
)


def resolve_media_type(declared: str | None) -> str:
    declared = (declared or "").strip().lower()
    return declared if declared in ALLOWED_MEDIA_TYPES else DEFAULT_MEDIA_TYPE


def _reencode_as_jpeg(data: bytes, quality: int = 90) -> bytes | None:
    try:
        img = Image.open(BytesIO(data)).convert("RGB")
    except (UnidentifiedImageError, OSError):
        return None
    buffer = BytesIO()
    img.save(buffer, format="JPEG", quality=quality, optimize=True)
    return buffer.getvalue()


def build_image_block(data: bytes, declared_type: str | None) -> dict:
    """Base64 image content block for the vision model.

    Only jpeg, png, gif and webp are accepted upstream; any other upload is
    labelled image/jpeg and, when Pillow can read it, converted to match.
    """
    media_type = resolve_media_type(declared_type)
    if media_type != (declared_type or "").strip().lower():
        converted = _reencode_as_jpeg(data)
        if converted is None:
            logger.warning("Could not decode %s upload, sending original bytes as %s", declared_type, media_type)
        else:
            data = converted

    return {
        "type": "image",
        "source": {
            "type": "base64",
            "media_type": media_type,
            "data": base64.b64encode(data).decode("utf-8"),
        },
    }


def build_style_messages(image_blocks: list[dict]) -> list[dict]:
    content: list[dict] = [{"type": "text", "text": STYLE_USER_INSTRUCTION}]
    content.extend(image_blocks)
    return [{"role": "user", "content": content}]


def build_keyword_input(details: OutfitDetails) -> str:
    return f"Title: {details.title}\nDescription: {details.description}\nItems: {', '.join(details.items)}"


def build_edit_prompt(details: OutfitDetails, keywords: str = "") -> str:
    keyword_clause = f"Incorporate these style keywords and ambiance: {keywords}. " if keywords else ""
    return (
        "Using the provided clothing item image as the main piece, display it on a photorealistic mannequin. \n"
        f"The complete outfit is titled '{details.title}' ({details.description.lower()}). \n"
        f"Key items include: {', '.join(details.items)}. \n"
        f"{keyword_clause}\n"
        "Ensure the original item from the image is accurately represented and not modified in any way. "
        "Maintain a full body shot against a clean, minimalist studio background."
    )


def build_image_search_prompt(query: str, limit: int) -> str:
    return (
        f'I need {limit} high quality images of "{query}" for a fashion mood board.\n'
        "Please search the web and find visually appealing fashion images related to this query.\n"
        "\n"
        "Return ONLY a JSON array of image objects, each with:\n"
        "1. url: The direct image URL\n"
        "2. title: A short descriptive title\n"
        "3. source: The source website\n"
        "\n"
        "Return the JSON and NOTHING else."
    )
