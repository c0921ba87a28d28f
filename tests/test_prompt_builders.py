import base64
from io import BytesIO
from pathlib import Path
import sys

from PIL import Image

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from stylist_common.schemas import OutfitDetails  # noqa: E402
from stylist_common.tools import prompt_builders  # noqa: E402


def _image_bytes(fmt: str) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (8, 8), (200, 30, 30)).save(buffer, format=fmt)
    return buffer.getvalue()


DETAILS = OutfitDetails(
    title="Weekend Brunch",
    description="Light And Airy layers",
    items=["Linen shirt", "Chinos", "Loafers"],
)


def test_media_type_whitelist():
    assert prompt_builders.resolve_media_type("image/png") == "image/png"
    assert prompt_builders.resolve_media_type("image/webp") == "image/webp"
    assert prompt_builders.resolve_media_type("image/bmp") == "image/jpeg"
    assert prompt_builders.resolve_media_type(None) == "image/jpeg"


def test_bmp_upload_is_sent_as_jpeg():
    block = prompt_builders.build_image_block(_image_bytes("BMP"), "image/bmp")

    assert block["type"] == "image"
    assert block["source"]["media_type"] == "image/jpeg"
    decoded = base64.b64decode(block["source"]["data"])
    assert Image.open(BytesIO(decoded)).format == "JPEG"


def test_whitelisted_upload_keeps_original_bytes():
    raw = _image_bytes("PNG")

    block = prompt_builders.build_image_block(raw, "image/png")

    assert block["source"]["media_type"] == "image/png"
    assert base64.b64decode(block["source"]["data"]) == raw


def test_undecodable_upload_is_passed_through():
    block = prompt_builders.build_image_block(b"not really an image", "application/octet-stream")

    assert block["source"]["media_type"] == "image/jpeg"
    assert base64.b64decode(block["source"]["data"]) == b"not really an image"


def test_style_messages_keep_image_order():
    blocks = [{"type": "image", "source": {"data": str(idx)}} for idx in range(3)]

    messages = prompt_builders.build_style_messages(blocks)

    assert len(messages) == 1
    content = messages[0]["content"]
    assert content[0] == {"type": "text", "text": prompt_builders.STYLE_USER_INSTRUCTION}
    assert [block["source"]["data"] for block in content[1:]] == ["0", "1", "2"]


def test_keyword_input_joins_items():
    assert prompt_builders.build_keyword_input(DETAILS) == (
        "Title: Weekend Brunch\nDescription: Light And Airy layers\nItems: Linen shirt, Chinos, Loafers"
    )


def test_edit_prompt_with_keywords():
    prompt = prompt_builders.build_edit_prompt(DETAILS, "breezy, neutral, relaxed")

    assert "titled 'Weekend Brunch' (light and airy layers)" in prompt
    assert "Key items include: Linen shirt, Chinos, Loafers." in prompt
    assert "Incorporate these style keywords and ambiance: breezy, neutral, relaxed." in prompt


def test_edit_prompt_without_keywords():
    prompt = prompt_builders.build_edit_prompt(DETAILS, "")

    assert "Incorporate these style keywords" not in prompt
    assert prompt.endswith("clean, minimalist studio background.")


def test_image_search_prompt_mentions_limit_and_query():
    prompt = prompt_builders.build_image_search_prompt("red dress", 4)

    assert 'I need 4 high quality images of "red dress"' in prompt
    assert "JSON array" in prompt
