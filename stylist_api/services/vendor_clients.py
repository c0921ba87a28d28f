import json
import logging

import requests

from stylist_api import settings

logger = logging.getLogger(__name__)

WEB_SEARCH_TOOL = {"type": "web_search_20250305", "name": "web_search"}


class VendorAPIError(RuntimeError):
    def __init__(
        self,
        vendor: str,
        status: int | None,
        message: str,
        error_type: str | None = None,
        code: str | None = None,
        param: str | None = None,
    ):
        self.vendor = vendor
        self.status = status
        self.message = message
        self.error_type = error_type
        self.code = code
        self.param = param
        super().__init__(self.describe())

    @classmethod
    def from_response(cls, vendor: str, response: requests.Response) -> "VendorAPIError":
        try:
            body = response.json()
        except ValueError:
            body = {}
        error = body.get("error") if isinstance(body, dict) else None
        if not isinstance(error, dict):
            return cls(vendor, response.status_code, response.text[:220] or "empty response body")
        return cls(
            vendor,
            response.status_code,
            str(error.get("message") or response.text[:220]),
            error_type=error.get("type"),
            code=error.get("code"),
            param=error.get("param"),
        )

    def describe(self) -> str:
        text = f"{self.vendor} API Error: {self.status} {self.error_type or 'error'} - {self.message}"
        if self.code:
            text += f" (Code: {self.code})"
        if self.param:
            text += f" (Param: {self.param})"
        return text


def _anthropic_headers(betas: tuple[str, ...] = ()) -> dict:
    if not settings.ANTHROPIC_API_KEY:
        raise RuntimeError("ANTHROPIC_API_KEY is not configured")
    headers = {
        "x-api-key": settings.ANTHROPIC_API_KEY,
        "anthropic-version": settings.ANTHROPIC_VERSION,
        "content-type": "application/json",
    }
    if betas:
        headers["anthropic-beta"] = ",".join(betas)
    return headers


def _openai_headers() -> dict:
    if not settings.OPENAI_API_KEY:
        raise RuntimeError("OPENAI_API_KEY is not configured")
    return {"Authorization": f"Bearer {settings.OPENAI_API_KEY}"}


def _text_blocks(content) -> str:
    if not isinstance(content, list):
        return ""
    parts: list[str] = []
    for block in content:
        if isinstance(block, dict) and block.get("type") == "text":
            txt = block.get("text")
            if isinstance(txt, str):
                parts.append(txt)
    return "".join(parts)


def _stream_events(response: requests.Response):
    for raw_line in response.iter_lines():
        line = raw_line.decode("utf-8") if isinstance(raw_line, bytes) else raw_line
        if not line.startswith("data:"):
            continue
        try:
            event = json.loads(line[5:].strip())
        except ValueError:
            continue
        if isinstance(event, dict):
            yield event


def stream_anthropic_text(payload: dict, betas: tuple[str, ...] = ()) -> str:
    """Send a Messages API request with streaming on and return the concatenated text deltas."""
    headers = _anthropic_headers(betas)
    with requests.post(
        f"{settings.ANTHROPIC_API_BASE.rstrip('/')}/messages",
        headers=headers,
        json={**payload, "stream": True},
        stream=True,
        timeout=settings.VENDOR_TIMEOUT_SECONDS,
    ) as response:
        if response.status_code >= 400:
            raise VendorAPIError.from_response("Anthropic", response)

        parts: list[str] = []
        for event in _stream_events(response):
            event_type = event.get("type")
            if event_type == "content_block_delta":
                delta = event.get("delta") or {}
                if delta.get("type") == "text_delta" and isinstance(delta.get("text"), str):
                    parts.append(delta["text"])
            elif event_type == "error":
                error = event.get("error") or {}
                raise VendorAPIError(
                    "Anthropic",
                    response.status_code,
                    str(error.get("message", "stream error")),
                    error_type=error.get("type"),
                )
            elif event_type == "message_stop":
                break

    return "".join(parts)


def create_anthropic_message_text(payload: dict, betas: tuple[str, ...] = ()) -> str:
    response = requests.post(
        f"{settings.ANTHROPIC_API_BASE.rstrip('/')}/messages",
        headers=_anthropic_headers(betas),
        json=payload,
        timeout=settings.VENDOR_TIMEOUT_SECONDS,
    )
    if response.status_code >= 400:
        raise VendorAPIError.from_response("Anthropic", response)
    return _text_blocks(response.json().get("content"))


def openai_chat_json(system: str, user: str, model: str, temperature: float = 0.5) -> dict:
    response = requests.post(
        f"{settings.OPENAI_API_BASE.rstrip('/')}/chat/completions",
        headers={**_openai_headers(), "Content-Type": "application/json"},
        json={
            "model": model,
            "temperature": temperature,
            "response_format": {"type": "json_object"},
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
        },
        timeout=settings.VENDOR_TIMEOUT_SECONDS,
    )
    if response.status_code >= 400:
        raise VendorAPIError.from_response("OpenAI", response)

    choices = response.json().get("choices") or []
    if not choices:
        raise RuntimeError("OpenAI chat completion returned no choices")
    content = (choices[0].get("message") or {}).get("content")
    if not content:
        raise RuntimeError("OpenAI chat completion returned no content")

    parsed = json.loads(content)
    if not isinstance(parsed, dict):
        raise RuntimeError("OpenAI chat completion content was not a JSON object")
    return parsed


def openai_image_edit(image_bytes: bytes, filename: str, content_type: str, prompt: str) -> str:
    """Submit an image edit and return the base64 payload of the single result."""
    response = requests.post(
        f"{settings.OPENAI_API_BASE.rstrip('/')}/images/edits",
        headers=_openai_headers(),
        files={"image": (filename, image_bytes, content_type)},
        data={
            "model": settings.OPENAI_IMAGE_MODEL,
            "prompt": prompt,
            "n": "1",
            "size": "1024x1024",
            "quality": "high",
        },
        timeout=settings.VENDOR_TIMEOUT_SECONDS,
    )
    if response.status_code >= 400:
        raise VendorAPIError.from_response("OpenAI", response)

    data = response.json().get("data") or []
    if not data:
        logger.error("Image edit response had no data entries")
        raise RuntimeError("OpenAI image edit response was empty or malformed.")

    b64_json = data[0].get("b64_json") if isinstance(data[0], dict) else None
    if not b64_json:
        raise RuntimeError("Failed to edit image or no b64_json data returned by OpenAI in the first data item.")
    return b64_json
