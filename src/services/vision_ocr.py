import httpx
from loguru import logger
from .errors import OcrConfigurationError, OcrUpstreamError


def strip_data_uri_header(image_base64: str) -> str:
    """
    Drop a "data:image/jpeg;base64," style prefix if the client sent one.

    Browsers hand us FileReader.readAsDataURL() output; Vision wants only
    the base64 payload.
    """
    parts = image_base64.split(",", 1)
    return parts[1] if len(parts) > 1 else parts[0]


def build_annotate_payload(image_base64: str | None = None, image_url: str | None = None) -> dict:
    # A remote URL wins when both are supplied
    if image_url:
        image = {"source": {"imageUri": image_url}}
    else:
        image = {"content": strip_data_uri_header(image_base64 or "")}

    return {
        "requests": [
            {
                "image": image,
                "features": [{"type": "DOCUMENT_TEXT_DETECTION"}],
            }
        ]
    }


def extract_full_text(vision_data: dict) -> str:
    """Transcript from responses[0].fullTextAnnotation.text, "" if absent"""
    responses = (vision_data or {}).get("responses") or []
    if not responses:
        return ""
    annotation = (responses[0] or {}).get("fullTextAnnotation") or {}
    return annotation.get("text") or ""


class VisionOcrClient:
    """
    Google Cloud Vision text detection over the REST API.

    The API key is passed in at construction; nothing here reads the
    process environment.
    """

    def __init__(self, api_key: str | None, endpoint: str, timeout: float = 30.0):
        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout

    async def detect_text(self, image_base64: str | None = None, image_url: str | None = None) -> str:
        if not self.api_key:
            raise OcrConfigurationError("Missing GCV_API_KEY env var")

        payload = build_annotate_payload(image_base64=image_base64, image_url=image_url)

        logger.info(
            "Calling Vision API for text detection",
            source="url" if image_url else "inline",
            content_chars=0 if image_url else len(payload["requests"][0]["image"]["content"]),
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                r = await client.post(self.endpoint, params={"key": self.api_key}, json=payload)
        except httpx.HTTPError as e:
            logger.error("Vision API request failed", error=str(e))
            raise OcrUpstreamError(f"Vision API request failed: {e}") from e

        if r.status_code < 200 or r.status_code >= 300:
            logger.error("Vision API returned an error", http_status=r.status_code)
            raise OcrUpstreamError(f"Vision API error {r.status_code}: {r.text}", status_code=r.status_code)

        try:
            vision_data = r.json()
        except ValueError as e:
            raise OcrUpstreamError(f"Vision API returned invalid JSON: {e}") from e

        text = extract_full_text(vision_data)
        logger.info("Vision API text detection complete", text_chars=len(text))
        return text
