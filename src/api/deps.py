from pydantic import BaseModel, Field
from ..core.config import settings
from ..services.vision_ocr import VisionOcrClient

class OcrInvoiceRequest(BaseModel):
    image_base64: str | None = Field(default=None, alias="imageBase64")  # May carry a data-URI header
    image_url: str | None = Field(default=None, alias="imageUrl")

    model_config = {"populate_by_name": True}

class ParseTextRequest(BaseModel):
    text: str = ""

class VinDecodeRequest(BaseModel):
    vin: str | None = None

def get_ocr_client() -> VisionOcrClient:
    """Build the Vision client from current settings (override in tests if needed)"""
    return VisionOcrClient(
        api_key=settings.gcv_api_key,
        endpoint=settings.vision_api_url,
        timeout=settings.vision_timeout_seconds,
    )
