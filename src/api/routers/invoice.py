from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from ..deps import OcrInvoiceRequest, ParseTextRequest, get_ocr_client
from ...core.config import settings
from ...services.invoice_types import InvoiceSummary
from ...services.invoice_parser import parse_invoice_text, empty_summary
from ...services.vision_ocr import VisionOcrClient

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.post("/ocr", response_model=InvoiceSummary)
async def ocr_invoice(req: OcrInvoiceRequest, ocr: VisionOcrClient = Depends(get_ocr_client)):
    """
    OCR a photographed paint invoice and extract its fields.

    Accepts either:
    - imageBase64: inline image bytes, optionally with a data-URI header
    - imageUrl: a publicly reachable image

    Example response:
    {
        "supplier": "PAINT MY RIDE",
        "invoice_number": "1807583",
        "cost": 202.0,
        "notes": "Unknown | k3g | 122.00 | 2 Quart"
    }
    """
    if not req.image_base64 and not req.image_url:
        raise HTTPException(status_code=400, detail="imageBase64 or imageUrl required")

    logger.info(
        "OCR invoice request received",
        has_image_url=bool(req.image_url),
        image_base64_chars=len(req.image_base64) if req.image_base64 else 0,
    )

    # OcrError subclasses propagate to the handlers registered in main
    text = await ocr.detect_text(image_base64=req.image_base64, image_url=req.image_url)

    if not text.strip():
        logger.info("OCR returned no text")
        return empty_summary()

    summary = parse_invoice_text(text, excerpt_chars=settings.notes_excerpt_chars)
    logger.info(
        "Invoice fields extracted",
        supplier=summary.supplier,
        invoice_number=summary.invoice_number,
        cost=summary.cost,
    )
    return summary


@router.post("/parse-text", response_model=InvoiceSummary)
async def parse_text(req: ParseTextRequest):
    """Run the field extractors on a transcript produced elsewhere"""
    logger.info("Parse-text request received", text_chars=len(req.text))
    if not req.text.strip():
        return empty_summary()
    return parse_invoice_text(req.text, excerpt_chars=settings.notes_excerpt_chars)
