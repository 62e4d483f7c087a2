from urllib.parse import quote
import httpx
from loguru import logger
from pydantic import BaseModel
from .errors import VinLookupError

MIN_VIN_LENGTH = 11


class DecodedVin(BaseModel):
    vin: str
    year: str = ""
    make: str = ""
    model: str = ""
    raw: dict = {}  # Full NHTSA result row


def normalize_vin(vin: str | None) -> str:
    return (vin or "").strip().upper()


def is_valid_vin(vin: str) -> bool:
    # Pre-1981 VINs can be as short as 11 characters
    return len(vin) >= MIN_VIN_LENGTH


async def decode_vin(vin: str, base_url: str, timeout: float = 10.0) -> DecodedVin:
    """Look up year/make/model with the free NHTSA vPIC API (no key needed)"""
    url = f"{base_url.rstrip('/')}/{quote(vin, safe='')}"

    logger.info("Decoding VIN via NHTSA", vin=vin)
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            r = await client.get(url, params={"format": "json"})
    except httpx.HTTPError as e:
        logger.error("VIN API request failed", error=str(e))
        raise VinLookupError(f"VIN API request failed: {e}") from e

    if r.status_code < 200 or r.status_code >= 300:
        raise VinLookupError(f"VIN API error {r.status_code}: {r.text}", status_code=r.status_code)

    try:
        data = r.json()
    except ValueError as e:
        raise VinLookupError(f"VIN API returned invalid JSON: {e}") from e

    results = data.get("Results") or []
    result = results[0] if results and isinstance(results[0], dict) else {}

    return DecodedVin(
        vin=vin,
        year=result.get("ModelYear") or "",
        make=result.get("Make") or "",
        model=result.get("Model") or "",
        raw=result,
    )
