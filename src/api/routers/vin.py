from fastapi import APIRouter, HTTPException
from ..deps import VinDecodeRequest
from ...core.config import settings
from ...services.vin_decoder import DecodedVin, decode_vin, normalize_vin, is_valid_vin

router = APIRouter(prefix="/vin", tags=["vin"])


@router.post("/decode", response_model=DecodedVin)
async def decode(req: VinDecodeRequest):
    """Decode a vehicle VIN into year/make/model for the repair order"""
    vin = normalize_vin(req.vin)
    if not is_valid_vin(vin):
        raise HTTPException(status_code=400, detail="Invalid VIN")

    return await decode_vin(vin, base_url=settings.nhtsa_api_url, timeout=settings.vin_timeout_seconds)
