from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    app_name: str = Field("paint-invoice-ocr", alias="APP_NAME")
    app_env: str = Field("dev", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # Google Cloud Vision (OCR)
    gcv_api_key: str | None = Field(default=None, alias="GCV_API_KEY")
    vision_api_url: str = Field("https://vision.googleapis.com/v1/images:annotate", alias="VISION_API_URL")
    vision_timeout_seconds: float = Field(30.0, alias="VISION_TIMEOUT_SECONDS")

    # NHTSA vPIC (VIN decoding, no key needed)
    nhtsa_api_url: str = Field(
        "https://vpic.nhtsa.dot.gov/api/vehicles/DecodeVinValuesExtended", alias="NHTSA_API_URL"
    )
    vin_timeout_seconds: float = Field(10.0, alias="VIN_TIMEOUT_SECONDS")

    # Length of the raw-text excerpt used as the last-resort notes value
    notes_excerpt_chars: int = Field(800, alias="NOTES_EXCERPT_CHARS")

    # CORS allowed origins (comma-separated list for production deployment)
    cors_origins: str = Field("http://localhost:3000,http://127.0.0.1:3000", alias="CORS_ORIGINS")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

settings = Settings()
