from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Admissions OCR Relay"
    debug_logs: bool = False
    log_level_default: str = "WARNING"

    # Upstream OCR services
    aadhaar_ocr_url: str = "https://smartflows-aadhar-extraction-model-production.up.railway.app/extract"
    leaving_cert_ocr_url: str = (
        "https://smartflows-school-leaving-certificate-t84k.onrender.com/api/v1/extract_certificate_data"
    )

    # Timeouts
    ocr_timeout_seconds: float = 30
    health_timeout_seconds: float = 3

    # Upload validation
    image_whitelist: str = "image/jpeg,image/jpg,image/png"
    aadhaar_validate_format: bool = True
    leaving_cert_validate_format: bool = False

    @property
    def allowed_image_types(self) -> set[str]:
        return {item.strip().lower() for item in self.image_whitelist.split(",") if item.strip()}


settings = Settings()


def get_settings() -> Settings:
    return settings
