from typing import Any

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: ErrorDetail


class AadhaarData(BaseModel):
    aadhaar_number: str = ""
    name: str = ""
    gender: str = ""
    dob: str = ""
    address: str = ""


class AadhaarExtractionResponse(BaseModel):
    success: bool = True
    data: AadhaarData
    detections: Any | None = None
    processing_time: float | None = None


class CertificateExtractionResponse(BaseModel):
    success: bool = True
    data: dict[str, Any]


class SubmissionResponse(BaseModel):
    success: bool = True
    message: str = "Data saved successfully"


class PublicConfig(BaseModel):
    aadhaar_ocr_url: str
    leaving_cert_ocr_url: str
    ocr_timeout_seconds: float
    health_timeout_seconds: float
    image_whitelist: list[str]
    aadhaar_validate_format: bool
    leaving_cert_validate_format: bool
