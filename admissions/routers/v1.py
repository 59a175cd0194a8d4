import json
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from ..clients.services import AadhaarOCRClient, LeavingCertificateOCRClient, UploadedFile
from ..config import Settings, get_settings
from ..errors import UploadRejected
from ..schemas import (
    AadhaarExtractionResponse,
    CertificateExtractionResponse,
    ErrorResponse,
    PublicConfig,
    SubmissionResponse,
)
from ..services.extraction import AadhaarExtractor, CertificateExtractor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admissions", tags=["Admissions"])

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def get_aadhaar_client(cfg: Settings = Depends(get_settings)) -> AadhaarOCRClient:
    return AadhaarOCRClient(cfg.aadhaar_ocr_url, cfg.ocr_timeout_seconds)


def get_leaving_cert_client(cfg: Settings = Depends(get_settings)) -> LeavingCertificateOCRClient:
    return LeavingCertificateOCRClient(cfg.leaving_cert_ocr_url, cfg.ocr_timeout_seconds)


def _read_upload(file: UploadFile | None) -> UploadedFile | None:
    if file is None:
        return None
    return UploadedFile(
        filename=file.filename or "upload",
        content=file.file.read(),
        content_type=file.content_type or "",
    )


def _respond(extract, file: UploadFile | None) -> JSONResponse:
    try:
        status, body = extract(_read_upload(file))
    except UploadRejected as exc:
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())
    return JSONResponse(status_code=status, content=body)


@router.get("/config/public", response_model=PublicConfig)
def public_config(cfg: Settings = Depends(get_settings)):
    return {
        "aadhaar_ocr_url": cfg.aadhaar_ocr_url,
        "leaving_cert_ocr_url": cfg.leaving_cert_ocr_url,
        "ocr_timeout_seconds": cfg.ocr_timeout_seconds,
        "health_timeout_seconds": cfg.health_timeout_seconds,
        "image_whitelist": sorted(cfg.allowed_image_types),
        "aadhaar_validate_format": cfg.aadhaar_validate_format,
        "leaving_cert_validate_format": cfg.leaving_cert_validate_format,
    }


@router.post("/extract-aadhaar", response_model=AadhaarExtractionResponse, responses=_ERRORS)
def extract_aadhaar(
    file: UploadFile | None = File(None),
    cfg: Settings = Depends(get_settings),
    client: AadhaarOCRClient = Depends(get_aadhaar_client),
):
    return _respond(AadhaarExtractor(cfg, client).extract, file)


@router.post(
    "/extract-leaving-certificate",
    response_model=CertificateExtractionResponse,
    responses={400: {"model": ErrorResponse}},
)
def extract_leaving_certificate(
    file: UploadFile | None = File(None),
    cfg: Settings = Depends(get_settings),
    client: LeavingCertificateOCRClient = Depends(get_leaving_cert_client),
):
    return _respond(CertificateExtractor(cfg, client).extract, file)


@router.post("/submit-to-sheet", response_model=SubmissionResponse)
def submit_to_sheet(payload: Any = Body(None)):
    logger.info("Submitted student data: %s", json.dumps(payload, ensure_ascii=False, indent=2, default=str))
    # TODO: запись в Google Sheet
    return SubmissionResponse()
