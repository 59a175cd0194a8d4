from functools import partial
import json
import logging
from typing import Callable

import httpx

from ..clients.services import AadhaarOCRClient, LeavingCertificateOCRClient, UploadedFile, is_ocr_healthy
from ..config import Settings
from ..errors import (
    EXTRACTION_FAILED,
    INVALID_FORMAT,
    NO_FILE,
    UploadRejected,
    UpstreamContractViolation,
    error_envelope,
    response_body,
)
from ..mock_data import mock_leaving_certificate
from .fallback import FallbackChain
from .mapping import AADHAAR_FIELDS, AADHAAR_PASSTHROUGH, flatten_certificate, remap_fields

logger = logging.getLogger(__name__)


def _dump(data) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2, default=str)


def validate_upload(upload: UploadedFile | None, label: str, cfg: Settings, check_format: bool) -> UploadedFile:
    if upload is None:
        logger.info("%s: no file uploaded", label)
        raise UploadRejected(NO_FILE, "No file uploaded")
    logger.info(
        '%s: processing file "%s" (size: %d bytes, mimetype: %s)',
        label,
        upload.filename,
        upload.size,
        upload.content_type,
    )
    if check_format and (upload.content_type or "").lower() not in cfg.allowed_image_types:
        logger.info("%s: unsupported file format %s", label, upload.content_type)
        raise UploadRejected(INVALID_FORMAT, "Only JPG, JPEG, and PNG formats are supported")
    return upload


class AadhaarExtractor:
    label = "Aadhaar extraction"

    def __init__(self, cfg: Settings, client: AadhaarOCRClient):
        self.cfg = cfg
        self.client = client

    def extract(self, upload: UploadedFile | None) -> tuple[int, dict]:
        upload = validate_upload(upload, self.label, self.cfg, self.cfg.aadhaar_validate_format)
        try:
            payload = self.client.extract(upload)
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            body = response_body(exc.response)
            logger.error("Aadhaar OCR error: %s (url=%s, status=%s, body=%s)", exc, self.client.url, status, body)
            if 400 <= status < 500:
                forwarded = body if isinstance(body, dict) else {"detail": body}
                return status, {"success": False, **forwarded}
            return 500, error_envelope(EXTRACTION_FAILED, str(exc))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Aadhaar OCR error: %s (url=%s)", exc, self.client.url, exc_info=True)
            return 500, error_envelope(EXTRACTION_FAILED, str(exc) or exc.__class__.__name__)

        if not isinstance(payload, dict) or not payload.get("success"):
            # Например, ошибка валидации на стороне OCR
            logger.warning("Aadhaar OCR returned non-success: %s", _dump(payload))
            return 400, payload

        data = payload.get("data")
        if data is None:
            logger.error("Aadhaar OCR success response without data: %s", _dump(payload))
            return 500, error_envelope(EXTRACTION_FAILED, "OCR response has no data")

        result = {"success": True, "data": remap_fields(AADHAAR_FIELDS, data)}
        for key in AADHAAR_PASSTHROUGH:
            if key in payload:
                result[key] = payload[key]
        logger.info("Aadhaar OCR successful, mapped data: %s", _dump(result["data"]))
        return 200, result


class CertificateExtractor:
    label = "Leaving-cert extraction"

    def __init__(
        self,
        cfg: Settings,
        client: LeavingCertificateOCRClient,
        probe: Callable[[str], bool] | None = None,
    ):
        self.cfg = cfg
        self.client = client
        self.probe = probe or partial(
            is_ocr_healthy, timeout=cfg.health_timeout_seconds, transport=client.transport
        )

    def extract(self, upload: UploadedFile | None) -> tuple[int, dict]:
        upload = validate_upload(upload, self.label, self.cfg, self.cfg.leaving_cert_validate_format)
        chain = FallbackChain(
            primary=partial(self._extract_real, upload),
            substitute=self._mock,
            name=self.label,
            passthrough=(UpstreamContractViolation,),
        )
        try:
            return 200, chain()
        except UpstreamContractViolation as exc:
            logger.warning("Leaving-cert OCR: unexpected response shape: %s", _dump(exc.body))
            return 502, exc.body

    def _extract_real(self, upload: UploadedFile) -> dict | None:
        if not self.probe(self.client.url):
            logger.warning("Leaving-cert OCR unreachable, skipping extraction")
            return None

        logger.info("Leaving-cert OCR: sending request to %s", self.client.url)
        try:
            payload = self.client.extract(upload)
        except httpx.HTTPStatusError as exc:
            logger.error("Leaving-cert OCR error details: %s", response_body(exc.response))
            raise
        logger.info("Leaving-cert OCR: request completed")

        if not isinstance(payload, dict) or payload.get("status") != "success":
            raise UpstreamContractViolation(payload)
        data = payload.get("data")
        if data is None:
            raise ValueError("Leaving-cert OCR response has no data")

        flat = flatten_certificate(data)
        logger.info("Leaving-cert OCR successful, extracted data: %s", _dump(flat))
        return {"success": True, "data": flat}

    def _mock(self) -> dict:
        body = mock_leaving_certificate()
        logger.info("%s: returning mock data: %s", self.label, _dump(body["data"]))
        return body
