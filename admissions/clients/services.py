from dataclasses import dataclass
import logging
import re

import httpx

logger = logging.getLogger(__name__)


@dataclass
class UploadedFile:
    filename: str
    content: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.content)


class _MultipartOCRClient:
    def __init__(self, url: str, timeout: float, transport: httpx.BaseTransport | None = None):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    def extract(self, upload: UploadedFile):
        files = {"file": (upload.filename, upload.content, upload.content_type)}
        with httpx.Client(timeout=self.timeout, transport=self.transport, follow_redirects=True) as client:
            response = client.post(self.url, files=files)
            response.raise_for_status()
            try:
                return response.json()
            except ValueError:
                # Не JSON: отдаем тело как есть, решение принимает вызывающий
                return response.text


class AadhaarOCRClient(_MultipartOCRClient):
    pass


class LeavingCertificateOCRClient(_MultipartOCRClient):
    pass


def derive_root_url(url: str) -> str:
    """Корень сервиса: без хвоста /extract или /api/..."""
    root = re.sub(r"/extract$", "", url)
    return re.sub(r"/api.*$", "", root)


def is_ocr_healthy(url: str, timeout: float, transport: httpx.BaseTransport | None = None) -> bool:
    health_url = f"{derive_root_url(url)}/health"
    try:
        with httpx.Client(timeout=timeout, transport=transport, follow_redirects=True) as client:
            response = client.get(health_url)
            response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("OCR health check: %s is unhealthy - %s", url, exc)
        return False
    logger.info("OCR health check: %s is healthy", url)
    return True
