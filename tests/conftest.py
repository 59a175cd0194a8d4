import httpx
import pytest
from fastapi.testclient import TestClient

from admissions.clients.services import AadhaarOCRClient, LeavingCertificateOCRClient
from admissions.config import Settings, get_settings
from admissions.main import app
from admissions.routers.v1 import get_aadhaar_client, get_leaving_cert_client

AADHAAR_URL = "http://aadhaar-ocr.test/extract"
LEAVING_CERT_URL = "http://cert-ocr.test/api/v1/extract_certificate_data"


class FakeUpstream:
    """Записывает исходящие запросы и отвечает заданными функциями по пути."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def on(self, method: str, url: str, handler):
        self.routes[(method, url)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        handler = self.routes.get((request.method, str(request.url)))
        if handler is None:
            return httpx.Response(404, json={"detail": "no route"})
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def paths(self) -> list[str]:
        return [f"{r.method} {r.url}" for r in self.calls]


@pytest.fixture
def test_settings():
    return Settings(aadhaar_ocr_url=AADHAAR_URL, leaving_cert_ocr_url=LEAVING_CERT_URL)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def client(test_settings, upstream):
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_aadhaar_client] = lambda: AadhaarOCRClient(
        test_settings.aadhaar_ocr_url, test_settings.ocr_timeout_seconds, transport=upstream.transport
    )
    app.dependency_overrides[get_leaving_cert_client] = lambda: LeavingCertificateOCRClient(
        test_settings.leaving_cert_ocr_url, test_settings.ocr_timeout_seconds, transport=upstream.transport
    )
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def png_file():
    return {"file": ("card.png", b"\x89PNG fake image", "image/png")}
