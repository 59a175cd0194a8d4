import httpx
import pytest

from admissions.clients.services import (
    AadhaarOCRClient,
    LeavingCertificateOCRClient,
    UploadedFile,
    derive_root_url,
    is_ocr_healthy,
)
from admissions.config import Settings
from admissions.errors import UpstreamContractViolation
from admissions.mock_data import MOCK_LEAVING_CERT_DATA, mock_leaving_certificate
from admissions.services.extraction import CertificateExtractor
from admissions.services.fallback import FallbackChain
from admissions.services.mapping import AADHAAR_FIELDS, FieldMapping, flatten_certificate, remap_fields


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://ocr.example.com/extract", "https://ocr.example.com"),
        ("https://ocr.example.com/api/v1/extract_certificate_data", "https://ocr.example.com"),
        ("https://ocr.example.com/api/extract", "https://ocr.example.com"),
        ("http://localhost:8080", "http://localhost:8080"),
    ],
)
def test_derive_root_url(url, expected):
    assert derive_root_url(url) == expected


def test_health_probe_true_on_2xx():
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json={"status": "ok"})

    assert is_ocr_healthy("http://ocr.test/extract", 3, transport=httpx.MockTransport(handler)) is True
    assert seen == ["http://ocr.test/health"]


@pytest.mark.parametrize(
    "handler",
    [
        lambda r: httpx.Response(500),
        lambda r: httpx.Response(404),
    ],
)
def test_health_probe_false_on_error_status(handler):
    assert is_ocr_healthy("http://ocr.test/extract", 3, transport=httpx.MockTransport(handler)) is False


@pytest.mark.parametrize("error", [httpx.ConnectError, httpx.ConnectTimeout, httpx.ReadTimeout])
def test_health_probe_never_raises(error):
    def handler(request):
        raise error("unreachable", request=request)

    assert is_ocr_healthy("http://ocr.test/extract", 3, transport=httpx.MockTransport(handler)) is False


def test_health_probe_invalid_url():
    assert is_ocr_healthy("not a url", 3) is False


def test_ocr_client_raises_for_status():
    client = AadhaarOCRClient(
        "http://ocr.test/extract", 30, transport=httpx.MockTransport(lambda r: httpx.Response(422, json={}))
    )
    with pytest.raises(httpx.HTTPStatusError):
        client.extract(UploadedFile("a.png", b"x", "image/png"))


def test_remap_fields_defaults_missing_and_null():
    result = remap_fields(AADHAAR_FIELDS, {"AADHAR_NUMBER": "1234", "NAME": None, "EXTRA": "ignored"})
    assert result == {"aadhaar_number": "1234", "name": "", "gender": "", "dob": "", "address": ""}


def test_remap_fields_custom_table():
    table = (FieldMapping("A", "a", default="-"),)
    assert remap_fields(table, None) == {"a": "-"}


def test_flatten_certificate_nested_keys_win():
    data = {
        "school_name": "S",
        "last_class_attended": "IX",
        "ignored": True,
        "all_extracted_data": {"last_class_attended": "X", "student_name": "N"},
    }
    assert flatten_certificate(data) == {"school_name": "S", "last_class_attended": "X", "student_name": "N"}


def test_flatten_certificate_without_nested_map():
    assert flatten_certificate({"school_name": "S", "all_extracted_data": None}) == {"school_name": "S"}


def test_fallback_chain_uses_primary_result():
    chain = FallbackChain(primary=lambda: {"real": True}, substitute=lambda: {"mock": True})
    assert chain() == {"real": True}


def test_fallback_chain_substitutes_on_skip_and_error():
    def broken():
        raise RuntimeError("boom")

    assert FallbackChain(primary=lambda: None, substitute=lambda: "mock")() == "mock"
    assert FallbackChain(primary=broken, substitute=lambda: "mock")() == "mock"


def test_fallback_chain_passthrough():
    def violating():
        raise UpstreamContractViolation({"status": "odd"})

    chain = FallbackChain(primary=violating, substitute=lambda: "mock", passthrough=(UpstreamContractViolation,))
    with pytest.raises(UpstreamContractViolation):
        chain()


def test_mock_is_a_copy():
    body = mock_leaving_certificate()
    body["data"]["subjects_studied"].append("History")
    assert MOCK_LEAVING_CERT_DATA["subjects_studied"] == ["Maths", "Science", "English"]
    assert len(MOCK_LEAVING_CERT_DATA) == 29


def test_certificate_extractor_probe_gets_health_timeout():
    cfg = Settings(health_timeout_seconds=2, ocr_timeout_seconds=45)
    client = LeavingCertificateOCRClient(cfg.leaving_cert_ocr_url, cfg.ocr_timeout_seconds)
    extractor = CertificateExtractor(cfg, client)
    assert extractor.probe.keywords["timeout"] == 2


def test_ocr_client_returns_text_for_non_json_body():
    client = AadhaarOCRClient(
        "http://ocr.test/extract", 30, transport=httpx.MockTransport(lambda r: httpx.Response(200, text="plain"))
    )
    assert client.extract(UploadedFile("a.png", b"x", "image/png")) == "plain"
