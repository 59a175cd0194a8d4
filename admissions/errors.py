import httpx

NO_FILE = "NO_FILE"
INVALID_FORMAT = "INVALID_FORMAT"
EXTRACTION_FAILED = "EXTRACTION_FAILED"


def error_envelope(code: str, message: str) -> dict:
    return {"success": False, "error": {"code": code, "message": message}}


class UploadRejected(Exception):
    """Клиентская ошибка загрузки: файл отсутствует или формат не поддерживается."""

    def __init__(self, code: str, message: str, status_code: int = 400):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code

    def to_body(self) -> dict:
        return error_envelope(self.code, self.message)


class UpstreamContractViolation(Exception):
    """OCR ответил 2xx, но тело не соответствует ожидаемой схеме."""

    def __init__(self, body):
        super().__init__("Unexpected upstream response shape")
        self.body = body


def response_body(response: httpx.Response):
    try:
        return response.json()
    except ValueError:
        return {"detail": response.text}
