from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldMapping:
    source: str
    target: str
    default: Any = ""


# Схема ответа Aadhaar OCR -> схема фронтенда
AADHAAR_FIELDS: tuple[FieldMapping, ...] = (
    FieldMapping("AADHAR_NUMBER", "aadhaar_number"),
    FieldMapping("NAME", "name"),
    FieldMapping("GENDER", "gender"),
    FieldMapping("DOB", "dob"),
    FieldMapping("ADDRESS", "address"),
)

AADHAAR_PASSTHROUGH = ("detections", "processing_time")

CERTIFICATE_TOP_LEVEL = ("school_name", "last_class_attended")
CERTIFICATE_NESTED = "all_extracted_data"


def remap_fields(table: tuple[FieldMapping, ...], data: dict | None) -> dict:
    data = data if isinstance(data, dict) else {}
    result = {}
    for field in table:
        value = data.get(field.source)
        result[field.target] = field.default if value in (None, "") else value
    return result


def flatten_certificate(data: dict | None) -> dict:
    data = data if isinstance(data, dict) else {}
    flat = {key: data[key] for key in CERTIFICATE_TOP_LEVEL if key in data}
    nested = data.get(CERTIFICATE_NESTED)
    if isinstance(nested, dict):
        flat.update(nested)
    return flat
