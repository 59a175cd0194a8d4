from fastapi import FastAPI, File, UploadFile

app = FastAPI(title="ocr-stub")


# Заглушка обоих OCR-сервисов для smoke и локального запуска.
@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/extract")
def extract_aadhaar(file: UploadFile = File(...)):
    return {
        "success": True,
        "data": {
            "AADHAR_NUMBER": "1234 5678 9012",
            "NAME": "Stub Applicant",
            "GENDER": "MALE",
            "DOB": "01-01-2010",
            "ADDRESS": f"Parsed from {file.filename}",
        },
        "detections": [],
        "processing_time": 0.01,
    }


@app.post("/api/v1/extract_certificate_data")
def extract_certificate(file: UploadFile = File(...)):
    return {
        "status": "success",
        "data": {
            "school_name": "Stub School",
            "last_class_attended": "X",
            "all_extracted_data": {
                "student_name": "Stub Applicant",
                "source_file": file.filename,
            },
        },
    }
