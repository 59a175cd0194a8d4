import copy

# Отдается, когда OCR школьного аттестата недоступен: UI не должен блокироваться.
MOCK_LEAVING_CERT_DATA = {
    "school_name": "Mock School (dev mode)",
    "last_class_attended": "X",
    "book_number": "MOCK001",
    "serial_number": "MOCK001",
    "admission_number": "MOCK001",
    "student_name": "Mock Student",
    "father_name": "Mock Father",
    "mother_name": "Mock Mother",
    "nationality": "Indian",
    "belongs_to_sc_st": "NO",
    "date_of_first_admission": "01-01-2020",
    "class_at_first_admission": "I",
    "date_of_birth": "01-01-2010",
    "date_of_birth_in_words": "First January Two Thousand Ten",
    "school_board_exam_result": "Passed",
    "failed_status": "",
    "subjects_studied": ["Maths", "Science", "English"],
    "promoted_to_higher_class": "Yes",
    "school_dues_paid_up_to": "March 2025",
    "fee_concession": "None",
    "total_working_days": "200",
    "total_working_days_present": "195",
    "ncc_cadet_boys_scout_girl_guide": "NO",
    "extracurricular_activities": "Sports",
    "general_conduct": "Good",
    "date_of_application_for_certificate": "01-04-2025",
    "date_of_issue_of_certificate": "01-04-2025",
    "reason_for_leaving": "Promotion",
    "other_remarks": "Good student",
}


def mock_leaving_certificate() -> dict:
    return {"success": True, "data": copy.deepcopy(MOCK_LEAVING_CERT_DATA)}
