# app/utils/validation_functions.py
import re
from app.core.config import CAFE_DESCRIPTION_MAX_LENGTH, EMPLOYEE_ID_DIGITS, EMPLOYEE_ID_PREFIX
from app.models.enums import Gender

def validate_email(email: str) -> bool:
    pattern = r'[\w\.-]+@[\w\.-]+\.\w+'
    return isinstance(email, str) and re.fullmatch(pattern, email) is not None

def validate_phone_number(phone: str) -> bool:
    """
    Local mobile numbers only: 8 digits, first digit 8 or 9.
    Accepts 91234567 or 81234567, rejects 71234567 and +6591234567.
    """
    return isinstance(phone, str) and re.fullmatch(r"[89]\d{7}", phone) is not None

def validate_employee_id(employee_id: str) -> bool:
    pattern = rf"{EMPLOYEE_ID_PREFIX}\d{{{EMPLOYEE_ID_DIGITS}}}"
    return isinstance(employee_id, str) and re.fullmatch(pattern, employee_id) is not None

def validate_gender(gender: str) -> bool:
    """
    Checks if the provided gender exists in the Gender enum.
    Matching is on the enum value, so "Female" is valid and "female" is not.
    """
    return isinstance(gender, str) and gender in Gender._value2member_map_

def validate_description(description: str) -> bool:
    return isinstance(description, str) and len(description) <= CAFE_DESCRIPTION_MAX_LENGTH

def is_blank(value) -> bool:
    return not isinstance(value, str) or not value.strip()
