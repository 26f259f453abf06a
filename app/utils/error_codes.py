# app/utils/error_codes.py

ERROR_CODES = {
    "VALIDATION_ERROR": "VALIDATION_ERROR",
    "CONFLICT": "CONFLICT",
    "NOT_FOUND": "NOT_FOUND",
    "METHOD_NOT_ALLOWED": "METHOD_NOT_ALLOWED",
    "SERVER_ERROR": "SERVER_ERROR",
}

HTTP_STATUS_TO_ERROR_CODE = {
    400: ERROR_CODES["VALIDATION_ERROR"],
    404: ERROR_CODES["NOT_FOUND"],
    405: ERROR_CODES["METHOD_NOT_ALLOWED"],
    422: ERROR_CODES["VALIDATION_ERROR"],
    500: ERROR_CODES["SERVER_ERROR"],
}
