"""Domain enumerations."""

import enum


class ErrorCode(str, enum.Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    SERVER_ERROR = "SERVER_ERROR"
    RIDES_NOT_FOUND_ERROR = "RIDES_NOT_FOUND_ERROR"
