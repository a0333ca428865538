"""
Form responses
Result classification of client replies and the typed responses they carry.
"""

from .result import (
    CLOSED,
    ClosedResult,
    FormResponseResult,
    InvalidResult,
    ResultType,
    ValidResult,
    closed,
    invalid,
    valid,
)
from .models import ModalFormResponse, SimpleFormResponse
from .custom import CustomFormResponse
from .handlers import ResultHandler, ResultHandlers

__all__ = [
    "CLOSED",
    "ClosedResult",
    "FormResponseResult",
    "InvalidResult",
    "ResultType",
    "ValidResult",
    "closed",
    "invalid",
    "valid",
    "ModalFormResponse",
    "SimpleFormResponse",
    "CustomFormResponse",
    "ResultHandler",
    "ResultHandlers",
]
