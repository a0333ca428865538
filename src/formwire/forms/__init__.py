"""
Forms
Form shapes, their builders and wire codecs, and the registry tying them together.
"""

from .models import CustomForm, Form, FormType, ModalForm, SimpleForm
from .builders import (
    CustomFormBuilder,
    FormBuilder,
    ModalFormBuilder,
    SimpleFormBuilder,
    Translator,
)
from .codec import FormCodec, FormParseError, is_closed_response
from .simple import SimpleFormCodec
from .modal import ModalFormCodec
from .custom import CustomFormCodec, validate_value
from .registry import FormDefinition, FormRegistry
from .validate import DecodeFailure, safe_decode_form

__all__ = [
    # Models
    "CustomForm",
    "Form",
    "FormType",
    "ModalForm",
    "SimpleForm",
    # Builders
    "CustomFormBuilder",
    "FormBuilder",
    "ModalFormBuilder",
    "SimpleFormBuilder",
    "Translator",
    # Codecs
    "FormCodec",
    "FormParseError",
    "is_closed_response",
    "SimpleFormCodec",
    "ModalFormCodec",
    "CustomFormCodec",
    "validate_value",
    # Registry
    "FormDefinition",
    "FormRegistry",
    "DecodeFailure",
    "safe_decode_form",
]
