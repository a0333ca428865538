"""
formwire
Form codecs, reply classification and session tracking for client rendered forms.
"""

from .components import (
    ABSENT,
    ButtonComponent,
    ComponentType,
    DropdownBuilder,
    DropdownComponent,
    FormImage,
    ImageType,
    InputComponent,
    LabelComponent,
    SliderComponent,
    StepSliderBuilder,
    StepSliderComponent,
    ToggleComponent,
)
from .forms import (
    CustomForm,
    Form,
    FormParseError,
    FormRegistry,
    FormType,
    ModalForm,
    SimpleForm,
    safe_decode_form,
)
from .response import (
    CustomFormResponse,
    FormResponseResult,
    ModalFormResponse,
    ResultHandlers,
    ResultType,
    SimpleFormResponse,
)
from .session import FormTransport, SessionTracker

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "ButtonComponent",
    "ComponentType",
    "DropdownBuilder",
    "DropdownComponent",
    "FormImage",
    "ImageType",
    "InputComponent",
    "LabelComponent",
    "SliderComponent",
    "StepSliderBuilder",
    "StepSliderComponent",
    "ToggleComponent",
    "CustomForm",
    "Form",
    "FormParseError",
    "FormRegistry",
    "FormType",
    "ModalForm",
    "SimpleForm",
    "safe_decode_form",
    "CustomFormResponse",
    "FormResponseResult",
    "ModalFormResponse",
    "ResultHandlers",
    "ResultType",
    "SimpleFormResponse",
    "FormTransport",
    "SessionTracker",
]
