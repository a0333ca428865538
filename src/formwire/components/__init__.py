"""
Form components
Buttons, images and the custom form component kinds.
"""

from .types import ABSENT, Absent, ComponentType, ImageType
from .models import (
    COMPONENT_CLASSES,
    ButtonComponent,
    Component,
    DropdownComponent,
    FormImage,
    InputComponent,
    LabelComponent,
    SliderComponent,
    StepSliderComponent,
    ToggleComponent,
    generate_default_value,
)
from .builders import DropdownBuilder, StepSliderBuilder

__all__ = [
    "ABSENT",
    "Absent",
    "ComponentType",
    "ImageType",
    "COMPONENT_CLASSES",
    "ButtonComponent",
    "Component",
    "DropdownComponent",
    "FormImage",
    "InputComponent",
    "LabelComponent",
    "SliderComponent",
    "StepSliderComponent",
    "ToggleComponent",
    "generate_default_value",
    "DropdownBuilder",
    "StepSliderBuilder",
]
