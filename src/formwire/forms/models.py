"""Form Data Models."""

from enum import Enum
from typing import TYPE_CHECKING

from ..components import Absent, ButtonComponent, Component, FormImage
from ..components.models import WireModel

if TYPE_CHECKING:
    from .builders import CustomFormBuilder, ModalFormBuilder, SimpleFormBuilder


class FormType(str, Enum):
    """Form shapes and their wire discriminator."""

    SIMPLE_FORM = "form"
    MODAL_FORM = "modal"
    CUSTOM_FORM = "custom_form"


class Form(WireModel):
    """Base of the three form shapes."""

    title: str


class SimpleForm(Form):
    """Title, content and a list of buttons. Buttons may be ABSENT."""

    content: str = ""
    buttons: tuple[ButtonComponent | Absent, ...] = ()

    @classmethod
    def builder(cls) -> "SimpleFormBuilder":
        from .builders import SimpleFormBuilder

        return SimpleFormBuilder()


class ModalForm(Form):
    """Title, content and exactly two buttons."""

    content: str = ""
    button1: str
    button2: str

    @classmethod
    def builder(cls) -> "ModalFormBuilder":
        from .builders import ModalFormBuilder

        return ModalFormBuilder()


class CustomForm(Form):
    """Title, optional icon and a list of components. Components may be ABSENT."""

    icon: FormImage | None = None
    content: tuple[Component | Absent, ...] = ()

    @classmethod
    def builder(cls) -> "CustomFormBuilder":
        from .builders import CustomFormBuilder

        return CustomFormBuilder()
