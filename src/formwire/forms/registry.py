"""
Form Registry
Maps form shapes to their codecs and resolves the codec for a form instance.
"""

from dataclasses import dataclass
from typing import Any

from ..components import COMPONENT_CLASSES, Component, ComponentType
from ..core.config import Settings
from ..core.logging_config import get_logger
from ..response import FormResponseResult
from .codec import FormCodec
from .custom import CustomFormCodec
from .modal import ModalFormCodec
from .models import Form, FormType
from .simple import SimpleFormCodec

logger = get_logger(__name__)


@dataclass(frozen=True)
class FormDefinition:
    """A form shape: its discriminator, model class and codec."""

    form_type: FormType
    form_class: type[Form]
    codec: FormCodec

    @classmethod
    def of(cls, codec: FormCodec) -> "FormDefinition":
        return cls(codec.form_type, codec.form_class, codec)


class FormRegistry:
    """
    Registry of form definitions and custom form component classes.

    Registries are plain values: build one with ``FormRegistry.default()`` and
    hand it to whatever encodes or decodes forms.
    """

    def __init__(self, components: dict[ComponentType, type[Component]] | None = None) -> None:
        self._definitions: dict[FormType, FormDefinition] = {}
        self._class_types: dict[type[Form], FormType] = {}
        self.components: dict[ComponentType, type[Component]] = (
            dict(components) if components is not None else dict(COMPONENT_CLASSES)
        )

    @classmethod
    def default(cls, settings: Settings | None = None) -> "FormRegistry":
        """Registry with the simple, modal and custom form definitions."""
        limits: dict[str, Any] = {}
        if settings is not None:
            limits = {"max_size": settings.max_form_size, "max_depth": settings.max_json_depth}

        registry = cls()
        for codec in (
            SimpleFormCodec(**limits),
            ModalFormCodec(**limits),
            CustomFormCodec(registry.components, **limits),
        ):
            if not registry.add_definition(FormDefinition.of(codec)):
                raise RuntimeError(f"Failed to register {codec.form_type.value}")
        return registry

    def add_definition(self, definition: FormDefinition) -> bool:
        """
        Register a form definition.

        Returns:
            False if the form type or form class is already registered
        """
        if definition.form_type in self._definitions:
            logger.warning("form_type_already_registered", form_type=definition.form_type.value)
            return False
        if definition.form_class in self._class_types:
            logger.warning(
                "form_class_already_registered", form_class=definition.form_class.__name__
            )
            return False

        self._definitions[definition.form_type] = definition
        self._class_types[definition.form_class] = definition.form_type
        logger.debug(
            "form_definition_registered",
            form_type=definition.form_type.value,
            form_class=definition.form_class.__name__,
        )
        return True

    def definition(self, form_type: FormType) -> FormDefinition:
        try:
            return self._definitions[FormType(form_type)]
        except (KeyError, ValueError):
            raise KeyError(f"Cannot find implementation for FormType {form_type}") from None

    def codec_for(self, form_type: FormType) -> FormCodec:
        return self.definition(form_type).codec

    def type_for(self, form_class: type[Form]) -> FormType | None:
        """Form type of a form class, including subclasses of registered classes."""
        for klass in form_class.__mro__:
            form_type = self._class_types.get(klass)
            if form_type is not None:
                return form_type
        return None

    def definition_for(self, form: Form) -> FormDefinition:
        """Definition that handles a concrete form instance."""
        form_type = self.type_for(type(form))
        if form_type is None:
            raise KeyError(f"No form definition registered for {type(form).__name__}")
        return self._definitions[form_type]

    def component_class(self, component_type: ComponentType) -> type[Component]:
        try:
            return self.components[component_type]
        except KeyError:
            raise KeyError(f"Cannot find implementation for ComponentType {component_type}") from None

    # Shortcuts resolving the codec on the fly

    def encode(self, form: Form) -> str:
        return self.definition_for(form).codec.encode_json(form)

    def decode(self, json_text: str, form_type: FormType) -> Form:
        return self.codec_for(form_type).decode(json_text)

    def decode_response(self, form: Form, response: str | None) -> FormResponseResult:
        return self.definition_for(form).codec.decode_response(form, response)

    def __contains__(self, form_type: object) -> bool:
        return form_type in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)
