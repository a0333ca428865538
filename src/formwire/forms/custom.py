"""Custom form codec."""

import math
from collections.abc import Mapping
from typing import Any

from ..components import (
    ABSENT,
    COMPONENT_CLASSES,
    Component,
    ComponentType,
    FormImage,
)
from ..core.json import JSONParseError, loads
from ..response import CustomFormResponse, FormResponseResult, invalid, valid
from .codec import FormCodec, FormParseError, list_member, string_member
from .models import CustomForm, FormType


class ResponseValueError(ValueError):
    """A reply value does not fit its component."""


def json_kind(value: Any) -> str:
    """JSON type name of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _expected(kind: ComponentType, what: str, value: Any) -> ResponseValueError:
    return ResponseValueError(
        f"Return value of {kind.display_name} should be {what}, got {json_kind(value)}"
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_value(component: Component, value: Any) -> Any:
    """
    Check a reply value against the component it answers.

    Returns:
        The typed value: None for labels, str for inputs, float for sliders,
        int for step sliders and dropdowns, bool for toggles

    Raises:
        ResponseValueError: If the value has the wrong JSON type
    """
    kind = component.component_type

    if kind is ComponentType.LABEL:
        if value is None:
            return None
        raise _expected(kind, "null", value)

    if isinstance(value, (dict, list)) or value is None:
        raise _expected(kind, "a JSON primitive", value)

    if kind is ComponentType.INPUT:
        if isinstance(value, str):
            return value
        raise _expected(kind, "a string", value)

    if kind is ComponentType.SLIDER:
        if not _is_number(value):
            raise _expected(kind, "a number", value)
        try:
            return float(value)
        except OverflowError:
            # Integers past the float range saturate like the client's float parsing
            return math.inf if value > 0 else -math.inf

    if kind in (ComponentType.STEP_SLIDER, ComponentType.DROPDOWN):
        if not _is_number(value):
            raise _expected(kind, "an integer", value)
        try:
            return int(value)
        except (OverflowError, ValueError):
            raise _expected(kind, "a finite integer", value) from None

    if kind is ComponentType.TOGGLE:
        if isinstance(value, bool):
            return value
        raise _expected(kind, "a boolean", value)

    raise ResponseValueError(f"Type {kind.value} does not have validation implemented")


class CustomFormCodec(FormCodec[CustomForm]):
    form_type = FormType.CUSTOM_FORM
    form_class = CustomForm

    def __init__(
        self,
        components: Mapping[ComponentType, type[Component]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.components = components if components is not None else dict(COMPONENT_CLASSES)

    def _encode_form(self, form: CustomForm) -> dict[str, Any]:
        result: dict[str, Any] = {"title": form.title}
        if form.icon is not None:
            result["icon"] = form.icon.model_dump(mode="json")
        result["content"] = [
            component.model_dump(mode="json", exclude_none=True)
            for component in form.content
            if component is not ABSENT
        ]
        return result

    def _decode_form(self, source: dict[str, Any]) -> CustomForm:
        title = string_member(source, "title")

        icon = None
        if source.get("icon") is not None:
            icon = FormImage.model_validate(source["icon"])

        content = []
        for entry in list_member(source, "content"):
            if not isinstance(entry, dict):
                raise FormParseError(
                    f"Component has to be a JSON object, got {type(entry).__name__}"
                )
            content.append(self._decode_component(entry))

        return CustomForm(title=title, icon=icon, content=tuple(content))

    def _decode_component(self, entry: dict[str, Any]) -> Component:
        type_name = string_member(entry, "type")
        component_type = ComponentType.from_name(type_name)
        component_class = self.components.get(component_type) if component_type else None
        if component_class is None:
            raise FormParseError(f"Failed to find Component type {type_name}")
        return component_class.model_validate(entry)

    def _decode_response(self, form: CustomForm, response: str) -> FormResponseResult:
        try:
            values = loads(response)
        except JSONParseError as e:
            return invalid(-1, f"Response is not valid JSON: {e}")
        if not isinstance(values, list):
            return invalid(-1, f"Response should be a JSON array, got {json_kind(values)}")

        mapped: list[Any] = []
        types: list[ComponentType] = []
        cursor = 0

        for slot, component in enumerate(form.content):
            if component is ABSENT:
                mapped.append(ABSENT)
                continue

            if cursor >= len(values):
                return invalid(-1, "Response doesn't contain enough values")

            try:
                mapped.append(validate_value(component, values[cursor]))
            except ResponseValueError as e:
                return invalid(slot, str(e))
            cursor += 1
            types.append(component.component_type)

        if cursor < len(values):
            return invalid(-1, "Response contains too many values")

        return valid(CustomFormResponse(mapped, values, types))
