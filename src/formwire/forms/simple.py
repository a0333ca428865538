"""Simple form codec."""

import re
from typing import Any

from ..components import ABSENT, ButtonComponent
from ..response import FormResponseResult, SimpleFormResponse, invalid, valid
from .codec import FormCodec, FormParseError, list_member, string_member, trim
from .models import FormType, SimpleForm

_INTEGER = re.compile(r"[+-]?[0-9]+")


class SimpleFormCodec(FormCodec[SimpleForm]):
    form_type = FormType.SIMPLE_FORM
    form_class = SimpleForm

    def _encode_form(self, form: SimpleForm) -> dict[str, Any]:
        return {
            "title": form.title,
            "content": form.content,
            "buttons": [
                button.model_dump(mode="json", exclude_none=True)
                for button in form.buttons
                if button is not ABSENT
            ],
        }

    def _decode_form(self, source: dict[str, Any]) -> SimpleForm:
        buttons = []
        for entry in list_member(source, "buttons"):
            if not isinstance(entry, dict):
                raise FormParseError(f"Button has to be a JSON object, got {type(entry).__name__}")
            buttons.append(ButtonComponent.model_validate(entry))

        return SimpleForm(
            title=string_member(source, "title"),
            content=string_member(source, "content"),
            buttons=tuple(buttons),
        )

    def _decode_response(self, form: SimpleForm, response: str) -> FormResponseResult:
        data = trim(response)
        if not _INTEGER.fullmatch(data):
            return invalid(-1, f"Received '{data}', which is not an integer button id")

        button_id = int(data)
        if button_id < 0:
            return invalid(-1, f"Received a negative button id ({button_id})")

        # The client only knows about present buttons, so the wire id counts
        # present buttons only. Map it back onto the form's button slots.
        remaining = button_id
        for slot, button in enumerate(form.buttons):
            if button is ABSENT:
                continue
            if remaining == 0:
                return valid(SimpleFormResponse(slot, button))
            remaining -= 1

        shown = button_id - remaining
        return invalid(
            -1, f"Received button id {button_id}, but the form only shows {shown} buttons"
        )
