"""Modal form codec."""

from typing import Any

from ..response import FormResponseResult, ModalFormResponse, invalid, valid
from .codec import FormCodec, string_member, trim
from .models import FormType, ModalForm


class ModalFormCodec(FormCodec[ModalForm]):
    form_type = FormType.MODAL_FORM
    form_class = ModalForm

    def _encode_form(self, form: ModalForm) -> dict[str, Any]:
        return {
            "title": form.title,
            "content": form.content,
            "button1": form.button1,
            "button2": form.button2,
        }

    def _decode_form(self, source: dict[str, Any]) -> ModalForm:
        return ModalForm(
            title=string_member(source, "title"),
            content=string_member(source, "content"),
            button1=string_member(source, "button1"),
            button2=string_member(source, "button2"),
        )

    def _decode_response(self, form: ModalForm, response: str) -> FormResponseResult:
        data = trim(response)
        if data == "true":
            return valid(ModalFormResponse(0, form.button1))
        if data == "false":
            return valid(ModalFormResponse(1, form.button2))
        return invalid(-1, f"Expected a boolean ('true' or 'false'), got '{data}'")
