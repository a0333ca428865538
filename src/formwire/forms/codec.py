"""Form codec base.

A codec turns one form shape into its wire JSON and back, and classifies a
client's raw reply to that shape into a response result.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import ValidationError as ModelValidationError

from ..core.json import (
    JSONParseError,
    dumps,
    loads_object,
    validate_json_depth,
    validate_json_size,
)
from ..core.logging_config import get_logger
from ..response import CLOSED, FormResponseResult
from .models import Form, FormType

logger = get_logger(__name__)

F = TypeVar("F", bound=Form)

DEFAULT_MAX_FORM_SIZE = 512 * 1024  # 512KB
DEFAULT_MAX_JSON_DEPTH = 20


class FormParseError(JSONParseError):
    """Form JSON is malformed or misses a mandatory member."""


# Control characters and space; other Unicode whitespace is part of the reply
_TRIMMED = "".join(chr(c) for c in range(0x21))


def trim(text: str) -> str:
    """Strip leading and trailing characters up to U+0020."""
    return text.strip(_TRIMMED)


def is_closed_response(response: str | None) -> bool:
    """Whether a raw reply means the client closed the form."""
    return response is None or response == "" or trim(response) == "null"


def member(source: dict[str, Any], name: str) -> Any:
    """Get a mandatory member of a JSON object."""
    if name not in source:
        raise FormParseError(f"Expected to find a member named '{name}' in the JSON object")
    return source[name]


def string_member(source: dict[str, Any], name: str) -> str:
    value = member(source, name)
    if not isinstance(value, str):
        raise FormParseError(f"Member '{name}' should be a string, got {type(value).__name__}")
    return value


def list_member(source: dict[str, Any], name: str) -> list[Any]:
    value = member(source, name)
    if not isinstance(value, list):
        raise FormParseError(f"Member '{name}' should be an array, got {type(value).__name__}")
    return value


class FormCodec(ABC, Generic[F]):
    """Encode, decode and decode-reply for a single form shape."""

    form_type: FormType
    form_class: type[F]

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_FORM_SIZE,
        max_depth: int = DEFAULT_MAX_JSON_DEPTH,
    ) -> None:
        self.max_size = max_size
        self.max_depth = max_depth

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def encode(self, form: F) -> dict[str, Any]:
        """Wire representation of a form. ABSENT slots are left out."""
        self._check_form(form)
        result: dict[str, Any] = {"type": self.form_type.value}
        result.update(self._encode_form(form))
        return result

    def encode_json(self, form: F) -> str:
        """Wire JSON of a form, ready to be sent to the client."""
        return dumps(self.encode(form))

    # ------------------------------------------------------------------
    # Decoding forms
    # ------------------------------------------------------------------

    def decode(self, json_text: str) -> F:
        """
        Parse wire JSON into a form.

        Args:
            json_text: JSON object as produced by ``encode_json``

        Returns:
            The form; it never contains ABSENT slots

        Raises:
            FormParseError: If the JSON is invalid or misses mandatory members
        """
        try:
            validate_json_size(json_text, self.max_size, "Form")
            data = loads_object(json_text)
            validate_json_depth(data, self.max_depth)
        except FormParseError:
            raise
        except JSONParseError as e:
            logger.warning("form_parse_failed", form_type=self.form_type.value, error=str(e))
            raise FormParseError(str(e), e) from e
        return self.decode_data(data)

    def decode_data(self, data: Any) -> F:
        """Build a form from already decoded wire JSON."""
        if not isinstance(data, dict):
            raise FormParseError(f"Form has to be a JSON object, got {type(data).__name__}")
        try:
            return self._decode_form(data)
        except FormParseError as e:
            logger.warning("form_parse_failed", form_type=self.form_type.value, error=str(e))
            raise
        except ModelValidationError as e:
            logger.warning("form_parse_failed", form_type=self.form_type.value, error=str(e))
            raise FormParseError(f"Invalid {self.form_type.value} data: {e}", e) from e

    # ------------------------------------------------------------------
    # Decoding replies
    # ------------------------------------------------------------------

    def decode_response(self, form: F, response: str | None) -> FormResponseResult:
        """
        Classify a client's raw reply to a form.

        Args:
            form: The form instance that was sent
            response: Raw reply, None when the client sent nothing

        Returns:
            CLOSED when the form was dismissed, otherwise an invalid or a
            valid result
        """
        self._check_form(form)
        if is_closed_response(response):
            return CLOSED
        return self._decode_response(form, response)

    def _check_form(self, form: Any) -> None:
        if not isinstance(form, self.form_class):
            raise TypeError(
                f"{type(self).__name__} cannot handle {type(form).__name__}, "
                f"expected {self.form_class.__name__}"
            )

    @abstractmethod
    def _encode_form(self, form: F) -> dict[str, Any]:
        """Shape specific wire members."""

    @abstractmethod
    def _decode_form(self, source: dict[str, Any]) -> F:
        """Build the form from its wire members."""

    @abstractmethod
    def _decode_response(self, form: F, response: str) -> FormResponseResult:
        """Classify a reply that is known not to be a close."""
