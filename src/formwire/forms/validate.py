"""Form decoding without exceptions (Result pattern)."""

from dataclasses import dataclass

from returns.result import Failure, Result, Success

from .codec import FormParseError
from .models import Form, FormType
from .registry import FormRegistry


@dataclass(frozen=True)
class DecodeFailure:
    """Why a form could not be decoded."""

    message: str
    form_type: FormType | None = None


def safe_decode_form(
    registry: FormRegistry, json_text: str, form_type: FormType
) -> Result[Form, DecodeFailure]:
    """
    Decode wire JSON into a form (Result pattern version).

    Args:
        registry: Registry resolving the codec
        json_text: Form JSON
        form_type: Shape the JSON is expected to have

    Returns:
        Success with the form, or Failure describing the parse error
    """
    try:
        return Success(registry.decode(json_text, form_type))
    except FormParseError as e:
        return Failure(DecodeFailure(str(e), form_type))
    except KeyError as e:
        return Failure(DecodeFailure(e.args[0] if e.args else str(e), form_type))
