"""Fast JSON encoding and decoding for the form wire format."""

from typing import Any

import msgspec
import orjson


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


_decoder = msgspec.json.Decoder()
_encoder = msgspec.json.Encoder()


def loads(text: str | bytes) -> Any:
    """
    Decode any JSON value.

    Args:
        text: JSON document

    Returns:
        Decoded value (dict, list, str, int, float, bool or None)

    Raises:
        JSONParseError: If the text is not valid JSON or nests too deeply to decode
    """
    data = text.encode("utf-8") if isinstance(text, str) else text
    try:
        return _decoder.decode(data)
    except msgspec.DecodeError as e:
        raise JSONParseError(f"Invalid JSON: {e}", e) from e
    except RecursionError as e:
        # Nesting too deep for the decoder, before the depth guard can run
        raise JSONParseError(f"JSON nesting too deep: {e}", e) from e


def loads_object(text: str | bytes) -> dict[str, Any]:
    """Decode a JSON document that must be an object."""
    result = loads(text)
    if not isinstance(result, dict):
        raise JSONParseError(f"Expected JSON object, got {type(result).__name__}")
    return result


def dumps(obj: Any) -> str:
    """
    Encode object to a compact JSON string.

    Args:
        obj: Object to encode

    Returns:
        JSON string
    """
    try:
        return orjson.dumps(obj).decode("utf-8")
    except (TypeError, ValueError):
        # orjson rejects integers outside the 64-bit range
        pass
    return _encoder.encode(obj).decode("utf-8")


def validate_json_size(data: str, max_size: int, name: str = "JSON") -> None:
    """
    Validate JSON size before decoding it.

    Args:
        data: JSON string to validate
        max_size: Maximum allowed size in bytes
        name: Name for error messages

    Raises:
        JSONParseError: If size exceeds limit
    """
    size = len(data.encode("utf-8"))
    if size > max_size:
        raise JSONParseError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = 20, current_depth: int = 0) -> None:
    """
    Validate JSON nesting depth.

    Args:
        obj: Object to validate
        max_depth: Maximum allowed nesting depth
        current_depth: Current depth (internal)

    Raises:
        JSONParseError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise JSONParseError(f"JSON nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)
