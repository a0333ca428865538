"""Custom form response view.

A decoded custom form reply is a list with one entry per component slot of
the form that was sent:

- ``None`` for labels, which never carry a value
- ``ABSENT`` for optional components that were not added
- the component's value otherwise (str, int, float or bool)

``CustomFormResponse`` walks that list with a cursor, or reads it by index.
"""

from collections.abc import Sequence
from typing import Any

from ..components import ABSENT, ComponentType


class CustomFormResponse:
    """Cursor over the values of a custom form reply."""

    def __init__(
        self,
        responses: Sequence[Any],
        raw_responses: Sequence[Any] = (),
        component_types: Sequence[ComponentType] = (),
    ) -> None:
        self._responses = tuple(responses)
        self._raw_responses = tuple(raw_responses)
        self._component_types = tuple(component_types)
        self._index = -1
        self._include_labels = False

    # ------------------------------------------------------------------
    # Cursor state
    # ------------------------------------------------------------------

    @property
    def index(self) -> int:
        """Position of the last value read, -1 before the first read."""
        return self._index

    @index.setter
    def index(self, index: int) -> None:
        if index < -1:
            raise ValueError(f"index cannot be lower than -1, got {index}")
        self._index = index

    @property
    def include_labels(self) -> bool:
        """Whether cursor reads stop at labels instead of skipping them."""
        return self._include_labels

    @include_labels.setter
    def include_labels(self, include_labels: bool) -> None:
        self._include_labels = include_labels

    def reset(self) -> None:
        self._index = -1

    def skip(self, amount: int = 1) -> None:
        if amount < 1:
            raise ValueError(f"amount has to be at least 1, got {amount}")
        self._index += amount

    def has_next(self) -> bool:
        return len(self._responses) > self._index + 1

    def is_present(self) -> bool:
        """Whether the value at the cursor is not a label."""
        return 0 <= self._index < len(self._responses) and self._responses[self._index] is not None

    def is_next_present(self) -> bool:
        return self.has_next() and self._responses[self._index + 1] is not None

    # ------------------------------------------------------------------
    # Raw data
    # ------------------------------------------------------------------

    @property
    def raw_responses(self) -> tuple[Any, ...]:
        """The JSON array as the client sent it (present slots only)."""
        return self._raw_responses

    @property
    def component_types(self) -> tuple[ComponentType, ...]:
        """Types of the present components, in wire order."""
        return self._component_types

    def raw(self, index: int) -> Any:
        """Raw JSON value at a position of the wire array."""
        if index < 0:
            raise ValueError(f"index cannot be negative, got {index}")
        if index >= len(self._raw_responses):
            raise IndexError(f"index {index} is out of range for {len(self._raw_responses)} values")
        return self._raw_responses[index]

    def __len__(self) -> int:
        return len(self._responses)

    # ------------------------------------------------------------------
    # Generic reads
    # ------------------------------------------------------------------

    def _next_or_absent(self, include_labels: bool) -> Any:
        if not self.has_next():
            return None

        while self._index + 1 < len(self._responses):
            self._index += 1
            value = self._responses[self._index]
            if value is None and not include_labels:
                continue
            return value

        self._index = len(self._responses)
        return None

    def next(self, include_labels: bool | None = None) -> Any:
        """
        Advance the cursor and return the value there.

        Args:
            include_labels: Stop at labels too; defaults to ``include_labels``

        Returns:
            The value, or None for labels, absent components and when there
            are no values left
        """
        if include_labels is None:
            include_labels = self._include_labels
        value = self._next_or_absent(include_labels)
        if value is ABSENT:
            return None
        return value

    def _value_or_absent(self, index: int) -> Any:
        if index < 0:
            raise ValueError(f"index cannot be negative, got {index}")
        if index >= len(self._responses):
            raise IndexError(
                f"Requested index {index}, but there are only {len(self._responses)} components"
            )
        return self._responses[index]

    def value_at(self, index: int) -> Any:
        """Value at a slot, None for labels and absent components."""
        value = self._value_or_absent(index)
        if value is ABSENT:
            return None
        return value

    # ------------------------------------------------------------------
    # Typed reads
    # ------------------------------------------------------------------

    def _read(self, index: int | None, kind: str) -> tuple[Any, int]:
        if index is not None:
            return self._value_or_absent(index), index
        if not self.has_next():
            raise self._wrong_type(self._index + 1, kind)
        value = self._next_or_absent(self._include_labels)
        return value, self._index

    def as_dropdown(self, index: int | None = None) -> int:
        value, position = self._read(index, "dropdown")
        if value is ABSENT:
            return 0
        if _is_int(value):
            return value
        raise self._wrong_type(position, "dropdown")

    def as_step_slider(self, index: int | None = None) -> int:
        value, position = self._read(index, "step slider")
        if value is ABSENT:
            return 0
        if _is_int(value):
            return value
        raise self._wrong_type(position, "step slider")

    def as_input(self, index: int | None = None) -> str:
        value, position = self._read(index, "input")
        if value is ABSENT:
            return ""
        if isinstance(value, str):
            return value
        raise self._wrong_type(position, "input")

    def as_slider(self, index: int | None = None) -> float:
        value, position = self._read(index, "slider")
        if value is ABSENT:
            return 0.0
        if isinstance(value, float):
            return value
        raise self._wrong_type(position, "slider")

    def as_toggle(self, index: int | None = None) -> bool:
        value, position = self._read(index, "toggle")
        if value is ABSENT:
            return False
        if isinstance(value, bool):
            return value
        raise self._wrong_type(position, "toggle")

    def _wrong_type(self, index: int, expected: str) -> TypeError:
        if index >= len(self._responses):
            unexpected = "nothing"
        else:
            value = self._responses[index]
            unexpected = "label" if value is None else repr(value)
        return TypeError(f"Expected {expected} on {index}, got {unexpected}")

    def __repr__(self) -> str:
        return f"CustomFormResponse(responses={list(self._responses)!r}, index={self._index})"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
