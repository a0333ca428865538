"""Outcome of interpreting a client's reply to a form."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

R = TypeVar("R")


class ResultType(str, Enum):
    """The three ways a reply can be classified."""

    CLOSED = "closed"  # the client dismissed the form
    INVALID = "invalid"  # the reply did not match the form
    VALID = "valid"


class _ResultMixin:
    response_type: ResultType

    @property
    def is_closed(self) -> bool:
        return self.response_type is ResultType.CLOSED

    @property
    def is_invalid(self) -> bool:
        return self.response_type is ResultType.INVALID

    @property
    def is_valid(self) -> bool:
        return self.response_type is ResultType.VALID


@dataclass(frozen=True)
class ClosedResult(_ResultMixin):
    """The client closed the form without answering."""

    response_type = ResultType.CLOSED


@dataclass(frozen=True)
class InvalidResult(_ResultMixin):
    """
    The client answered, but the answer does not fit the form.

    Attributes:
        component_index: Logical slot of the offending component, -1 when the
            problem is not specific to one component
        error_message: What went wrong
    """

    component_index: int
    error_message: str

    response_type = ResultType.INVALID


@dataclass(frozen=True)
class ValidResult(_ResultMixin, Generic[R]):
    """The client sent a well formed answer."""

    response: R

    response_type = ResultType.VALID


CLOSED = ClosedResult()

FormResponseResult = ClosedResult | InvalidResult | ValidResult[Any]


def closed() -> ClosedResult:
    return CLOSED


def invalid(component_index: int = -1, error_message: str = "") -> InvalidResult:
    return InvalidResult(component_index, error_message)


def valid(response: R) -> ValidResult[R]:
    return ValidResult(response)
