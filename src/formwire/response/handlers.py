"""Callback dispatch on top of response results.

Decoding a reply only returns a result value. ``ResultHandlers`` is an
optional convenience that routes that value to per-outcome callbacks.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .result import ClosedResult, FormResponseResult, InvalidResult, ValidResult

ResultHandler = Callable[[Any, FormResponseResult], None]


@dataclass
class ResultHandlers:
    """
    Per-outcome callbacks, each called with ``(form, result)``.

    ``all`` runs first for every result. ``closed_or_invalid`` runs for both
    non-valid outcomes, after the specific closed/invalid callback.
    """

    all: Callable[[Any, FormResponseResult], None] | None = None
    closed: Callable[[Any, ClosedResult], None] | None = None
    invalid: Callable[[Any, InvalidResult], None] | None = None
    closed_or_invalid: Callable[[Any, ClosedResult | InvalidResult], None] | None = None
    valid: Callable[[Any, ValidResult], None] | None = None

    def __call__(self, form: Any, result: FormResponseResult) -> None:
        if self.all is not None:
            self.all(form, result)

        if result.is_valid:
            if self.valid is not None:
                self.valid(form, result)
            return

        if result.is_closed and self.closed is not None:
            self.closed(form, result)
        if result.is_invalid and self.invalid is not None:
            self.invalid(form, result)
        if self.closed_or_invalid is not None:
            self.closed_or_invalid(form, result)
