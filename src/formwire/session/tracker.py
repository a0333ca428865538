"""
Session Tracker
Hands out short lived form ids and routes replies back to the sent form.
"""

import threading
from dataclasses import dataclass

from ..core.config import DEFAULT_MAX_FORM_ID
from ..core.logging_config import LogContext, get_logger
from ..forms import Form, FormRegistry, FormType
from ..monitoring import MetricsCollector, metrics_collector
from ..response import FormResponseResult, ResultHandler
from .transport import FormTransport

logger = get_logger(__name__)


@dataclass(frozen=True)
class EncodedFormRequest:
    """A tracked form id and the JSON to send for it."""

    id: int
    encoded_data: str


@dataclass(frozen=True)
class PendingForm:
    """A sent form awaiting its reply."""

    form: Form
    form_type: FormType
    handler: ResultHandler | None = None


class SessionTracker:
    """
    Tracks forms awaiting a reply by numeric id.

    Ids count up from 0 to ``max_id`` (inclusive) and then wrap to 0. A
    wrapped id that still belongs to an unanswered form replaces that form
    without notifying its handler; the replacement is only logged as a
    ``form_id_reused`` warning. Keep ``max_id`` large enough that this does
    not happen in practice.

    Result handlers run inside a ``LogContext`` carrying ``form_id`` and
    ``form_type``, so events they log can be traced back to the form.
    """

    def __init__(
        self,
        registry: FormRegistry,
        transport: FormTransport | None = None,
        max_id: int = DEFAULT_MAX_FORM_ID,
        metrics: MetricsCollector = metrics_collector,
    ) -> None:
        if max_id < 0:
            raise ValueError(f"max_id cannot be negative, got {max_id}")
        self.registry = registry
        self.transport = transport
        self.max_id = max_id
        self.metrics = metrics

        self._lock = threading.Lock()
        self._next_id = 0
        self._awaiting: dict[int, PendingForm] = {}

    def _allocate_id(self) -> int:
        # Caller holds the lock
        form_id = self._next_id
        self._next_id = 0 if form_id >= self.max_id else form_id + 1
        return form_id

    def create_form_request(
        self, form: Form, handler: ResultHandler | None = None
    ) -> EncodedFormRequest:
        """
        Encode a form and start tracking it.

        Args:
            form: Form to send
            handler: Called with ``(form, result)`` once the reply is decoded

        Returns:
            The id the reply will arrive under and the encoded form
        """
        definition = self.registry.definition_for(form)
        encoded = definition.codec.encode_json(form)

        with self._lock:
            form_id = self._allocate_id()
            replaced = self._awaiting.get(form_id)
            self._awaiting[form_id] = PendingForm(form, definition.form_type, handler)
            awaiting = len(self._awaiting)

        if replaced is not None:
            logger.warning(
                "form_id_reused",
                form_id=form_id,
                replaced_type=replaced.form_type.value,
            )
        logger.debug("form_tracked", form_id=form_id, form_type=definition.form_type.value)
        self.metrics.record_sent(definition.form_type.value, awaiting)
        return EncodedFormRequest(form_id, encoded)

    def send_form(self, form: Form, handler: ResultHandler | None = None) -> int:
        """Track a form and hand it to the transport. Returns the form id."""
        if self.transport is None:
            raise RuntimeError("SessionTracker has no transport to send forms with")
        request = self.create_form_request(form, handler)
        self.transport.send_form(request.id, request.encoded_data)
        return request.id

    def close_form(self, form_id: int) -> None:
        """
        Stop tracking a form and ask the client to close it.

        Closing a form that is not awaiting a reply does nothing.
        """
        with self._lock:
            pending = self._awaiting.pop(form_id, None)
            awaiting = len(self._awaiting)
        if pending is None:
            return

        logger.debug("form_closed", form_id=form_id, form_type=pending.form_type.value)
        self.metrics.record_closed(awaiting)
        if self.transport is not None:
            self.transport.close_form(form_id)

    def handle_form_response(self, form_id: int, response: str | None) -> FormResponseResult | None:
        """
        Decode the reply to a tracked form.

        Args:
            form_id: Id the form was sent with
            response: Raw reply, None when the client sent nothing

        Returns:
            The classified result, or None when no form is awaiting this id
        """
        with self._lock:
            pending = self._awaiting.pop(form_id, None)
            awaiting = len(self._awaiting)
        if pending is None:
            logger.debug("form_response_untracked", form_id=form_id)
            return None

        result = self.registry.codec_for(pending.form_type).decode_response(
            pending.form, response
        )
        logger.debug(
            "form_response",
            form_id=form_id,
            form_type=pending.form_type.value,
            result=result.response_type.value,
        )
        self.metrics.record_response(
            pending.form_type.value, result.response_type.value, awaiting
        )

        if pending.handler is not None:
            with LogContext(form_id=form_id, form_type=pending.form_type.value):
                pending.handler(pending.form, result)
        return result

    def form_from_raw_data(self, json_text: str, form_type: FormType) -> Form:
        """Build a form from client authored JSON."""
        return self.registry.decode(json_text, form_type)

    def awaiting_form(self, form_id: int) -> Form:
        """Form awaiting a reply under an id. Raises KeyError when there is none."""
        with self._lock:
            pending = self._awaiting.get(form_id)
        if pending is None:
            raise KeyError(f"No form is awaiting a response with id {form_id}")
        return pending.form

    def is_awaiting(self, form_id: int) -> bool:
        with self._lock:
            return form_id in self._awaiting

    @property
    def awaiting_count(self) -> int:
        with self._lock:
            return len(self._awaiting)

    def awaiting_ids(self) -> list[int]:
        with self._lock:
            return sorted(self._awaiting)
