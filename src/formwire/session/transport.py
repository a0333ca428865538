"""Transport the session tracker hands encoded forms to."""

from typing import Protocol


class FormTransport(Protocol):
    """Delivers forms to a client. Replies come back through
    ``SessionTracker.handle_form_response``."""

    def send_form(self, form_id: int, encoded_form: str) -> None:
        """Send an encoded form that is now awaiting a reply."""
        ...

    def close_form(self, form_id: int) -> None:
        """Ask the client to close a form that is still awaiting a reply."""
        ...
