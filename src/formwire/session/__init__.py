"""Session tracking of forms awaiting a reply."""

from .transport import FormTransport
from .tracker import EncodedFormRequest, PendingForm, SessionTracker

__all__ = [
    "FormTransport",
    "EncodedFormRequest",
    "PendingForm",
    "SessionTracker",
]
