"""Responses of the simple and modal forms."""

from dataclasses import dataclass

from ..components import ButtonComponent


@dataclass(frozen=True)
class ModalFormResponse:
    """Which of the two modal buttons was clicked."""

    clicked_button_id: int
    clicked_button_text: str

    def __post_init__(self) -> None:
        if self.clicked_button_id not in (0, 1):
            raise ValueError(f"clicked_button_id must be 0 or 1, got {self.clicked_button_id}")

    @property
    def clicked_first(self) -> bool:
        """True when button1 was clicked."""
        return self.clicked_button_id == 0


@dataclass(frozen=True)
class SimpleFormResponse:
    """The clicked button and its position among the form's button slots."""

    clicked_button_id: int
    clicked_button: ButtonComponent

    def __post_init__(self) -> None:
        if self.clicked_button_id < 0:
            raise ValueError(f"clicked_button_id cannot be negative, got {self.clicked_button_id}")
