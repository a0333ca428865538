"""Shared component enums and the absent-slot marker."""

from enum import Enum


class ComponentType(str, Enum):
    """Custom form component kinds and their wire names."""

    DROPDOWN = "dropdown"
    INPUT = "input"
    LABEL = "label"
    SLIDER = "slider"
    STEP_SLIDER = "step_slider"
    TOGGLE = "toggle"

    @classmethod
    def from_name(cls, name: str | None) -> "ComponentType | None":
        """Look up a component type by wire name, None when unknown."""
        for member in cls:
            if member.value == name:
                return member
        return None

    @property
    def display_name(self) -> str:
        """Human readable kind, used in error messages."""
        return self.value.replace("_", " ")


class ImageType(str, Enum):
    """Where a form image is loaded from."""

    PATH = "path"  # path inside the client's resource pack
    URL = "url"


class Absent(Enum):
    """Marker for an optional slot that was declared but not added.

    Distinct from None, which a decoded custom response uses for labels.
    """

    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent.ABSENT
