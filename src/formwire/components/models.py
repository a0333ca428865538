"""Component Data Models.

Immutable value objects for the parts a form is made of. Field names match
the wire keys, so ``model_dump(mode="json", exclude_none=True)`` is the wire
representation of a component.
"""

from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .types import ComponentType, ImageType

# Above this many steps a slider default is not searched for
MAX_DEFAULT_SEARCH_STEPS = 50


class WireModel(BaseModel):
    """Base model with strict, immutable configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class FormImage(WireModel):
    """Image shown next to a button or as a custom form icon."""

    type: ImageType
    data: str

    @classmethod
    def path(cls, path: str) -> "FormImage":
        return cls(type=ImageType.PATH, data=path)

    @classmethod
    def url(cls, url: str) -> "FormImage":
        return cls(type=ImageType.URL, data=url)


class ButtonComponent(WireModel):
    """Button of a simple form."""

    text: str
    image: FormImage | None = None


class Component(WireModel):
    """Base of the custom form components."""

    component_type: ClassVar[ComponentType]

    type: str
    text: str


class LabelComponent(Component):
    """Static text. Never produces a response value."""

    component_type: ClassVar[ComponentType] = ComponentType.LABEL

    type: Literal["label"] = "label"


class InputComponent(Component):
    """Free text input."""

    component_type: ClassVar[ComponentType] = ComponentType.INPUT

    type: Literal["input"] = "input"
    placeholder: str = ""
    default: str = ""


class ToggleComponent(Component):
    """On/off switch."""

    component_type: ClassVar[ComponentType] = ComponentType.TOGGLE

    type: Literal["toggle"] = "toggle"
    default: bool = False


def generate_default_value(min_value: float, max_value: float, step: float) -> float:
    """
    Pick a slider default close to the middle of its range.

    Args:
        min_value: Lowest slider value
        max_value: Highest slider value
        step: Positive distance between two slider values

    Returns:
        The middle if it is on a step, otherwise the closest step below it.
        Sliders with many steps fall back to the minimum.
    """
    middle = min_value + (max_value - min_value) / 2.0

    if ((middle - min_value) / step) % 1 == 0:
        return middle

    if min_value + step * MAX_DEFAULT_SEARCH_STEPS < max_value:
        return min_value

    previous = min_value
    while previous < max_value:
        following = previous + step
        if following > middle:
            return previous
        previous = following
    return previous


class SliderComponent(Component):
    """Numeric slider."""

    component_type: ClassVar[ComponentType] = ComponentType.SLIDER

    type: Literal["slider"] = "slider"
    min: float
    max: float
    step: float = Field(default=1.0, gt=0)
    default: float = 0.0

    @model_validator(mode="before")
    @classmethod
    def fill_default(cls, data: Any) -> Any:
        """Compute the default value when none was given."""
        if not isinstance(data, dict) or data.get("default") is not None:
            return data
        try:
            min_value = float(data["min"])
            max_value = float(data["max"])
            step = float(data.get("step", 1.0))
        except (KeyError, TypeError, ValueError):
            # Field validation reports the actual problem
            return data
        if step <= 0:
            return data
        return {**data, "default": generate_default_value(min_value, max_value, step)}

    @model_validator(mode="after")
    def check_range(self) -> "SliderComponent":
        if self.min > self.max:
            raise ValueError("min value is higher than max value")
        return self


def _reset_out_of_range(data: Any, options_key: str) -> Any:
    # A default outside the option list silently falls back to the first option
    if not isinstance(data, dict):
        return data
    default = data.get("default", 0)
    if isinstance(default, bool) or not isinstance(default, int):
        return data
    try:
        count = len(data.get(options_key) or ())
    except TypeError:
        return data
    if default >= count:
        return {**data, "default": 0}
    return data


class StepSliderComponent(Component):
    """Slider over a fixed list of labelled steps."""

    component_type: ClassVar[ComponentType] = ComponentType.STEP_SLIDER

    type: Literal["step_slider"] = "step_slider"
    steps: tuple[str, ...] = ()
    default: int = Field(default=0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def clamp_default(cls, data: Any) -> Any:
        return _reset_out_of_range(data, "steps")


class DropdownComponent(Component):
    """Single choice out of a list of options."""

    component_type: ClassVar[ComponentType] = ComponentType.DROPDOWN

    type: Literal["dropdown"] = "dropdown"
    options: tuple[str, ...] = ()
    default: int = Field(default=0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def clamp_default(cls, data: Any) -> Any:
        return _reset_out_of_range(data, "options")


COMPONENT_CLASSES: dict[ComponentType, type[Component]] = {
    ComponentType.DROPDOWN: DropdownComponent,
    ComponentType.INPUT: InputComponent,
    ComponentType.LABEL: LabelComponent,
    ComponentType.SLIDER: SliderComponent,
    ComponentType.STEP_SLIDER: StepSliderComponent,
    ComponentType.TOGGLE: ToggleComponent,
}
