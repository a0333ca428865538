"""Builders for the option based components."""

from collections.abc import Callable

from .models import DropdownComponent, StepSliderComponent


class _OptionListBuilder:
    """Collects options and a default index before building a component."""

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._options: list[str] = []
        self._default = 0
        self._default_explicit = False

    def text(self, text: str) -> "_OptionListBuilder":
        if text is None:
            raise ValueError("text cannot be None")
        self._text = text
        return self

    def _add(self, option: str, is_default: bool) -> "_OptionListBuilder":
        if option is None:
            raise ValueError("option cannot be None")
        self._options.append(option)
        if is_default:
            self._default = len(self._options) - 1
            self._default_explicit = True
        return self

    def _set_default(self, index: int) -> "_OptionListBuilder":
        if index < 0:
            raise ValueError(f"default index cannot be negative, got {index}")
        self._default = index
        self._default_explicit = True
        return self

    def _resolved(self, translator: Callable[[str], str] | None) -> tuple[str, list[str], int]:
        # An explicitly chosen default must point at an option
        if self._default_explicit and self._default >= len(self._options):
            raise ValueError(
                f"default index {self._default} is out of range for {len(self._options)} options"
            )
        if translator is None:
            return self._text, list(self._options), self._default
        return translator(self._text), [translator(o) for o in self._options], self._default


class DropdownBuilder(_OptionListBuilder):
    """Builds a DropdownComponent option by option."""

    def option(self, option: str, is_default: bool = False) -> "DropdownBuilder":
        self._add(option, is_default)
        return self

    def default_option(self, index: int) -> "DropdownBuilder":
        self._set_default(index)
        return self

    def build(self) -> DropdownComponent:
        text, options, default = self._resolved(None)
        return DropdownComponent(text=text, options=options, default=default)

    def translate_and_build(self, translator: Callable[[str], str]) -> DropdownComponent:
        text, options, default = self._resolved(translator)
        return DropdownComponent(text=text, options=options, default=default)


class StepSliderBuilder(_OptionListBuilder):
    """Builds a StepSliderComponent step by step."""

    def step(self, step: str, is_default: bool = False) -> "StepSliderBuilder":
        self._add(step, is_default)
        return self

    def default_step(self, index: int) -> "StepSliderBuilder":
        self._set_default(index)
        return self

    def build(self) -> StepSliderComponent:
        text, steps, default = self._resolved(None)
        return StepSliderComponent(text=text, steps=steps, default=default)

    def translate_and_build(self, translator: Callable[[str], str]) -> StepSliderComponent:
        text, steps, default = self._resolved(translator)
        return StepSliderComponent(text=text, steps=steps, default=default)
