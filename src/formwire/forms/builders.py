"""Form builders.

Builders assemble a form step by step and run every display string through an
optional translator before it is stored. The built form is immutable.
"""

from collections.abc import Callable

from ..components import (
    ABSENT,
    Absent,
    ButtonComponent,
    Component,
    DropdownBuilder,
    DropdownComponent,
    FormImage,
    ImageType,
    InputComponent,
    LabelComponent,
    SliderComponent,
    StepSliderBuilder,
    StepSliderComponent,
    ToggleComponent,
)
from .models import CustomForm, ModalForm, SimpleForm

Translator = Callable[[str, str | None], str | None]


def _required(value, name: str):
    if value is None:
        raise ValueError(f"{name} cannot be None")
    return value


class FormBuilder:
    """Shared title and translation handling."""

    def __init__(self) -> None:
        self._title = ""
        self._translator: Translator | None = None
        self._locale: str | None = None

    def title(self, title: str):
        self._title = self.translate(_required(title, "title"))
        return self

    def translator(self, translator: Translator, locale: str | None = None):
        """
        Set the translation function applied to every following string.

        The current title is translated again with the new translator.
        """
        self._translator = _required(translator, "translator")
        if locale is not None:
            self._locale = locale
        return self.title(self._title)

    def translate(self, text: str) -> str:
        """Translate text, keeping the original when there is no translation."""
        _required(text, "text")
        if self._translator is None or not text:
            return text
        translated = self._translator(text, self._locale)
        return translated if translated is not None else text


class SimpleFormBuilder(FormBuilder):
    """Builds a SimpleForm."""

    def __init__(self) -> None:
        super().__init__()
        self._content = ""
        self._buttons: list[ButtonComponent | Absent] = []

    def content(self, content: str) -> "SimpleFormBuilder":
        self._content = self.translate(_required(content, "content"))
        return self

    def button(
        self, button: ButtonComponent | str, image: FormImage | None = None
    ) -> "SimpleFormBuilder":
        """Add a ready made button, or a button made from text and image."""
        if isinstance(button, ButtonComponent):
            self._buttons.append(button)
        else:
            text = self.translate(_required(button, "text"))
            self._buttons.append(ButtonComponent(text=text, image=image))
        return self

    def image_button(self, text: str, image_type: ImageType, data: str) -> "SimpleFormBuilder":
        return self.button(text, FormImage(type=image_type, data=data))

    def optional_button(
        self, text: str, should_add: bool, image: FormImage | None = None
    ) -> "SimpleFormBuilder":
        """Add a button, or keep its slot empty when should_add is false."""
        if should_add:
            return self.button(text, image)
        self._buttons.append(ABSENT)
        return self

    def build(self) -> SimpleForm:
        return SimpleForm(title=self._title, content=self._content, buttons=tuple(self._buttons))


class ModalFormBuilder(FormBuilder):
    """Builds a ModalForm."""

    def __init__(self) -> None:
        super().__init__()
        self._content = ""
        self._button1 = ""
        self._button2 = ""

    def content(self, content: str) -> "ModalFormBuilder":
        self._content = self.translate(_required(content, "content"))
        return self

    def button1(self, text: str) -> "ModalFormBuilder":
        self._button1 = self.translate(_required(text, "button1"))
        return self

    def button2(self, text: str) -> "ModalFormBuilder":
        self._button2 = self.translate(_required(text, "button2"))
        return self

    def build(self) -> ModalForm:
        return ModalForm(
            title=self._title,
            content=self._content,
            button1=self._button1,
            button2=self._button2,
        )


class CustomFormBuilder(FormBuilder):
    """Builds a CustomForm.

    Every component method takes ``should_add``; when it is false the slot is
    kept but left empty, so indexes of the following components do not move.
    """

    def __init__(self) -> None:
        super().__init__()
        self._icon: FormImage | None = None
        self._components: list[Component | Absent] = []

    def icon(self, image_type: ImageType, data: str) -> "CustomFormBuilder":
        self._icon = FormImage(type=image_type, data=data)
        return self

    def icon_path(self, path: str) -> "CustomFormBuilder":
        return self.icon(ImageType.PATH, path)

    def icon_url(self, url: str) -> "CustomFormBuilder":
        return self.icon(ImageType.URL, url)

    def component(self, component: Component) -> "CustomFormBuilder":
        if not isinstance(component, Component):
            raise ValueError(f"Expected a component, got {type(component).__name__}")
        self._components.append(component)
        return self

    def optional_component(self, component: Component, should_add: bool) -> "CustomFormBuilder":
        if should_add:
            return self.component(component)
        self._components.append(ABSENT)
        return self

    def label(self, text: str, *, should_add: bool = True) -> "CustomFormBuilder":
        if not should_add:
            return self._hole()
        return self.component(LabelComponent(text=self.translate(text)))

    def input(
        self,
        text: str,
        placeholder: str = "",
        default: str = "",
        *,
        should_add: bool = True,
    ) -> "CustomFormBuilder":
        if not should_add:
            return self._hole()
        return self.component(
            InputComponent(
                text=self.translate(text),
                placeholder=self.translate(placeholder),
                default=self.translate(default),
            )
        )

    def toggle(
        self, text: str, default: bool = False, *, should_add: bool = True
    ) -> "CustomFormBuilder":
        if not should_add:
            return self._hole()
        return self.component(ToggleComponent(text=self.translate(text), default=default))

    def slider(
        self,
        text: str,
        min: float,
        max: float,
        step: float = 1.0,
        default: float | None = None,
        *,
        should_add: bool = True,
    ) -> "CustomFormBuilder":
        """Add a slider; without a default one near the middle is picked."""
        if not should_add:
            return self._hole()
        return self.component(
            SliderComponent(
                text=self.translate(text), min=min, max=max, step=step, default=default
            )
        )

    def step_slider(
        self, text: str, *steps: str, default: int = 0, should_add: bool = True
    ) -> "CustomFormBuilder":
        if not should_add:
            return self._hole()
        if default < 0:
            raise ValueError(f"default step cannot be negative, got {default}")
        return self.component(
            StepSliderComponent(
                text=self.translate(text),
                steps=[self.translate(step) for step in steps],
                default=default,
            )
        )

    def step_slider_from(
        self, builder: StepSliderBuilder, *, should_add: bool = True
    ) -> "CustomFormBuilder":
        if not should_add:
            return self._hole()
        return self.component(builder.translate_and_build(self.translate))

    def dropdown(
        self, text: str, *options: str, default: int = 0, should_add: bool = True
    ) -> "CustomFormBuilder":
        if not should_add:
            return self._hole()
        if default < 0:
            raise ValueError(f"default option cannot be negative, got {default}")
        return self.component(
            DropdownComponent(
                text=self.translate(text),
                options=[self.translate(option) for option in options],
                default=default,
            )
        )

    def dropdown_from(
        self, builder: DropdownBuilder, *, should_add: bool = True
    ) -> "CustomFormBuilder":
        if not should_add:
            return self._hole()
        return self.component(builder.translate_and_build(self.translate))

    def _hole(self) -> "CustomFormBuilder":
        self._components.append(ABSENT)
        return self

    def build(self) -> CustomForm:
        return CustomForm(title=self._title, icon=self._icon, content=tuple(self._components))
