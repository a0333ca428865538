"""Form builder tests."""

import pytest
from pydantic import ValidationError

from formwire.components import (
    ABSENT,
    ButtonComponent,
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
from formwire.forms import CustomForm, ModalForm, SimpleForm


TRANSLATIONS = {
    ("greeting", "de_de"): "Hallo",
    ("yes", "de_de"): "Ja",
    ("no", "de_de"): "Nein",
    ("red", "de_de"): "Rot",
}


def translator(text, locale):
    return TRANSLATIONS.get((text, locale))


# ============================================================================
# Simple
# ============================================================================

@pytest.mark.unit
def test_simple_form_builder():
    form = (
        SimpleForm.builder()
        .title("Menu")
        .content("Choose")
        .button("Play")
        .image_button("Shop", ImageType.URL, "https://example.com/shop.png")
        .button(ButtonComponent(text="Quit"))
        .build()
    )

    assert form == SimpleForm(
        title="Menu",
        content="Choose",
        buttons=(
            ButtonComponent(text="Play"),
            ButtonComponent(text="Shop", image=FormImage.url("https://example.com/shop.png")),
            ButtonComponent(text="Quit"),
        ),
    )


@pytest.mark.unit
def test_optional_buttons_keep_their_slot():
    form = (
        SimpleForm.builder()
        .title("Menu")
        .optional_button("Admin", False)
        .optional_button("Play", True)
        .build()
    )
    assert form.buttons == (ABSENT, ButtonComponent(text="Play"))


@pytest.mark.unit
def test_builder_rejects_none():
    with pytest.raises(ValueError):
        SimpleForm.builder().title(None)
    with pytest.raises(ValueError):
        ModalForm.builder().content(None)


# ============================================================================
# Modal
# ============================================================================

@pytest.mark.unit
def test_modal_form_builder():
    form = ModalForm.builder().title("Quit?").content("Sure?").button1("Yes").button2("No").build()
    assert form == ModalForm(title="Quit?", content="Sure?", button1="Yes", button2="No")


@pytest.mark.unit
def test_modal_defaults_to_empty_strings():
    form = ModalForm.builder().build()
    assert (form.title, form.content, form.button1, form.button2) == ("", "", "", "")


# ============================================================================
# Custom
# ============================================================================

@pytest.mark.unit
def test_custom_form_builder():
    form = (
        CustomForm.builder()
        .title("Settings")
        .icon_path("textures/book.png")
        .label("Hello")
        .input("Name", "Steve", "Alex")
        .toggle("Sounds", True)
        .slider("Volume", 0, 10)
        .step_slider("Speed", "slow", "fast", default=1)
        .dropdown("Colour", "red", "blue")
        .build()
    )

    assert form.icon == FormImage(type=ImageType.PATH, data="textures/book.png")
    assert form.content == (
        LabelComponent(text="Hello"),
        InputComponent(text="Name", placeholder="Steve", default="Alex"),
        ToggleComponent(text="Sounds", default=True),
        SliderComponent(text="Volume", min=0, max=10, default=5),
        StepSliderComponent(text="Speed", steps=("slow", "fast"), default=1),
        DropdownComponent(text="Colour", options=("red", "blue")),
    )


@pytest.mark.unit
def test_optional_components_keep_their_slot():
    form = (
        CustomForm.builder()
        .label("a", should_add=False)
        .toggle("b")
        .dropdown("c", "x", should_add=False)
        .optional_component(InputComponent(text="d"), False)
        .optional_component(InputComponent(text="e"), True)
        .build()
    )

    assert form.content == (
        ABSENT,
        ToggleComponent(text="b"),
        ABSENT,
        ABSENT,
        InputComponent(text="e"),
    )


@pytest.mark.unit
def test_component_rejects_non_components():
    with pytest.raises(ValueError):
        CustomForm.builder().component("label")


@pytest.mark.unit
def test_negative_default_is_rejected():
    with pytest.raises(ValueError):
        CustomForm.builder().dropdown("c", "x", default=-1)
    with pytest.raises(ValueError):
        CustomForm.builder().step_slider("c", "x", default=-1)


@pytest.mark.unit
def test_slider_range_is_checked():
    with pytest.raises(ValidationError):
        CustomForm.builder().slider("s", 10, 0)


@pytest.mark.unit
def test_option_builders():
    form = (
        CustomForm.builder()
        .dropdown_from(DropdownBuilder("Colour").option("red").option("blue", True))
        .step_slider_from(StepSliderBuilder("Speed").step("slow"), should_add=False)
        .build()
    )

    assert form.content == (
        DropdownComponent(text="Colour", options=("red", "blue"), default=1),
        ABSENT,
    )


# ============================================================================
# Translation
# ============================================================================

@pytest.mark.unit
def test_translator_applies_to_following_strings():
    form = (
        ModalForm.builder()
        .translator(translator, "de_de")
        .title("greeting")
        .button1("yes")
        .button2("no")
        .build()
    )
    assert (form.title, form.button1, form.button2) == ("Hallo", "Ja", "Nein")


@pytest.mark.unit
def test_translator_retranslates_title():
    form = SimpleForm.builder().title("greeting").translator(translator, "de_de").build()
    assert form.title == "Hallo"


@pytest.mark.unit
def test_missing_translation_keeps_text():
    form = SimpleForm.builder().translator(translator, "de_de").button("unknown").build()
    assert form.buttons == (ButtonComponent(text="unknown"),)


@pytest.mark.unit
def test_empty_text_is_not_translated():
    calls = []

    def recording(text, locale):
        calls.append(text)
        return "x"

    form = ModalForm.builder().translator(recording).content("").build()

    assert form.content == ""
    assert calls == []


@pytest.mark.unit
def test_option_builder_is_translated():
    form = (
        CustomForm.builder()
        .translator(translator, "de_de")
        .dropdown_from(DropdownBuilder("colour").option("red"))
        .build()
    )
    assert form.content[0].options == ("Rot",)
    assert form.content[0].text == "colour"
