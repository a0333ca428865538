"""Form encoding and decoding tests."""

import json

import pytest
from hypothesis import given, strategies as st

from formwire.components import (
    ABSENT,
    ButtonComponent,
    DropdownComponent,
    InputComponent,
    LabelComponent,
    SliderComponent,
    ToggleComponent,
)
from formwire.forms import (
    CustomForm,
    CustomFormCodec,
    FormParseError,
    ModalForm,
    ModalFormCodec,
    SimpleForm,
    SimpleFormCodec,
)


# ============================================================================
# Encoding
# ============================================================================

@pytest.mark.unit
def test_encode_simple_form(simple_form):
    encoded = SimpleFormCodec().encode(simple_form)

    assert encoded == {
        "type": "form",
        "title": "Pick one",
        "content": "Where to?",
        "buttons": [
            {"text": "Spawn"},
            {"text": "Shop", "image": {"type": "url", "data": "https://example.com/shop.png"}},
        ],
    }


@pytest.mark.unit
def test_encode_modal_form(modal_form):
    encoded = json.loads(ModalFormCodec().encode_json(modal_form))

    assert encoded == {
        "type": "modal",
        "title": "Confirm",
        "content": "Are you sure?",
        "button1": "Yes",
        "button2": "No",
    }


@pytest.mark.unit
def test_encode_custom_form(custom_form):
    encoded = CustomFormCodec().encode(custom_form)

    assert encoded["type"] == "custom_form"
    assert encoded["icon"] == {"type": "path", "data": "textures/items/book.png"}
    assert [c["type"] for c in encoded["content"]] == [
        "label",
        "input",
        "toggle",
        "slider",
        "step_slider",
        "dropdown",
    ]
    assert encoded["content"][3] == {
        "type": "slider",
        "text": "Volume",
        "min": 0.0,
        "max": 10.0,
        "step": 1.0,
        "default": 5.0,
    }


@pytest.mark.unit
def test_encode_custom_form_without_icon():
    form = CustomForm(title="No icon", content=(LabelComponent(text="Hi"),))
    encoded = CustomFormCodec().encode(form)

    assert "icon" not in encoded
    assert list(encoded) == ["type", "title", "content"]


@pytest.mark.unit
def test_encode_drops_absent_slots():
    """Optional slots that were not added never reach the wire."""
    simple = SimpleForm(
        title="t", buttons=(ButtonComponent(text="A"), ABSENT, ButtonComponent(text="B"))
    )
    custom = CustomForm(title="t", content=(ABSENT, ToggleComponent(text="T"), ABSENT))

    assert SimpleFormCodec().encode(simple)["buttons"] == [{"text": "A"}, {"text": "B"}]
    assert CustomFormCodec().encode(custom)["content"] == [
        {"type": "toggle", "text": "T", "default": False}
    ]


@pytest.mark.unit
def test_encode_wrong_form_class(modal_form):
    with pytest.raises(TypeError, match="SimpleFormCodec cannot handle ModalForm"):
        SimpleFormCodec().encode(modal_form)


# ============================================================================
# Decoding
# ============================================================================

@pytest.mark.unit
def test_round_trip_simple(simple_form):
    codec = SimpleFormCodec()
    assert codec.decode(codec.encode_json(simple_form)) == simple_form


@pytest.mark.unit
def test_round_trip_modal(modal_form):
    codec = ModalFormCodec()
    assert codec.decode(codec.encode_json(modal_form)) == modal_form


@pytest.mark.unit
def test_round_trip_custom(custom_form):
    codec = CustomFormCodec()
    assert codec.decode(codec.encode_json(custom_form)) == custom_form


@pytest.mark.unit
def test_decode_custom_slider_without_default():
    text = (
        '{"type": "custom_form", "title": "t", "content": ['
        '{"type": "slider", "text": "s", "min": 0, "max": 10, "step": 3}]}'
    )
    form = CustomFormCodec().decode(text)

    slider = form.content[0]
    assert isinstance(slider, SliderComponent)
    assert slider.default == 3


@pytest.mark.unit
def test_decode_custom_dropdown_clamps_default():
    text = (
        '{"title": "t", "content": ['
        '{"type": "dropdown", "text": "d", "options": ["a"], "default": 4}]}'
    )
    form = CustomFormCodec().decode(text)

    assert form.content == (DropdownComponent(text="d", options=("a",), default=0),)


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, message",
    [
        ('{"content": "c", "buttons": []}', "member named 'title'"),
        ('{"title": "t", "buttons": []}', "member named 'content'"),
        ('{"title": "t", "content": "c"}', "member named 'buttons'"),
        ('{"title": 1, "content": "c", "buttons": []}', "'title' should be a string"),
        ('{"title": "t", "content": "c", "buttons": {}}', "'buttons' should be an array"),
        ('{"title": "t", "content": "c", "buttons": ["A"]}', "Button has to be a JSON object"),
    ],
)
def test_decode_simple_errors(text, message):
    with pytest.raises(FormParseError, match=message):
        SimpleFormCodec().decode(text)


@pytest.mark.unit
def test_decode_modal_missing_button():
    with pytest.raises(FormParseError, match="button2"):
        ModalFormCodec().decode('{"title": "t", "content": "c", "button1": "Yes"}')


@pytest.mark.unit
def test_decode_custom_unknown_component_type():
    text = '{"title": "t", "content": [{"type": "checkbox", "text": "x"}]}'
    with pytest.raises(FormParseError, match="Failed to find Component type checkbox"):
        CustomFormCodec().decode(text)


@pytest.mark.unit
def test_decode_custom_component_without_type():
    with pytest.raises(FormParseError, match="member named 'type'"):
        CustomFormCodec().decode('{"title": "t", "content": [{"text": "x"}]}')


@pytest.mark.unit
def test_decode_custom_invalid_component_data():
    text = '{"title": "t", "content": [{"type": "slider", "text": "s", "min": 5, "max": 1}]}'
    with pytest.raises(FormParseError, match="Invalid custom_form data"):
        CustomFormCodec().decode(text)


@pytest.mark.unit
def test_decode_custom_with_restricted_components():
    """Only component kinds in the codec's table can be decoded."""
    from formwire.components import ComponentType

    codec = CustomFormCodec({ComponentType.LABEL: LabelComponent})
    form = codec.decode('{"title": "t", "content": [{"type": "label", "text": "x"}]}')
    assert form.content == (LabelComponent(text="x"),)

    with pytest.raises(FormParseError, match="Failed to find Component type input"):
        codec.decode('{"title": "t", "content": [{"type": "input", "text": "x"}]}')


@pytest.mark.unit
@pytest.mark.parametrize("text", ["not json", "[1, 2]", '"form"', ""])
def test_decode_rejects_non_objects(text):
    with pytest.raises(FormParseError):
        ModalFormCodec().decode(text)


@pytest.mark.unit
def test_decode_size_limit(modal_form):
    codec = ModalFormCodec(max_size=16)
    with pytest.raises(FormParseError, match="exceeds maximum"):
        codec.decode(ModalFormCodec().encode_json(modal_form))


@pytest.mark.unit
def test_decode_depth_limit():
    nested = '{"title": "t", "content": [], "extra": [[[[[[1]]]]]]}'
    with pytest.raises(FormParseError, match="nesting depth"):
        CustomFormCodec(max_depth=3).decode(nested)


@pytest.mark.unit
def test_decode_nesting_too_deep_to_decode():
    text = '{"title": "t", "content": ' + "[" * 100_000 + "]" * 100_000 + "}"
    with pytest.raises(FormParseError):
        CustomFormCodec().decode(text)


@pytest.mark.unit
def test_decode_data_requires_object():
    with pytest.raises(FormParseError, match="JSON object"):
        SimpleFormCodec().decode_data(["title"])


@pytest.mark.unit
def test_decoded_forms_have_no_absent_slots():
    form = CustomForm(
        title="t", content=(InputComponent(text="a"), ABSENT, ToggleComponent(text="b"))
    )
    codec = CustomFormCodec()
    decoded = codec.decode(codec.encode_json(form))

    assert ABSENT not in decoded.content
    assert decoded.content == (InputComponent(text="a"), ToggleComponent(text="b"))


# ============================================================================
# Property tests
# ============================================================================

texts = st.text(max_size=40)


@given(texts, texts, texts, texts)
def test_modal_round_trip_property(title, content, button1, button2):
    """Property test: a modal form survives encode then decode."""
    form = ModalForm(title=title, content=content, button1=button1, button2=button2)
    codec = ModalFormCodec()
    assert codec.decode(codec.encode_json(form)) == form


@given(texts, st.lists(texts, max_size=6))
def test_simple_round_trip_property(title, labels):
    """Property test: a simple form without holes survives encode then decode."""
    form = SimpleForm(
        title=title, content="", buttons=tuple(ButtonComponent(text=t) for t in labels)
    )
    codec = SimpleFormCodec()
    assert codec.decode(codec.encode_json(form)) == form
