"""Pytest configuration and fixtures."""

import os
from unittest.mock import MagicMock

import pytest
from prometheus_client import CollectorRegistry

from formwire.components import (
    ButtonComponent,
    DropdownComponent,
    FormImage,
    InputComponent,
    LabelComponent,
    SliderComponent,
    StepSliderComponent,
    ToggleComponent,
)
from formwire.core import get_settings
from formwire.forms import CustomForm, FormRegistry, ModalForm, SimpleForm
from formwire.monitoring import MetricsCollector
from formwire.session import SessionTracker


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["FORMWIRE_LOG_LEVEL"] = "DEBUG"


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return get_settings()


@pytest.fixture
def registry():
    """Registry with the default form definitions."""
    return FormRegistry.default()


@pytest.fixture
def metrics():
    """Metrics collector on its own Prometheus registry."""
    return MetricsCollector(CollectorRegistry())


@pytest.fixture
def transport():
    """Mock transport recording sent and closed forms."""
    return MagicMock(spec=["send_form", "close_form"])


@pytest.fixture
def tracker(registry, transport, metrics):
    """Session tracker with a small id range so wraparound is reachable."""
    return SessionTracker(registry, transport, max_id=3, metrics=metrics)


# ============================================================================
# Form Fixtures
# ============================================================================

@pytest.fixture
def simple_form():
    """Simple form with two buttons, one of them with an image."""
    return SimpleForm(
        title="Pick one",
        content="Where to?",
        buttons=(
            ButtonComponent(text="Spawn"),
            ButtonComponent(text="Shop", image=FormImage.url("https://example.com/shop.png")),
        ),
    )


@pytest.fixture
def modal_form():
    """Modal form asking a yes/no question."""
    return ModalForm(title="Confirm", content="Are you sure?", button1="Yes", button2="No")


@pytest.fixture
def custom_form():
    """Custom form with one component of every kind."""
    return CustomForm(
        title="Settings",
        icon=FormImage.path("textures/items/book.png"),
        content=(
            LabelComponent(text="Personal"),
            InputComponent(text="Name", placeholder="Steve"),
            ToggleComponent(text="Notifications", default=True),
            SliderComponent(text="Volume", min=0, max=10),
            StepSliderComponent(text="Difficulty", steps=("Easy", "Normal", "Hard"), default=1),
            DropdownComponent(text="Language", options=("English", "Deutsch")),
        ),
    )
