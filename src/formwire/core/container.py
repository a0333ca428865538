"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from ..forms import FormRegistry
from ..session import FormTransport, SessionTracker
from .config import Settings, get_settings
from .logging_config import configure_logging


class FormModule(Module):
    """Form registry and session tracking."""

    def __init__(self, settings: Settings, transport: FormTransport | None = None) -> None:
        self.settings = settings
        self.transport = transport

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @singleton
    @provider
    def provide_form_registry(self, settings: Settings) -> FormRegistry:
        """Provide a registry with the default form definitions."""
        return FormRegistry.default(settings)

    @singleton
    @provider
    def provide_session_tracker(self, registry: FormRegistry, settings: Settings) -> SessionTracker:
        """Provide the session tracker sending through the transport."""
        return SessionTracker(registry, self.transport, max_id=settings.max_form_id)


def create_container(
    transport: FormTransport | None = None, settings: Settings | None = None
) -> Injector:
    """
    Create configured injector.

    Logging is configured from the settings' ``log_level`` and ``json_logs``
    before anything is built, so registry and tracker events use it.
    """
    settings = settings if settings is not None else get_settings()
    configure_logging(settings.log_level, settings.json_logs)
    return Injector([FormModule(settings, transport)])
