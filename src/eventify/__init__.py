from eventify.client import EventPublisher
from eventify.config import API_KEY_ENV_VAR, DEFAULT_BASE_URI, PublisherConfig
from eventify.errors import (
    ConfigurationError,
    EventifyError,
    PublishError,
    ServiceUnavailableError,
)
from eventify.logger import DefaultLogger, InfoLogger

__all__ = [
    "API_KEY_ENV_VAR",
    "DEFAULT_BASE_URI",
    "ConfigurationError",
    "DefaultLogger",
    "EventPublisher",
    "EventifyError",
    "InfoLogger",
    "PublishError",
    "PublisherConfig",
    "ServiceUnavailableError",
]
