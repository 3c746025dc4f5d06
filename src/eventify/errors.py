class EventifyError(Exception):
    """Base class for every error raised by the EventifyPro client."""


class ConfigurationError(EventifyError):
    """The client cannot be used as configured (missing API key, bad logger)."""


class PublishError(EventifyError):
    """The event was not accepted or the API response could not be understood."""


class ServiceUnavailableError(PublishError):
    """The request never completed (timeout, refused connection, DNS failure)."""
