import os
from dataclasses import dataclass

from eventify.errors import ConfigurationError

DEFAULT_BASE_URI = "http://api.eventify.pro/v1"
EVENTS_ENDPOINT = "events"

API_KEY_ENV_VAR = "EVENTIFY_PRO_API_KEY"
BASE_URI_ENV_VAR = "EVENTIFY_PRO_BASE_URI"


@dataclass(frozen=True)
class PublisherConfig:
    """Settings resolved once when a publisher is built."""

    api_key: str
    base_uri: str = DEFAULT_BASE_URI
    raise_errors: bool = False
    log_success: bool = True

    @property
    def events_url(self) -> str:
        return f"{self.base_uri.rstrip('/')}/{EVENTS_ENDPOINT}"


def resolve_api_key(api_key: str | None = None) -> str:
    """Return the API key from the argument or the environment.

    Args:
        api_key: Explicit key; takes precedence over the environment.

    Returns:
        The non-empty API key.

    Raises:
        ConfigurationError: If neither source provides a non-empty key, or the
            key cannot be sent as an HTTP header value (latin-1).
    """
    resolved = api_key or os.getenv(API_KEY_ENV_VAR, "")
    if not resolved:
        raise ConfigurationError(
            f"Please provide api_key param or set {API_KEY_ENV_VAR} environment variable"
        )
    try:
        resolved.encode("latin-1")
    except UnicodeEncodeError as e:
        raise ConfigurationError("api_key must contain only latin-1 characters") from e
    return resolved


def resolve_base_uri(base_uri: str | None = None) -> str:
    return base_uri or os.getenv(BASE_URI_ENV_VAR) or DEFAULT_BASE_URI


def build_config(
    api_key: str | None = None,
    base_uri: str | None = None,
    raise_errors: bool = False,
    log_success: bool = True,
) -> PublisherConfig:
    """Resolve every setting and freeze it into a PublisherConfig.

    Args:
        api_key: Explicit API key, else EVENTIFY_PRO_API_KEY.
        base_uri: Explicit API base, else EVENTIFY_PRO_BASE_URI, else the public API.
        raise_errors: Raise typed errors instead of returning False.
        log_success: Log successful publishes as well as failures.

    Returns:
        The immutable configuration.
    """
    return PublisherConfig(
        api_key=resolve_api_key(api_key),
        base_uri=resolve_base_uri(base_uri),
        raise_errors=bool(raise_errors),
        log_success=bool(log_success),
    )
