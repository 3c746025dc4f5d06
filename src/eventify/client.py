from typing import Any

from eventify.config import build_config
from eventify.errors import PublishError
from eventify.logger import DefaultLogger, InfoLogger, ensure_info_logger, format_log_message
from eventify.services import build_form, build_headers, check_envelope, parse_response, post_event


class EventPublisher:
    """Publishes events to the EventifyPro API.

    Basic usage::

        publisher = EventPublisher(api_key="personal_api_key")
        publisher.publish("OrderPosted", {"order_id": 10, "amount": 3000})

    By default ``publish`` never raises; it returns True or False and logs the
    outcome. Pass ``raise_errors=True`` to get a PublishError (or its
    ServiceUnavailableError subclass) instead of False.

    Any object with an ``info(message)`` method can be passed as ``logger``;
    a stdout logger is used otherwise.
    """

    def __init__(
        self,
        api_key: str | None = None,
        raise_errors: bool = False,
        logger: InfoLogger | None = None,
        base_uri: str | None = None,
        log_success: bool = True,
    ):
        self.config = build_config(
            api_key=api_key,
            base_uri=base_uri,
            raise_errors=raise_errors,
            log_success=log_success,
        )
        self._log_info = ensure_info_logger(logger if logger is not None else DefaultLogger())
        self._headers = build_headers(self.config.api_key)

    @property
    def raise_errors(self) -> bool:
        return self.config.raise_errors

    def publish(self, type: str, data: Any) -> bool:
        """Send one event and classify the outcome.

        Args:
            type: Event type name, e.g. ``"OrderPosted"``.
            data: JSON-serializable payload.

        Returns:
            True when the API accepted the event. False on failure when
            ``raise_errors`` is off.

        Raises:
            PublishError: The API returned an error message or an unreadable
                body, or ``data`` is not serializable (raise mode only).
            ServiceUnavailableError: The request could not be completed
                (raise mode only).
        """
        params = {"type": type, "data": data}
        try:
            form = build_form(type, data)
            response = post_event(self.config.events_url, dict(self._headers), form)
            check_envelope(parse_response(response))
        except PublishError as e:
            self._log("publish", params, error=str(e))
            if self.config.raise_errors:
                raise
            return False

        if self.config.log_success:
            self._log("publish", params)
        return True

    def _log(self, method: str, params: dict, error: str | None = None) -> None:
        self._log_info(format_log_message(method, params, error=error))
