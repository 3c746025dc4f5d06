import json
import logging
from typing import Any

import requests

from eventify.errors import PublishError, ServiceUnavailableError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 10
CONTENT_TYPE = "application/json; charset=utf-8"

UNPROCESSABLE_RESPONSE_MESSAGE = "Could not process response from EventifyPro"
SERVICE_UNAVAILABLE_MESSAGE = "EventifyPro is currently unavailable"


def build_headers(api_key: str) -> dict:
    """Build the request headers.

    The Content-Type describes the JSON ``data`` field, not the form body.

    Args:
        api_key: Value sent verbatim in the Authorization header.

    Returns:
        dict: Header mapping for the POST request.
    """
    return {
        "Authorization": api_key,
        "Content-Type": CONTENT_TYPE,
    }


def build_form(event_type: str, data: Any) -> dict:
    """
    Build the form fields for one event.
    Args:
        event_type (str): Event type name.
        data (dict): JSON-serializable event payload.
    Returns:
        dict: Form fields with ``data`` encoded as a JSON string.
    Raises:
        PublishError: If ``data`` cannot be serialized to JSON.
    """
    try:
        encoded = json.dumps(data)
    except (TypeError, ValueError) as e:
        raise PublishError(f"Could not serialize event data: {e}") from e
    return {"type": event_type, "data": encoded}


def post_event(url: str, headers: dict, form: dict) -> requests.Response:
    """
    Post one event to the API.
    Args:
        url (str): Full events endpoint URL.
        headers (dict): Request headers.
        form (dict): Form-encoded body fields.
    Returns:
        requests.Response: Response object from the POST request.
    Raises:
        ServiceUnavailableError: If the transport fails for any reason.
    """
    try:
        return requests.post(url=url, data=form, headers=headers, timeout=REQUEST_TIMEOUT_SECONDS)
    except requests.exceptions.RequestException as e:
        logger.debug(f"Error posting event to API: {e}")
        raise ServiceUnavailableError(SERVICE_UNAVAILABLE_MESSAGE) from e


def parse_response(response: requests.Response) -> dict:
    """Decode the response body into the JSON envelope.

    Raises:
        PublishError: If the body is not a JSON object.
    """
    try:
        envelope = response.json()
    except ValueError as e:
        raise PublishError(UNPROCESSABLE_RESPONSE_MESSAGE) from e
    if not isinstance(envelope, dict):
        raise PublishError(UNPROCESSABLE_RESPONSE_MESSAGE)
    return envelope


def check_envelope(envelope: dict) -> None:
    error_message = envelope.get("error_message") or ""
    if error_message:
        raise PublishError(str(error_message))
