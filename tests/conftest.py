"""Shared fixtures: a fake events endpoint and a recording logger."""

from __future__ import annotations

import json
import threading
from typing import Any, Callable

import pytest
import requests

from eventify.config import API_KEY_ENV_VAR, BASE_URI_ENV_VAR


class RecordingLogger:
    """Collects every message passed to info()."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def info(self, message: str) -> None:
        self.messages.append(message)


class FakeEndpoint:
    """Stands in for ``requests.post`` and records each call."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self._lock = threading.Lock()
        self._responder: Callable[[dict[str, Any]], requests.Response] = lambda call: make_response(
            {"id": "a98185f9-61a2-44f2-93d0-1dfd8f7a7790"}
        )

    def respond_with(self, body: Any, status: int = 200) -> None:
        self._responder = lambda call: make_response(body, status)

    def respond_using(self, responder: Callable[[dict[str, Any]], requests.Response]) -> None:
        self._responder = responder

    def fail_with(self, exc: Exception) -> None:
        def _raise(call: dict[str, Any]) -> requests.Response:
            raise exc

        self._responder = _raise

    def __call__(self, url: str, data: Any = None, headers: Any = None, timeout: Any = None, **kwargs: Any):
        call = {"url": url, "data": data, "headers": headers, "timeout": timeout, **kwargs}
        with self._lock:
            self.calls.append(call)
        return self._responder(call)


def make_response(body: Any, status: int = 200) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.encoding = "utf-8"
    raw = body if isinstance(body, str) else json.dumps(body)
    response._content = raw.encode("utf-8")
    return response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)
    monkeypatch.delenv(BASE_URI_ENV_VAR, raising=False)


@pytest.fixture
def endpoint(monkeypatch: pytest.MonkeyPatch) -> FakeEndpoint:
    fake = FakeEndpoint()
    monkeypatch.setattr("eventify.services.requests.post", fake)
    return fake


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
