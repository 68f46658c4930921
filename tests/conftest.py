"""Shared fixtures."""

from collections.abc import Callable, Iterator

import httpx
import pytest

from github_actions_hooks.core.config import Settings, get_settings
from github_actions_hooks.settings.store import InMemorySettingsStore

OVERRIDE_VARS = ("GITHUB_ACTIONS_HOOKS_API", "GITHUB_ACTIONS_HOOKS_TOKEN", "OPTIONS_FILE")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep override constants from the real environment out of tests."""
    for var in OVERRIDE_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings without override constants."""
    return Settings(_env_file=None)  # type: ignore


@pytest.fixture
def store() -> InMemorySettingsStore:
    """Empty in-memory settings store."""
    return InMemorySettingsStore()


class RecordingTransport(httpx.MockTransport):
    """Mock transport remembering every request it handled."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response] | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._respond = handler or (lambda request: httpx.Response(204))
        super().__init__(self._record)

    def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)


@pytest.fixture
def transport() -> RecordingTransport:
    """Transport answering 204 No Content."""
    return RecordingTransport()


@pytest.fixture
def client(transport: RecordingTransport) -> Iterator[httpx.Client]:
    """HTTP client wired to the recording transport."""
    with httpx.Client(transport=transport) as http_client:
        yield http_client


@pytest.fixture
def make_client() -> Iterator[Callable[..., tuple[httpx.Client, RecordingTransport]]]:
    """Factory for clients with a custom response handler."""
    clients: list[httpx.Client] = []

    def factory(
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> tuple[httpx.Client, RecordingTransport]:
        recording = RecordingTransport(handler)
        http_client = httpx.Client(transport=recording)
        clients.append(http_client)
        return http_client, recording

    yield factory

    for http_client in clients:
        http_client.close()
