"""Tests for plugin bootstrap."""

import pytest

from github_actions_hooks.core.config import Settings
from github_actions_hooks.hooks.base import HookEvent
from github_actions_hooks.hooks.registry import HookRegistry
from github_actions_hooks.plugin import GitHubActionsHooks
from github_actions_hooks.settings.store import InMemorySettingsStore
from github_actions_hooks.webhooks.models import DispatchOutcome


def test_plugin_registers_fields_and_hooks(settings, store, client) -> None:
    """Test bootstrap registers settings fields and save hooks."""
    registry = HookRegistry()

    plugin = GitHubActionsHooks(store, settings=settings, registry=registry, client=client)

    assert plugin.registry is registry
    assert store.registered_keys == ["webhook_address", "webhook_token"]
    for event in HookEvent:
        assert registry.has_action(event)


@pytest.mark.parametrize("event", list(HookEvent))
def test_every_save_event_dispatches(event, settings, client, transport) -> None:
    """Test each save event reaches the dispatcher."""
    store = InMemorySettingsStore({"webhook_address": "https://x/y", "webhook_token": "tok"})

    with GitHubActionsHooks(store, settings=settings, client=client) as plugin:
        outcome = plugin.save(event, 10, "publish")

    assert outcome == DispatchOutcome.SENT
    assert len(transport.requests) == 1
    assert transport.requests[0].headers["Authorization"] == "token tok"


def test_save_draft_dispatches_nothing(settings, client, transport) -> None:
    """Test saving a draft through the registry sends nothing."""
    store = InMemorySettingsStore(
        {"webhook_address": "https://api.github.com/repos/a/b/dispatches", "webhook_token": "tok"}
    )
    plugin = GitHubActionsHooks(store, settings=settings, client=client)

    plugin.save(HookEvent.SAVE_POST, 1, "draft")

    assert transport.requests == []


def test_unreachable_webhook_does_not_break_save(settings, make_client) -> None:
    """Test the save path completes when the webhook is down."""
    import httpx

    def fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    client, transport = make_client(fail)
    store = InMemorySettingsStore({"webhook_address": "https://x/y", "webhook_token": "tok"})
    plugin = GitHubActionsHooks(store, settings=settings, client=client)

    assert plugin.save(HookEvent.SAVE_PAGE, 2, "publish") == DispatchOutcome.FAILED
    assert len(transport.requests) == 1


def test_plugin_uses_overrides(store, client, transport) -> None:
    """Test overrides from settings are used by the bootstrapped dispatcher."""
    settings = Settings(  # type: ignore
        _env_file=None,
        GITHUB_ACTIONS_HOOKS_API="https://override/api",
        GITHUB_ACTIONS_HOOKS_TOKEN="override-token",
    )
    plugin = GitHubActionsHooks(store, settings=settings, client=client)

    plugin.save(HookEvent.SAVE_POST, 3, "publish")

    assert str(transport.requests[0].url) == "https://override/api"
