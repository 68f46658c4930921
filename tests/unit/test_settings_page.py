"""Tests for settings page description."""

import pytest

from github_actions_hooks.core.config import Settings
from github_actions_hooks.core.exceptions import ConfigurationException
from github_actions_hooks.settings import page
from github_actions_hooks.settings.store import InMemorySettingsStore


def test_page_fields() -> None:
    """Test the page defines the address and token fields in one section."""
    assert [f.uid for f in page.FIELDS] == ["webhook_address", "webhook_token"]
    assert {f.section for f in page.FIELDS} == {page.SECTION_ID}

    address = page.get_field("webhook_address")
    token = page.get_field("webhook_token")

    assert address.label == "API Endpoint"
    assert address.is_secret is False
    assert token.label == "Personal Access Token"
    assert token.is_secret is True


def test_get_unknown_field() -> None:
    """Test unknown field names raise ConfigurationException."""
    with pytest.raises(ConfigurationException):
        page.get_field("webhook_secret")


def test_setup_registers_fields(store: InMemorySettingsStore) -> None:
    """Test setup registers every field."""
    page.setup(store)

    assert store.registered_keys == ["webhook_address", "webhook_token"]


def test_field_value_falls_back_to_default(store: InMemorySettingsStore) -> None:
    """Test display value uses the default while unset."""
    address = page.get_field("webhook_address")

    assert page.field_value(store, address) == address.default

    store.set("webhook_address", "https://x/y")
    assert page.field_value(store, address) == "https://x/y"


def test_override_notices(settings: Settings) -> None:
    """Test notices are shown for each defined override constant."""
    assert page.override_notices(settings) == []

    with_api = Settings(_env_file=None, GITHUB_ACTIONS_HOOKS_API="https://x/y")  # type: ignore
    notices = page.override_notices(with_api)

    assert len(notices) == 1
    assert "GITHUB_ACTIONS_HOOKS_API" in notices[0]
