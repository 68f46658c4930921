"""Tests for logging configuration."""

import structlog

from github_actions_hooks.core.config import Settings
from github_actions_hooks.core.logging import MASK, app_context_processor, mask_secrets


def test_mask_secrets_top_level_keys() -> None:
    """Test token values are replaced before rendering."""
    event = mask_secrets(
        None,  # type: ignore[arg-type]
        "info",
        {"event": "github_dispatch_sent", "token": "ghp_secret", "webhook_token": "tok", "item_id": 1},
    )

    assert event["token"] == MASK
    assert event["webhook_token"] == MASK
    assert event["item_id"] == 1
    assert event["event"] == "github_dispatch_sent"


def test_mask_secrets_nested_headers() -> None:
    """Test authorization headers inside nested values are replaced."""
    event = mask_secrets(
        None,  # type: ignore[arg-type]
        "debug",
        {
            "event": "github_dispatch_request",
            "headers": {"Authorization": "token ghp_secret", "Accept": "application/json"},
            "targets": [{"address": "https://x/y", "token": "tok"}],
        },
    )

    assert event["headers"] == {"Authorization": MASK, "Accept": "application/json"}
    assert event["targets"] == [{"address": "https://x/y", "token": MASK}]


def test_app_context_processor() -> None:
    """Test application name and environment are added."""
    settings = Settings(_env_file=None, APP_ENV="production")  # type: ignore
    add_app_context = app_context_processor(settings)

    event = add_app_context(None, "info", {"event": "plugin_loaded"})  # type: ignore[arg-type]

    assert event["app"] == "github-actions-hooks"
    assert event["env"] == "production"


def test_mask_secrets_is_configured() -> None:
    """Test the masking processor runs in the configured pipeline."""
    assert mask_secrets in structlog.get_config()["processors"]
