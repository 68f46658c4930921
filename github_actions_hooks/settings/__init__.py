"""Plugin options: storage and settings page."""

from github_actions_hooks.settings.page import FIELDS, WEBHOOK_ADDRESS, WEBHOOK_TOKEN, SettingsField
from github_actions_hooks.settings.store import (
    InMemorySettingsStore,
    JsonFileSettingsStore,
    SettingsStore,
)

__all__ = [
    "FIELDS",
    "WEBHOOK_ADDRESS",
    "WEBHOOK_TOKEN",
    "SettingsField",
    "SettingsStore",
    "InMemorySettingsStore",
    "JsonFileSettingsStore",
]
