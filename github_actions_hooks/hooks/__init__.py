"""Host event hooks."""

from github_actions_hooks.hooks.base import PUBLISH_STATUS, HookEvent, SaveContext
from github_actions_hooks.hooks.registry import HookRegistry

__all__ = ["PUBLISH_STATUS", "HookEvent", "SaveContext", "HookRegistry"]
