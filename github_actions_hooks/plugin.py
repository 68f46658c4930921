"""Plugin bootstrap: construct the dispatcher and wire it to host events."""

from typing import Any, Optional

import httpx

from github_actions_hooks.core.config import Settings, get_settings
from github_actions_hooks.core.logging import get_logger
from github_actions_hooks.hooks.base import HookEvent, SaveContext
from github_actions_hooks.hooks.registry import HookRegistry
from github_actions_hooks.settings import page
from github_actions_hooks.settings.store import SettingsStore
from github_actions_hooks.webhooks.dispatcher import GitHubDispatcher
from github_actions_hooks.webhooks.models import DispatchOutcome

logger = get_logger(__name__)


class GitHubActionsHooks:
    """GitHub Actions Hooks plugin instance.

    Created once at process start. Registers the settings page fields with
    the store and subscribes the dispatcher to the content-save events.
    """

    def __init__(
        self,
        store: SettingsStore,
        settings: Optional[Settings] = None,
        registry: Optional[HookRegistry] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """Initialize plugin.

        Args:
            store: Settings store holding the webhook options
            settings: Process settings (default from environment)
            registry: Hook registry to subscribe to (a new one when omitted)
            client: HTTP client for the dispatcher
        """
        self.store = store
        self.settings = settings or get_settings()
        self.registry = registry or HookRegistry()
        self.dispatcher = GitHubDispatcher(store, settings=self.settings, client=client)

        page.setup(self.store)
        self.dispatcher.register(self.registry)

        logger.info(
            "plugin_loaded",
            name=page.PAGE_TITLE,
            hooks=len(self.registry.list_actions()),
            overrides=self.settings.has_overrides,
        )

    def __enter__(self) -> "GitHubActionsHooks":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager."""
        self.close()

    def close(self) -> None:
        """Release dispatcher resources."""
        self.dispatcher.close()

    def save(self, event: HookEvent, item_id: int, status: str) -> Optional[DispatchOutcome]:
        """Fire a content-save event as the host would.

        Args:
            event: Save event type
            item_id: Saved item identifier
            status: Item status after the save

        Returns:
            Dispatcher outcome, or None if the dispatcher did not complete
        """
        results = self.registry.do_action(event, SaveContext(item_id=item_id, status=status))
        return next((r for r in results if isinstance(r, DispatchOutcome)), None)
