"""GitHub repository dispatch on publish."""

from typing import Any, Optional

import httpx

from github_actions_hooks.core.config import Settings, get_settings
from github_actions_hooks.core.exceptions import DispatchException, SettingsStoreException
from github_actions_hooks.core.logging import get_logger
from github_actions_hooks.hooks.base import PUBLISH_STATUS, HookEvent, SaveContext
from github_actions_hooks.hooks.registry import HookRegistry
from github_actions_hooks.settings.page import WEBHOOK_ADDRESS, WEBHOOK_TOKEN
from github_actions_hooks.settings.store import SettingsStore
from github_actions_hooks.webhooks.models import (
    ACCEPT,
    CONTENT_TYPE,
    DispatchOutcome,
    DispatchTarget,
    RepositoryDispatchPayload,
)

logger = get_logger(__name__)

# Event subscriptions and their priorities
SUBSCRIPTIONS: tuple[tuple[HookEvent, int], ...] = (
    (HookEvent.SAVE_POST, 10),
    (HookEvent.SAVE_PAGE, 10),
    (HookEvent.ACF_SAVE_POST, 20),
)


class GitHubDispatcher:
    """Sends a repository dispatch event when content is published."""

    def __init__(
        self,
        store: SettingsStore,
        settings: Optional[Settings] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """Initialize dispatcher.

        Args:
            store: Settings store holding the webhook options
            settings: Process settings with the override constants (default from environment)
            client: HTTP client to send requests with (created and owned when omitted)
        """
        self.store = store
        self.settings = settings or get_settings()
        self.timeout = self.settings.dispatch_timeout

        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self.timeout)

    def __enter__(self) -> "GitHubDispatcher":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager."""
        self.close()

    def close(self) -> None:
        """Close the HTTP client if the dispatcher created it."""
        if self._owns_client:
            self._client.close()

    def register(self, registry: HookRegistry) -> None:
        """Subscribe the save handler to every content-save event.

        Args:
            registry: Hook registry to subscribe to
        """
        for event, priority in SUBSCRIPTIONS:
            registry.add_action(event, self.on_save, priority=priority)

    def on_save(self, context: SaveContext) -> DispatchOutcome:
        """Hook callback for content-save events."""
        return self.handle_save(context.item_id, context.status)

    def handle_save(self, item_id: int, status: str) -> DispatchOutcome:
        """Dispatch a repository event if the saved item was published.

        Failures are logged and never raised: saving content must not
        depend on the webhook being reachable.

        Args:
            item_id: Saved item identifier
            status: Item status after the save

        Returns:
            What happened to the save event
        """
        if status != PUBLISH_STATUS:
            return DispatchOutcome.SKIPPED

        try:
            target = self.resolve_target()
        except SettingsStoreException as e:
            logger.warning("github_dispatch_disabled", item_id=item_id, error=e.message)
            return DispatchOutcome.DISABLED

        if target is None:
            logger.debug("github_dispatch_disabled", item_id=item_id)
            return DispatchOutcome.DISABLED

        try:
            self.send(target)
        except DispatchException as e:
            logger.warning(
                "github_dispatch_failed",
                item_id=item_id,
                address=target.address,
                status_code=e.status_code,
                error=e.message,
            )
            return DispatchOutcome.FAILED

        logger.info(
            "github_dispatch_sent",
            item_id=item_id,
            address=target.address,
            source=target.source,
        )
        return DispatchOutcome.SENT

    def resolve_target(self) -> Optional[DispatchTarget]:
        """Resolve webhook address and token.

        Stored options are used when both are set, otherwise both override
        constants must be defined. Values are never mixed across the two.
        A pair that cannot be sent (bad URL, non-ASCII token) counts as
        unset.

        Returns:
            Dispatch target, or None when dispatch is not configured

        Raises:
            SettingsStoreException: If the settings store cannot be read
        """
        address = self.store.get(WEBHOOK_ADDRESS)
        token = self.store.get(WEBHOOK_TOKEN)

        if address and token:
            target = DispatchTarget(address=address, token=token, source="options")
        elif self.settings.has_overrides:
            target = DispatchTarget(
                address=self.settings.hooks_api,  # type: ignore[arg-type]
                token=self.settings.hooks_token,  # type: ignore[arg-type]
                source="overrides",
            )
        else:
            return None

        problem = self.validate_target(target)
        if problem:
            logger.warning(
                "github_dispatch_misconfigured",
                source=target.source,
                address=target.address,
                error=problem,
            )
            return None

        return target

    @staticmethod
    def validate_target(target: DispatchTarget) -> Optional[str]:
        """Check that a target can be turned into a request.

        Args:
            target: Dispatch target

        Returns:
            Problem description, or None when the target is usable
        """
        try:
            url = httpx.URL(target.address)
        except httpx.InvalidURL as e:
            return f"Invalid address: {str(e)}"

        if url.scheme not in ("http", "https") or not url.host:
            return "Address must be an absolute http(s) URL"

        if not target.token.isascii():
            return "Token must contain only ASCII characters"

        return None

    @staticmethod
    def build_headers(token: str) -> dict[str, str]:
        """Build repository dispatch request headers.

        Args:
            token: Personal access token

        Returns:
            Request headers
        """
        return {
            "Content-Type": CONTENT_TYPE,
            "Accept": ACCEPT,
            "Authorization": f"token {token}",
        }

    @staticmethod
    def build_payload() -> dict[str, Any]:
        """Build repository dispatch request body."""
        return RepositoryDispatchPayload().model_dump()

    def send(self, target: DispatchTarget) -> httpx.Response:
        """Send one repository dispatch request.

        Args:
            target: Resolved destination and credential

        Returns:
            HTTP response

        Raises:
            DispatchException: On transport failure or a non-2xx response
        """
        body = RepositoryDispatchPayload().model_dump_json()

        try:
            response = self._client.post(
                target.address,
                content=body.encode("utf-8"),
                headers=self.build_headers(target.token),
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            raise DispatchException(f"Request error: {str(e)}") from e
        except (httpx.InvalidURL, UnicodeEncodeError) as e:
            raise DispatchException(f"Invalid request: {str(e)}") from e

        if not response.is_success:
            raise DispatchException(
                f"HTTP {response.status_code}",
                status_code=response.status_code,
                details={"body": response.text[:500]},
            )

        return response
