"""Repository dispatch webhook."""

from github_actions_hooks.webhooks.dispatcher import GitHubDispatcher
from github_actions_hooks.webhooks.models import (
    DispatchOutcome,
    DispatchTarget,
    RepositoryDispatchPayload,
)

__all__ = ["GitHubDispatcher", "DispatchOutcome", "DispatchTarget", "RepositoryDispatchPayload"]
