"""Repository dispatch request models."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

EVENT_TYPE = "Publish posts from WordPress"

CONTENT_TYPE = "application/json; charset=utf-8"
ACCEPT = "application/vnd.github.everest-preview+json"


class DispatchOutcome(str, Enum):
    """Result of handling one content-save event."""

    SKIPPED = "skipped"  # Item not published
    DISABLED = "disabled"  # Webhook not configured or configuration unusable
    SENT = "sent"
    FAILED = "failed"  # Request sent but failed or rejected

    @property
    def attempted(self) -> bool:
        """Whether a request was attempted."""
        return self in (DispatchOutcome.SENT, DispatchOutcome.FAILED)


class DispatchTarget(BaseModel):
    """Resolved webhook destination and credential."""

    model_config = ConfigDict(frozen=True)

    address: str
    token: str = Field(repr=False)
    source: Literal["options", "overrides"] = "options"


class RepositoryDispatchPayload(BaseModel):
    """Body of a GitHub repository dispatch event."""

    event_type: str = EVENT_TYPE
