"""Hook events and payloads."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

PUBLISH_STATUS = "publish"


class HookEvent(str, Enum):
    """Named host events a callback can subscribe to."""

    SAVE_POST = "save_post"  # Standard post saved
    SAVE_PAGE = "save_page"  # Page saved
    ACF_SAVE_POST = "acf_save_post"  # Advanced Custom Fields saved


class SaveContext(BaseModel):
    """Payload delivered with every content-save event."""

    model_config = ConfigDict(frozen=True)

    item_id: int
    status: str

    @property
    def is_publish(self) -> bool:
        """Check if the saved item is in the publish state."""
        return self.status == PUBLISH_STATUS
