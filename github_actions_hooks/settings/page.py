"""Settings page description: one section with the two dispatch options."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from github_actions_hooks.core.config import Settings
from github_actions_hooks.core.exceptions import ConfigurationException
from github_actions_hooks.settings.store import SettingsStore

PAGE_TITLE = "GitHub Actions Hooks"
PAGE_CAPABILITY = "manage_options"
PAGE_SLUG = "github_actions_hooks_fields"
PAGE_DESCRIPTION = "After saving the public post, hook the GitHub Repository Dispatch Event API."

SECTION_ID = "github_settings_section"
SECTION_TITLE = "Settings"

WEBHOOK_ADDRESS = "webhook_address"
WEBHOOK_TOKEN = "webhook_token"


class FieldType(str, Enum):
    """Input types supported on the settings page."""

    TEXT = "text"
    PASSWORD = "password"


class SettingsField(BaseModel):
    """One option shown on the settings page."""

    model_config = ConfigDict(frozen=True)

    uid: str
    label: str
    section: str
    type: FieldType
    default: str = ""
    description: str = ""

    @property
    def is_secret(self) -> bool:
        """Whether the value is masked on display."""
        return self.type == FieldType.PASSWORD


FIELDS: tuple[SettingsField, ...] = (
    SettingsField(
        uid=WEBHOOK_ADDRESS,
        label="API Endpoint",
        section=SECTION_ID,
        type=FieldType.TEXT,
        default="https://api.github.com/repos/<:owner>/<:repo>/dispatches",
        description=(
            "Repository dispatch event API: "
            "https://api.github.com/repos/<:owner>/<:repository>/dispatches"
        ),
    ),
    SettingsField(
        uid=WEBHOOK_TOKEN,
        label="Personal Access Token",
        section=SECTION_ID,
        type=FieldType.PASSWORD,
        default="",
        description="New personal access token: https://github.com/settings/tokens/new",
    ),
)


def get_field(uid: str) -> SettingsField:
    """Look up a settings field by option name.

    Raises:
        ConfigurationException: If no field has that name
    """
    for settings_field in FIELDS:
        if settings_field.uid == uid:
            return settings_field
    raise ConfigurationException(f"Unknown settings field: {uid}", details={"uid": uid})


def setup(store: SettingsStore) -> None:
    """Register every settings field with the store."""
    for settings_field in FIELDS:
        store.register(settings_field.uid, settings_field.default)


def field_value(store: SettingsStore, settings_field: SettingsField) -> str:
    """Value shown in a field: the stored option, or the field default when unset."""
    return store.get(settings_field.uid) or settings_field.default


def override_notices(settings: Settings) -> list[str]:
    """Notices for each override constant defined in the environment."""
    notices = []
    if settings.has_api_override:
        notices.append("Now GITHUB_ACTIONS_HOOKS_API is set in the environment.")
    if settings.has_token_override:
        notices.append("Now GITHUB_ACTIONS_HOOKS_TOKEN is set in the environment.")
    return notices
