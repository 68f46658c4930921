"""Key/value stores for plugin options."""

import json
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from github_actions_hooks.core.exceptions import SettingsStoreException
from github_actions_hooks.core.logging import get_logger

logger = get_logger(__name__)


class SettingsStore(ABC):
    """Persistent option storage provided by the host."""

    def __init__(self) -> None:
        """Initialize store."""
        self._registered: dict[str, str] = {}

    @abstractmethod
    def _read(self, key: str) -> Any:
        """Return the raw stored value, or None when absent."""
        pass

    @abstractmethod
    def _write(self, key: str, value: str) -> None:
        """Persist a value."""
        pass

    def get(self, key: str) -> str:
        """Get an option value.

        Args:
            key: Option name

        Returns:
            Stored string, or an empty string when unset
        """
        value = self._read(key)
        if not isinstance(value, str):
            return ""
        return value

    def set(self, key: str, value: str) -> None:
        """Store an option value.

        Args:
            key: Option name
            value: Option value
        """
        self._write(key, value)
        logger.info("option_updated", key=key)

    def register(self, key: str, default: str = "") -> None:
        """Declare an option as known to the settings page.

        Registration never writes a value: an unset option keeps reading
        as empty.

        Args:
            key: Option name
            default: Value displayed while the option is unset
        """
        self._registered[key] = default

    def is_registered(self, key: str) -> bool:
        """Check if an option has been registered."""
        return key in self._registered

    @property
    def registered_keys(self) -> list[str]:
        """Names of registered options."""
        return list(self._registered)


class InMemorySettingsStore(SettingsStore):
    """Settings store backed by a dictionary."""

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        super().__init__()
        self._values: dict[str, Any] = dict(values or {})

    def _read(self, key: str) -> Any:
        return self._values.get(key)

    def _write(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileSettingsStore(SettingsStore):
    """Settings store backed by a JSON object on disk."""

    def __init__(self, path: str | Path) -> None:
        """Initialize store.

        Args:
            path: JSON file holding the options (created on first write)
        """
        super().__init__()
        self.path = Path(path)

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SettingsStoreException(
                f"Failed to read options file: {self.path}",
                details={"path": str(self.path), "error": str(e)},
            ) from e

        if not isinstance(data, dict):
            raise SettingsStoreException(
                f"Options file must contain a JSON object: {self.path}",
                details={"path": str(self.path)},
            )
        return data

    def _read(self, key: str) -> Any:
        return self._load().get(key)

    def _write(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value

        # Temp file beside the target, swapped in once fully written
        tmp_path: Optional[Path] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = Path(f.name)
                json.dump(data, f, ensure_ascii=False, indent=2)
            tmp_path.replace(self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise SettingsStoreException(
                f"Failed to write options file: {self.path}",
                details={"path": str(self.path), "error": str(e)},
            ) from e
