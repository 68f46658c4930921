"""Custom exceptions for GitHub Actions Hooks."""


class GitHubActionsHooksException(Exception):
    """Base exception for all GitHub Actions Hooks errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        """Initialize exception with message and optional details.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationException(GitHubActionsHooksException):
    """Configuration error."""

    pass


class SettingsStoreException(GitHubActionsHooksException):
    """Settings store could not be read or written."""

    pass


class DispatchException(GitHubActionsHooksException):
    """Repository dispatch request failed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict | None = None,
    ) -> None:
        """Initialize dispatch exception.

        Args:
            message: Error message
            status_code: HTTP status code returned by the endpoint, if any
            details: Additional error details
        """
        super().__init__(message, details)
        self.status_code = status_code


class HookException(GitHubActionsHooksException):
    """Hook registration or execution error."""

    pass
