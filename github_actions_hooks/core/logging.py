"""Structured logging configuration using structlog.

Dispatch credentials travel through log calls as plain keyword arguments
(``token``, ``headers``); ``mask_secrets`` scrubs them before rendering.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.typing import EventDict, Processor

from github_actions_hooks.core.config import Settings, get_settings

MASK = "********"

# Keys whose values are never rendered, compared case-insensitively
SECRET_KEYS = frozenset({"token", "authorization", "webhook_token", "hooks_token", "password"})


def _is_secret_key(key: Any) -> bool:
    if not isinstance(key, str):
        return False
    key = key.lower()
    return key in SECRET_KEYS or key.endswith("_token")


def _mask_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: MASK if _is_secret_key(k) else _mask_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return type(value)(_mask_value(v) for v in value)
    return value


def mask_secrets(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace token and authorization values, including inside nested dicts."""
    for key, value in list(event_dict.items()):
        if _is_secret_key(key):
            event_dict[key] = MASK
        else:
            event_dict[key] = _mask_value(value)
    return event_dict


def app_context_processor(settings: Settings) -> Processor:
    """Build a processor adding application name and environment to log entries."""

    def add_app_context(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict["app"] = settings.app_name
        event_dict["env"] = settings.app_env
        return event_dict

    return add_app_context


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure structured logging for the application.

    Logs go to stderr so command output on stdout stays clean.

    Args:
        settings: Settings to configure from (default from environment)
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        app_context_processor(settings),
        mask_secrets,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.debug:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,  # type: ignore
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


setup_logging()
