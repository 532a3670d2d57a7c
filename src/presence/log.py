"""
Logging setup — opt-in structured output for the presence logger.

Library modules log through the standard `logging` module under the
"presence" logger tree, which carries a NullHandler and stays silent until
an application configures it. The only records emitted are DEBUG events
right before the container raises one of its own errors.

Applications that want those records rendered call configure_structlog()
(or configure_from_settings()): structlog is configured for the
application, and the "presence" logger gets a handler whose
ProcessorFormatter renders stdlib records with the same processors.
"""

from __future__ import annotations

import logging

import structlog

from presence.settings import PresenceSettings

PACKAGE_LOGGER = "presence"
_HANDLER_NAME = "presence.structlog"


def configure_structlog(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure structlog and route the "presence" logger through it.

    In production: JSON lines (machine-readable).
    In development: colored, human-readable console output.

    Calling it again replaces the previous handler instead of stacking a
    second one.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def configure_from_settings(settings: PresenceSettings | None = None) -> PresenceSettings:
    """Load PresenceSettings from the environment (unless given) and apply them."""
    settings = settings or PresenceSettings()
    configure_structlog(settings.log_level, settings.json_logs)
    return settings
