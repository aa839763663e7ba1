"""structlog setup for applications that want slackfield's debug output.

slackfield's modules log through stdlib ``logging.getLogger(__name__)``;
this module routes those records through structlog so they render either
as console lines or as JSON objects on stderr.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "slackfield"


def _formatter(log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install a single stderr handler on the root logger.

    Calling again replaces the handler. Field rejections are logged at
    DEBUG, so they only show up with *verbose*.

    Args:
        verbose: DEBUG for the ``slackfield`` logger; otherwise WARNING.
        log_json: Render JSON lines instead of console output.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(log_json))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
