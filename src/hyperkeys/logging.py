"""Structured logging for hyperkeys.

Events are built by structlog and handed to the stdlib ``hyperkeys`` logger
tree. Until ``configure_logging`` runs that tree only has a ``NullHandler``,
so library callers see nothing unless they configure logging themselves.
"""
from __future__ import annotations

import logging
import sys

import structlog

_ROOT_LOGGER = "hyperkeys"
_DEFAULT_LEVEL = "WARNING"

logging.getLogger(_ROOT_LOGGER).addHandler(logging.NullHandler())

_PRE_CHAIN = [
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", key="ts"),
]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger ``name``.

    Every event carries ``component`` set to ``name``.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *_PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        component=name,
    )


def configure_logging(level: str | None = None) -> logging.Handler:
    """Emit ``hyperkeys`` events as JSON lines on stderr.

    Lines carry ``ts``, ``level``, ``msg`` and ``component`` plus any event
    fields. Calling it again replaces the handler installed by the previous call.
    """
    root = logging.getLogger(_ROOT_LOGGER)
    for handler in list(root.handlers):
        if getattr(handler, "_hyperkeys", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.EventRenamer("msg"),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
        )
    )
    handler._hyperkeys = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(getattr(logging, (level or _DEFAULT_LEVEL).upper(), logging.WARNING))
    root.propagate = False
    return handler


__all__ = ["configure_logging", "get_logger"]
