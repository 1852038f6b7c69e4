"""
Log output setup for the layerpath CLI and embedding applications.

Library code never configures logging: the slicing modules call
``logging.getLogger(__name__)`` and emit %-style messages (run summaries at
INFO, one line per layer at DEBUG). ``configure_logging`` installs a
structlog ``ProcessorFormatter`` on the root handlers so those records, and
any events sent through ``get_logger``, come out either as key/value console
lines or as one JSON object per line::

    configure_logging(level="DEBUG", json_output=True, log_file="run.log")
    get_logger(__name__).info("cli_slice_complete", layers=11)
"""

import logging
import sys
from typing import Optional

import structlog


def _pre_chain() -> list[structlog.types.Processor]:
    # Applied to structlog events and plain logging records alike
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(json_output: bool) -> structlog.types.Processor:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """
    Route layerpath log records to stderr (and optionally a file).

    Safe to call more than once; each call replaces the root handlers.

    Args:
        level: Level name, case-insensitive. Unknown names mean INFO.
        json_output: One JSON object per line instead of console lines.
        log_file: Extra destination receiving the same lines as stderr.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=handlers,
        force=True,
    )

    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_output),
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """structlog logger for keyword-style events, e.g. ``get_logger(__name__)``."""
    return structlog.get_logger(name)
