"""
Centralized logging configuration for the possum state tracker.

All components log through structlog so that store operations carry the
same structured keys (``possum``, ``operation``, ``state``) regardless of
whether output is rendered for a console or as JSON lines.
"""
import logging
import sys
from typing import Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def get_store_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the state store subsystem."""
    return get_logger(name).bind(subsystem="state_store")


def get_environment_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the service-binding environment subsystem."""
    return get_logger(name).bind(subsystem="environment")


def log_state_write(
    logger: FilteringBoundLogger,
    possum: str,
    to_state: str,
    rows_affected: int,
) -> None:
    """
    Log a state write with standardized format.

    Args:
        logger: Structlog logger instance
        possum: Name of the possum being written
        to_state: State value that was persisted
        rows_affected: Row count reported by the driver
    """
    logger.bind(
        possum=possum,
        to_state=to_state,
        rows_affected=rows_affected,
        operation="write_state",
    ).info("State written")
