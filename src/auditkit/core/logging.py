import logging
import sys

import structlog

from auditkit.core.config import settings

_configured = False


def configure_logging() -> None:
    """
    Configures stdlib logging and structlog from the library settings.

    Runs once per process; later calls are no-ops.
    """
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(message)s",
        stream=sys.stdout,
    )

    renderer = structlog.processors.JSONRenderer() if settings.LOG_JSON else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Returns a structlog logger, configuring logging on first use.

    Args:
        name: Hierarchical logger name (e.g., 'props.jdbc', 'service.props_factory')
    """
    configure_logging()
    return structlog.get_logger(name)


class LoggerRegistry:
    """Factory methods for loggers with consistent hierarchical names."""

    @staticmethod
    def get_props_logger(processor_name: str) -> structlog.stdlib.BoundLogger:
        """Get a logger for a processor's properties."""
        return get_logger(f"props.{processor_name}")
