"""OrgHub structured logging."""

import inspect
import logging

import structlog
from structlog.stdlib import BoundLogger

PACKAGE_LOGGER = "orghub"


def configure_logging(debug: bool = False) -> BoundLogger:
    """
    Configure structlog on top of the standard logging module.

    Args:
        debug: Emit debug events (request tracing) when True

    Returns:
        Package bound logger
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s")
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if debug else logging.INFO)

    return structlog.stdlib.get_logger(PACKAGE_LOGGER)


def _stdlib_logger(name: str, **context) -> BoundLogger:
    """
    Wrap the stdlib logger `name` in a lazy structlog proxy.

    Output always goes through stdlib logging, so an application that never
    configures logging only sees WARNING and above.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **context,
    )


def get_module_logger() -> BoundLogger:
    """
    Get a logger for the calling module with full path context.

    The logger is resolved on first use, so modules may call this at import
    time before configure_logging() runs.
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return _stdlib_logger(PACKAGE_LOGGER)

    module = inspect.getmodule(current_frame.f_back)
    if module:
        module_name = module.__name__
        return _stdlib_logger(
            module_name,
            component=module_name.split(".")[-1],
            module_path=module_name,
        )

    return _stdlib_logger(PACKAGE_LOGGER, component="unknown")
