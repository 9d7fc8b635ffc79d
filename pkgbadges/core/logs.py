import logging
import structlog

from pkgbadges.core.settings import LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configura structlog una sola vez al arrancar la API (o un script)."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
        cache_logger_on_first_use=True,
    )
