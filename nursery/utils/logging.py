# nursery/utils/logging.py
import logging
import sys

import structlog

from nursery.utils.settings import LOG_LEVEL


def configure_logging(level: str | None = None) -> None:
    """
    Jeden punkt konfiguracji logow: structlog renderuje, stdlib logging wypisuje.
    Wolane raz z create_app (i z workera celery).
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=(level or LOG_LEVEL).upper(),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    #wycisz gadatliwe biblioteki
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("celery").setLevel(logging.WARNING)


def get_logger(name: str):
    return structlog.get_logger(name)
