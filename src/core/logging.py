import sys
from loguru import logger
from .config import settings


def setup_logging():
    """
    Configure the loguru sink for the service.

    Local development gets the human-readable format; any other APP_ENV
    gets one JSON object per line so the host's log collector can index
    the structured fields passed as keyword arguments.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        serialize=settings.app_env != "dev",
        backtrace=False,
        diagnose=False,
    )
    logger.debug("Logging configured", app=settings.app_name, env=settings.app_env)
    return logger
