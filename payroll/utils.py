import logging
from typing import Optional

from .config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(package: str, level: Optional[str] = None) -> logging.Logger:
    """Attach one stream handler to the package logger.

    Module loggers (``payroll.services`` and friends) propagate to it. The
    level defaults to ``settings.log_level``; calling this again replaces the
    handler instead of stacking a second one.
    """
    level_no = logging.getLevelName((level or settings.log_level).upper())
    if not isinstance(level_no, int):
        level_no = logging.INFO

    logger = logging.getLogger(package)
    logger.setLevel(level_no)

    for handler in [h for h in logger.handlers if getattr(h, "_payroll", False)]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._payroll = True
    logger.addHandler(handler)

    return logger
