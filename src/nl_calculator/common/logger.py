"""Project-wide loguru logger."""
import sys

from loguru import logger

LOG_FORMAT: str = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logger(level: str = "WARNING") -> None:
    """
    Replace loguru's default sink with a stderr sink at the given level.

    :param str level: Minimum level to emit

    :return: None
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)


__all__ = ["logger", "configure_logger"]
