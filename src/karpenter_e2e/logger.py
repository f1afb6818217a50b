import logging

from rich.logging import RichHandler

LOGGER_NAME = "karpenter_e2e"


def setup_logger(name: str = LOGGER_NAME, level: int | str = logging.INFO) -> logging.Logger:
    """
    Returns the harness logger with a single RichHandler attached.

    Safe to call repeatedly: later calls only adjust the level, which is how
    E2E_LOG_LEVEL takes effect once settings are loaded.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(rich_tracebacks=True, markup=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger


# Global logger instance (INFO until settings apply E2E_LOG_LEVEL)
logger = setup_logger()
