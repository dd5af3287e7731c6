# utils/logger.py

import logging

def get_logger(name="slcsp", level=logging.INFO):
    """
    Returns a configured logger.

    Messages go to stderr so stdout stays free for the CSV output.

    Parameters:
        name (str): Name of the logger.
        level (int): Logging level (default: logging.INFO).

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:  # Avoid adding multiple handlers if called multiple times
        logger.setLevel(level)
        ch = logging.StreamHandler()
        ch.setLevel(logging.NOTSET)
        formatter = logging.Formatter("%(levelname)s: %(message)s")
        ch.setFormatter(formatter)
        logger.addHandler(ch)

    return logger


def set_level(names, level):
    """Apply a level (name or number) to each of the given loggers."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    for name in names:
        get_logger(name).setLevel(level)
