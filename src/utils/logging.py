"""Logging helper shared by the tiling modules.

Wraps the standard logging module so that every module logs with the
same format.  Loggers are configured once; later calls with the same
name return the existing logger untouched.
"""

import logging
from typing import Union

LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Return a logger with a stream handler and the preset format.

    Parameters
    ----------
    name : str
        Logger name, usually `__name__` of the calling module.
    level : int or str, optional
        Level applied when the logger is first configured.  Level names
        such as ``"debug"`` are accepted.

    Returns
    -------
    logging.Logger
        The configured logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        if isinstance(level, str):
            level = getattr(logging, level.upper(), logging.INFO)
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger
