import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Union

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
ROOT_LOGGER = 'cdekcalc'


def setup_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)

    # stderr keeps stdout free for the driver's JSON output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(console_handler)

    return logger


def setup_file_logging(log_dir: Union[str, Path]) -> logging.Logger:
    """Attach a rotating file handler to the shared 'cdekcalc' logger.

    Every module logger (cdekcalc.oauth, cdekcalc.calculator, cdekcalc.api,
    cdekcalc.driver) propagates into it, so one call covers the library,
    the app and the driver. Repeated calls with the same directory are no-ops.
    """
    log_dir = Path(log_dir)
    log_path = os.path.abspath(log_dir / f'{ROOT_LOGGER}.log')

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.INFO)
    for handler in logger.handlers:
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename == log_path:
            return logger

    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=10485760,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(file_handler)

    return logger
