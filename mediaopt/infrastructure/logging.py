import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

def setup_logging(log_file: Optional[Path], debug: bool = False) -> logging.Logger:
    """Configures file-only logging for the mediaopt package.

    Console output is owned by the progress display, so nothing is logged to
    stderr. With `log_file=None` records are dropped.
    """
    logger = logging.getLogger("mediaopt")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
