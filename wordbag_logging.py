import logging
import sys
from typing import *

from wordbag_config import LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL

LOGGER_NAMES = ('Wordbag', 'Hooks', 'Corpus', 'wordbag_config')


def setup_logging(level: Optional[str] = None) -> List[logging.Logger]:
    level = (level or LOG_LEVEL).upper()
    configured: List[logging.Logger] = []
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # called more than once from tests and drivers
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
            logger.addHandler(handler)
        # records already have a handler here, the root one would print them twice
        logger.propagate = False
        configured.append(logger)
    return configured
