import logging
import os

logger = logging.getLogger(__name__)

# literal split, no trimming or collapsing
SEPARATOR = " "

LOG_LEVEL = os.environ.get('WORDBAG_LOG_LEVEL', 'WARNING').upper()
LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'

STOPWORDS_LANGUAGE = os.environ.get('WORDBAG_STOPWORDS_LANGUAGE', 'english')


def env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("ignoring %s=%r, not an integer; using %d", name, value, default)
        return default


# 1 means documents are extracted in the calling process
CORPUS_PROCESSES = env_int('WORDBAG_PROCESSES', 1)
