import os
from typing import Optional

from loguru import logger


DEFAULT_LOG_FILE = 'logs.log'


def get_log_file() -> Optional[str]:
    """Path of the log file sink, ``None`` when file logging is disabled.

    Set ``DROPGATE_LOG_FILE`` to move the sink, or to an empty value to keep
    logging on stderr only.
    """
    return os.getenv('DROPGATE_LOG_FILE', DEFAULT_LOG_FILE) or None


log_file = get_log_file()
if log_file is not None:
    logger.add(
        log_file,
        format='{time:YYYY-MM-DD at HH:mm:ss} | {name} | {message}',
        level='DEBUG',
        rotation='monthly',
    )

log = logger.bind()
