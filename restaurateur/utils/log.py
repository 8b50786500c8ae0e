import logging
import os
import sys
from datetime import datetime

from restaurateur.core.config import LOG_LEVEL, LOG_DIR

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def configure_logging(name: str, console: bool = True) -> str:
    """Configure root logging once at startup; returns the log file path.

    Args:
        name: Prefix of the timestamped log file.
        console: Also log to stdout. The interactive CLI turns this off so
            log lines do not interleave with prompts.
    """
    os.makedirs(LOG_DIR, exist_ok=True)
    log_filename = os.path.join(LOG_DIR, f"{name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
    handlers = [logging.FileHandler(log_filename)]
    if console:
        handlers.append(logging.StreamHandler(sys.stdout))
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, handlers=handlers)
    return log_filename
