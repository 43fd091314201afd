"""
logging_config.py

Shared package logger - import 'logger' directly from this module and call
configure_logging() once from an entry point (CLI or app factory).
"""
import logging
import os
from datetime import datetime
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("poker_stats")


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler()]
    if log_dir:
        # Timestamped log file per run
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_filename = os.path.join(log_dir, f"poker_stats_{timestamp}.log")
        handlers.append(logging.FileHandler(log_filename, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
