"""
Logging Configuration
Attaches console (and optional file) output to the package logger namespace.

Every module logs through `logging.getLogger(__name__)`, so all records end up
under the `meshgraph` logger configured here. The animator emits one DEBUG
record per frame; those stay muted unless `log_frames` is requested, so a
DEBUG run of the model does not drown in hundreds of frame lines.
"""
import logging
import sys
from typing import Optional

import meshgraph

PACKAGE_LOGGER = meshgraph.__name__
FRAME_LOGGER = f"{PACKAGE_LOGGER}.view.animator"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_frames: bool = False,
) -> logging.Logger:
    """
    Route the package's log records to stdout and, optionally, a file.

    Calling it again replaces the handlers of the previous call.

    Args:
        level: Threshold for the package logger (e.g. logging.DEBUG).
        log_file: Optional path; the file is truncated on every call.
        log_frames: Emit the animator's per-frame DEBUG records.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Frame records are DEBUG; keep them below the threshold unless asked for
    logging.getLogger(FRAME_LOGGER).setLevel(logging.DEBUG if log_frames else max(level, logging.INFO))

    logger.info(f"Logging initialized (level={logging.getLevelName(level)}, file={log_file}, frames={log_frames}).")
    return logger
