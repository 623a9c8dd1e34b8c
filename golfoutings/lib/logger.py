import logging
import logging.handlers
import os
from datetime import datetime
from functools import wraps
from pathlib import Path

from flask import request

from golfoutings.constants import get_data_directory


def get_log_directory() -> Path:
    """Get the log directory path, inside the application's data directory

    Returns:
        Path: The path to the log directory
    """
    return Path(get_data_directory()) / "logs"


def clean_old_logs(log_dir: Path, max_files: int = 5):
    """Prune golfoutings run logs down to the newest `max_files`

    Every server start writes its own log file, so a long-lived install would
    otherwise collect one file per restart. A missing directory is left alone.

    Args:
        log_dir (Path): The directory holding the run logs.
        max_files (int, optional): How many run logs to keep. Defaults to 5.
    """
    if not log_dir.exists():
        return

    log_files = sorted(log_dir.glob("*.log"), key=os.path.getmtime)
    while len(log_files) > max_files:
        log_files.pop(0).unlink()


class PaddedLevelFormatter(logging.Formatter):
    """File formatter that pads level names so signup and mail lines align."""

    def format(self, record):
        record.levelname = record.levelname.ljust(8)
        return super().format(record)


def configure_logger(
    log_level: int = logging.INFO, log_dir: Path | None = None, max_log_files: int = 5
):
    """Send the server's logs to a per-run file and the console

    The file, named after the server start time, keeps full timestamps so
    failed confirmation or reminder mail can be matched to a signup later.
    The console gets a short format. Loggers created by Flask, gevent or
    Flask-Mail before this call are reset to the root handlers.

    Args:
        log_level (int): The log level to log at. Defaults to logging.INFO.
        log_dir (Path | None): Where to store the logs. Defaults to the data directory.
        max_log_files (int): How many earlier run logs to keep. Defaults to 5.

    Returns:
        Path: The file this run logs to.
    """
    if log_dir is None:
        log_dir = get_log_directory()

    clean_old_logs(log_dir=log_dir, max_files=max_log_files)

    log_filename = log_dir / datetime.now().strftime("%Y-%m-%d_%H-%M-%S.log")
    log_dir.mkdir(exist_ok=True, parents=True)

    file_handler = logging.handlers.RotatingFileHandler(
        log_filename, maxBytes=10 * 1024**2, backupCount=5
    )
    stream_handler = logging.StreamHandler()

    file_handler.setFormatter(
        PaddedLevelFormatter(
            "[%(asctime)s] %(levelname)s %(message)s", datefmt="%d.%m.%Y %H:%M:%S"
        )
    )
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))

    logging.basicConfig(level=log_level, handlers=[file_handler, stream_handler], force=True)

    for name in logging.root.manager.loggerDict:
        logger = logging.getLogger(name)
        if isinstance(logger, logging.Logger):
            logger.handlers.clear()
            logger.setLevel(log_level)

    return log_filename


def log_endpoint_access(view):
    """Route decorator: log each request to the endpoint at debug level."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        logging.debug(f"{request.method} {request.path} -> {view.__name__}")
        return view(*args, **kwargs)

    return wrapper
