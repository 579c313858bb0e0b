"""
Logging utility for Fit Route.

Provides a console logger plus a best-effort file logger, which is the
only practical way to read app output on Android where stdout/stderr are
not easily accessible.
"""

import logging
import os
import sys
from datetime import datetime

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
APP_DIR_NAME = "FitRoute"
LOG_DIR = None  # Set at runtime; defaults chosen per-platform below
LOG_LEVEL = logging.DEBUG
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_PREFIX = "fitroute_"

_initialised = False  # guard to ensure setup_logging() runs only once


def _default_log_dir():
    """Return a sensible default log directory for the current platform.

    Android storage fallback chain:
      1. primary_external_storage_path - user-visible (e.g. /sdcard/),
         needs WRITE_EXTERNAL_STORAGE at runtime.
      2. app_storage_path - always writable, hidden from the user.
      3. Desktop fallback - ../logs relative to this file.
    """
    try:
        from android.storage import primary_external_storage_path  # type: ignore
        return os.path.join(primary_external_storage_path(),
                            APP_DIR_NAME, "logs")
    except ImportError:
        pass
    try:
        from android.storage import app_storage_path  # type: ignore
        return os.path.join(app_storage_path(), "logs")
    except ImportError:
        pass
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "logs")


def log_file_name(now=None):
    """Return the timestamped log file name, e.g. ``fitroute_20240101_120000.log``."""
    now = now or datetime.now()
    return f"{LOG_FILE_PREFIX}{now.strftime('%Y%m%d_%H%M%S')}.log"


def setup_logging(log_dir=None, level=None):
    """
    Initialise file + console logging.  Safe to call multiple times;
    only the first call configures handlers.

    Returns the path of the log file, or None when only console logging
    could be set up.
    """
    global _initialised, LOG_DIR
    if _initialised:
        return None
    _initialised = True

    root = logging.getLogger()
    root.setLevel(level or LOG_LEVEL)

    # Console first so there is output even if the file handler fails
    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(logging.INFO)  # DEBUG goes to file only
    ch.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(ch)

    LOG_DIR = log_dir or _default_log_dir()
    try:
        os.makedirs(LOG_DIR, exist_ok=True)
        log_file = os.path.join(LOG_DIR, log_file_name())
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        root.addHandler(fh)
        logging.info("Logging initialised -> %s", log_file)
        return log_file
    except OSError:
        logging.warning("File logging unavailable - console only")
        return None


def get_logger(name: str) -> logging.Logger:
    """Return a named logger.  Call setup_logging() first."""
    return logging.getLogger(name)
