from pathlib import Path
import logging
import sys
from logging.handlers import RotatingFileHandler

from config import LOG_DIR as LOG_DIR_OVERRIDE, LOG_LEVEL

ROOT = Path(__file__).resolve().parent.parent

LOG_DIR = Path(LOG_DIR_OVERRIDE) if LOG_DIR_OVERRIDE else ROOT / "logging"
LOG_FILE = LOG_DIR / "app.log"

FMT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

# uvicorn installs its own handlers; these get ours instead
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _build_handlers(log_file: Path) -> list:
    formatter = logging.Formatter(FMT)

    rotating = RotatingFileHandler(
        log_file, maxBytes=50 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    rotating.setFormatter(formatter)

    stdout = logging.StreamHandler(sys.stdout)
    stdout.setFormatter(formatter)
    return [rotating, stdout]


def setup_logging(log_file: Path = LOG_FILE, level: str = LOG_LEVEL) -> None:
    """Send root and uvicorn logs to stdout and a rotating file.

    Safe to call again: existing root handlers are replaced, not stacked.
    """
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handlers = _build_handlers(log_file)
    logging.basicConfig(level=level, handlers=handlers)

    for name in UVICORN_LOGGERS:
        uv_logger = logging.getLogger(name)
        uv_logger.setLevel(level)
        uv_logger.handlers = list(handlers)
        uv_logger.propagate = False

    logging.getLogger("log_setup").info("Logging to: %s", log_file)
