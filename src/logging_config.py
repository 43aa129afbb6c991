import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "worlds_fantasy.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"


def _file_handler(log_dir: Path) -> logging.Handler:
    """Full DEBUG trail, rotated at 5MB with 3 backups."""
    handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE_NAME, maxBytes=5 * 1024 * 1024, backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    return handler


def _console_handler(level: int) -> logging.Handler:
    # stderr, so tables printed on stdout stay clean
    handler = logging.StreamHandler()
    handler.setLevel(level)
    return handler


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    """Configure logging for the Worlds fantasy league tools.

    Everything goes to ``<log_dir>/worlds_fantasy.log``; only *log_level*
    and above reach the console. Does nothing if the root logger already
    has handlers.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    log_dir = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    console_level = getattr(logging, log_level.upper(), logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in (_file_handler(log_dir), _console_handler(console_level)):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)

    logging.getLogger(__name__).info(
        "Logging initialized (console=%s, file=%s)", log_level, log_dir / LOG_FILE_NAME
    )
