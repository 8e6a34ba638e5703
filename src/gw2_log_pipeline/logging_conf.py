import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FILENAME = "pipeline.log"


def setup_logging(log_dir: str | Path | None = None, filename: str = LOG_FILENAME) -> Path | None:
    """
    Configure the root logger: console always, plus a rotating file under ``log_dir``.

    The file handler is skipped when ``log_dir`` is None or cannot be written;
    returns the log file path, or None when logging to the console only.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.INFO)

    # Clean handlers if re-run in notebooks/REPL
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(fmt)
    logger.addHandler(console_handler)

    if log_dir is None:
        return None

    log_path = Path(log_dir) / filename
    try:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    except OSError as exc:
        logger.warning("Logging to console only, cannot write %s: %s", log_path, exc)
        return None

    file_handler.setFormatter(fmt)
    logger.addHandler(file_handler)
    return log_path
