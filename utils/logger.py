import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOGGER_NAME = "checkout"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(log_dir: str | Path = "data/logs", level: int = logging.INFO):
    """
    Attach file + console output to the "checkout" logger and return it.

    Module loggers ("checkout.pricing", "checkout.service", ...) propagate
    here, so one call at startup covers the whole app. Calling it again
    only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    # one file per day, last week kept
    handlers = [
        TimedRotatingFileHandler(
            filename=log_dir / f"{LOGGER_NAME}.log",
            when="midnight",
            backupCount=7,
            encoding="utf-8",
        ),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging to {log_dir} at level {logging.getLevelName(level)}")
    return logger
