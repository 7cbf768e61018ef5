import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(log_dir: str | None = None, level: str | None = None):
    """
    Attach a daily rotating file handler and a console handler to the
    "pos" logger. Modules log to its children (pos.cart, pos.checkout,
    pos.shipping). Calling it again only updates the level.
    """
    log_path = Path(log_dir or settings.log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("pos")
    logger.setLevel(level or settings.log_level)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = TimedRotatingFileHandler(
        filename=log_path / "checkout.log",
        when="midnight",
        backupCount=settings.log_backups,
        encoding="utf-8",
    )
    # stderr, so log lines never mix with the receipt on stdout
    console_handler = logging.StreamHandler()

    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging to {log_path / 'checkout.log'}")
    return logger
