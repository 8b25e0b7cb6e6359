import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ipma_dashboard.paths import LOGS, ensure_dirs

LOGGER_NAME = "ipmadashboard"


def setup_logging(log_dir: str | None = None) -> logging.Logger:
    """Configure logging with rotation and formatting."""
    # Määritä lokihakemisto ja varmista että se on olemassa
    if log_dir is None:
        log_dir = str(LOGS)
        ensure_dirs()

    Path(log_dir).mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    if logger.handlers:
        return logger

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)

    file_handler = RotatingFileHandler(
        Path(log_dir) / f"{LOGGER_NAME}.log",
        maxBytes=5_000_000,  # 5 MB
        backupCount=3,
    )

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console.setFormatter(formatter)
    file_handler.setFormatter(formatter)

    logger.addHandler(console)
    logger.addHandler(file_handler)

    return logger
