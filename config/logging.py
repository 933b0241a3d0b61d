"""
Logging Configuration
Console output plus daily and size based rotating log files.
"""
import logging
import logging.handlers
import sys
from pathlib import Path

# Third-party loggers that are noisy below WARNING (multipart logs every part
# callback at DEBUG)
QUIET_LOGGERS = ("multipart", "python_multipart", "watchfiles")


def setup_logging(
    log_dir: str = "./logs",
    log_level: str = "INFO",
    app_name: str = "video-assets",
    quiet_loggers: tuple = QUIET_LOGGERS,
):
    """
    Initialize root logging

    Args:
        log_dir: Directory where log files are written
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        app_name: Prefix for log file names
        quiet_loggers: Logger names capped at WARNING regardless of log_level

    Returns:
        logging.Logger: The configured root logger
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    level = getattr(logging, log_level.upper(), logging.INFO)

    log_format = logging.Formatter(
        fmt="%(asctime)s - %(process)d - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Drop handlers from a previous call
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(log_format)
    root_logger.addHandler(console_handler)

    # New file every midnight, 30 days kept
    daily_handler = logging.handlers.TimedRotatingFileHandler(
        filename=log_path / f"{app_name}.log",
        when="midnight",
        interval=1,
        backupCount=30,
        encoding="utf-8",
    )
    daily_handler.setLevel(level)
    daily_handler.setFormatter(log_format)
    daily_handler.suffix = "%Y-%m-%d"
    root_logger.addHandler(daily_handler)

    size_handler = logging.handlers.RotatingFileHandler(
        filename=log_path / f"{app_name}_rotate.log",
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    size_handler.setLevel(level)
    size_handler.setFormatter(log_format)
    root_logger.addHandler(size_handler)

    error_handler = logging.handlers.RotatingFileHandler(
        filename=log_path / f"{app_name}_error.log",
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=10,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(log_format)
    root_logger.addHandler(error_handler)

    # Access lines stay out of the error file; uvicorn errors go everywhere
    uvicorn_handlers = {
        "uvicorn.access": [console_handler, daily_handler],
        "uvicorn.error": [console_handler, daily_handler, error_handler],
    }
    for name, handlers in uvicorn_handlers.items():
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = handlers
        uvicorn_logger.propagate = False

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.info(f"Logging configured: {log_path} (level: {log_level})")

    return root_logger
