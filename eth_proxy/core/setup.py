import os
import logging
import logging.config
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from dotenv import load_dotenv

load_dotenv(override=True)

TRACE = 5
DEFAULT_LOG_CONFIG_FILE = "logging.ini"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Add custom TRACE level
logging.addLevelName(TRACE, "TRACE")


def _trace(self, msg, *args, **kwargs):
    if self.isEnabledFor(TRACE):
        self._log(TRACE, msg, args, **kwargs)


logging.Logger.trace = _trace
logger = logging.getLogger("eth_proxy")

# LOG_LEVEL names -> verbosity accepted by setup_logging()
VERBOSITY_BY_LEVEL_NAME = {
    "CRITICAL": 0,
    "ERROR": 0,
    "WARNING": 0,
    "INFO": 1,
    "DEBUG": 2,
    "TRACE": 3,
}


def verbosity_from_level_name(level_name: str) -> int:
    """Translate a LOG_LEVEL value such as "DEBUG" into a verbosity."""
    return VERBOSITY_BY_LEVEL_NAME.get(level_name.strip().upper(), 1)


def _setup_file_handler(log_file: str, level: int) -> logging.Handler:
    """
    Setup log file handler with rotation.

    Rotation policy: every day at midnight, keep 10 backups
    File suffix format: %Y-%m-%d
    """
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = TimedRotatingFileHandler(
        path,
        when='midnight',
        interval=1,
        backupCount=10,
        encoding="utf-8",
    )
    handler.suffix = "%Y-%m-%d"

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def _silence_noisy_loggers():
    """Silence noisy third-party library loggers"""
    noisy_loggers = [
        "asyncio",
        "aiohttp",
        "aiohttp.access",
        "aiohttp.client",
    ]

    for name in noisy_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_logging(verbosity: int):
    """
    Setup logging system.

    When a logging config file is present (LOG_CONFIG_FILE, default
    ``logging.ini``) it takes over completely; otherwise console logging is
    configured from the verbosity, plus a rotating file when LOG_FILE is set.

    Args:
        verbosity: Log level (0=SILENT, 1=INFO, 2=DEBUG, 3=TRACE)
    """
    config_file = os.getenv("LOG_CONFIG_FILE", DEFAULT_LOG_CONFIG_FILE)
    if config_file and Path(config_file).is_file():
        logging.config.fileConfig(config_file, disable_existing_loggers=False)
        logger.debug(f"Logging configured from {config_file}")
        return

    level_map = {
        0: logging.CRITICAL + 1,  # Silent
        1: logging.INFO,
        2: logging.DEBUG,
        3: TRACE,
    }
    level = level_map.get(verbosity, logging.INFO)

    # Configure root logger (console output)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        force=True
    )

    log_file = os.getenv("LOG_FILE", "")
    if log_file:
        try:
            logging.getLogger().addHandler(_setup_file_handler(log_file, level))
            logger.info(f"Log file: {log_file}")
        except OSError as e:
            logger.warning(f"Failed to create log file: {e}")

    _silence_noisy_loggers()

    logging.getLogger("eth_proxy").setLevel(level)
    logging.getLogger("uvicorn").setLevel(max(level, logging.INFO))
    logging.getLogger("uvicorn.access").setLevel(max(level, logging.INFO))


def info():
    """Shortcut: Set INFO level logging"""
    setup_logging(1)


def debug():
    """Shortcut: Set DEBUG level logging"""
    setup_logging(2)


def trace():
    """Shortcut: Set TRACE level logging"""
    setup_logging(3)
