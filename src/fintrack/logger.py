import logging
import logging.config
import os
from typing import Optional


class ColourizedFormatter(logging.Formatter):
    """
    Custom formatter to add colors to log levels.
    """
    GREY = "\x1b[90m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    RED = "\x1b[31m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        orig_levelname = record.levelname

        if record.levelno in self.LEVEL_COLORS:
            record.levelname = f"{self.LEVEL_COLORS[record.levelno]}{record.levelname}{self.RESET}"

        result = super().format(record)

        # Restore so other handlers see the plain name
        record.levelname = orig_levelname
        return result


def get_logging_config(default_level: str = "INFO") -> dict:
    log_level_name = os.getenv("FINTRACK_LOG_LEVEL", default_level).upper()
    log_dir = os.getenv("FINTRACK_LOG_DIR")
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": "default",
        },
    }
    fintrack_handlers = ["console"]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": os.path.join(log_dir, "fintrack.log"),
            "formatter": "plain",
        }
        fintrack_handlers.append("file")

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": "fintrack.logger.ColourizedFormatter",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
            "plain": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        "handlers": handlers,
        "loggers": {
            "fintrack": {
                "handlers": fintrack_handlers,
                "level": log_level_name,
                "propagate": False,
            },
            "sqlalchemy.engine": {
                "handlers": fintrack_handlers,
                "level": "WARNING",
                "propagate": False,
            },
        },
    }


def setup_logging(default_level: Optional[str] = None) -> None:
    logging.config.dictConfig(get_logging_config(default_level or "INFO"))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
