import logging
import os
from datetime import datetime
from pathlib import Path

import colorlog

LOGGER_NAME = "ORCA"
LOG_FILE_PREFIX = "orca"

def _resolve_level(verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(os.getenv("ORCA_LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO

class ProjectLogger:
    _logger = None

    @classmethod
    def _add_file_handler(cls, log_dir: str, timestamp: str) -> None:
        try:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path / f"{LOG_FILE_PREFIX}_{timestamp}.log")
            file_formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            file_handler.setFormatter(file_formatter)
            cls._logger.addHandler(file_handler)
        except OSError as e:
            cls._logger.warning(f"Could not setup file logging: {e}")

    @classmethod
    def _drop_file_handlers(cls) -> None:
        for handler in cls._logger.handlers[:]:
            if isinstance(handler, logging.FileHandler):
                handler.close()
                cls._logger.removeHandler(handler)

    @classmethod
    def setup_logger(
        cls,
        verbose: bool = False,
        log_to_file: bool = False,
        log_dir: str = "logs",
        timestamp: str | None = None,
    ) -> logging.Logger:
        if timestamp is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if cls._logger is not None:
            cls._logger.setLevel(_resolve_level(verbose))

            if log_to_file:
                cls._drop_file_handlers()
                cls._add_file_handler(log_dir, timestamp)

            return cls._logger

        cls._logger = logging.getLogger(LOGGER_NAME)
        cls._logger.setLevel(_resolve_level(verbose))

        if cls._logger.handlers:
            cls._logger.handlers.clear()

        console_handler = colorlog.StreamHandler()
        console_formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )
        console_handler.setFormatter(console_formatter)
        cls._logger.addHandler(console_handler)

        if log_to_file:
            cls._add_file_handler(log_dir, timestamp)

        return cls._logger

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        if cls._logger is None:
            cls.setup_logger(log_to_file=False)

        if name:
            return cls._logger.getChild(name)
        return cls._logger

def get_logger(name: str | None = None) -> logging.Logger:
    return ProjectLogger.get_logger(name)

def setup_logging(
    verbose: bool = False,
    log_to_file: bool = False,
    log_dir: str = "logs",
    timestamp: str | None = None,
) -> logging.Logger:
    return ProjectLogger.setup_logger(verbose, log_to_file, log_dir, timestamp)
