import logging
import sys
from typing import Optional

from .config import Config


class LoggingManager:
    """Manager for logging setup and logger retrieval."""

    @classmethod
    def setup_logging(cls, level: Optional[str] = None, config: Optional[Config] = None) -> None:
        """Setup logging for the command line tool.

        Progress messages go to stdout; errors meant for the user are
        written to stderr by the command line entry point.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                Defaults to the configured level.
            config: Configuration to read formats and library levels from.
        """
        config = config or Config()
        numeric_level = getattr(logging, (level or config.log_level).upper(), logging.INFO)

        formatter = logging.Formatter(
            fmt=config.log_format,
            datefmt=config.log_date_format
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(numeric_level)

        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)
        root_logger.addHandler(console_handler)

        # Set levels for noisy libraries
        for logger_name, library_level in config.library_log_levels.items():
            logging.getLogger(logger_name).setLevel(getattr(logging, library_level.upper(), logging.WARNING))

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name, typically __name__

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)
