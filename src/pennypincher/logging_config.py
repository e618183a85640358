"""Console logging configuration."""

import logging

LOGGER_NAME = "pennypincher"
CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger with a single console handler.

    Args:
        verbose: Show INFO messages (import notices, summaries) instead of
            only warnings and errors

    Returns:
        Configured package logger
    """
    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    root_logger.addHandler(console_handler)

    return root_logger
