"""
Logging configuration for the API and the seed script.

``setup_logging`` attaches a single console handler to the root logger.
Calling it again is a no-op, which keeps test runs and repeated
``create_app`` calls from duplicating output.
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once

    Args:
        level: Logging level name (DEBUG, INFO, ...), case insensitive.
            Unknown names fall back to INFO.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
