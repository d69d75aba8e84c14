"""
Logging setup - Root logger configuration for the process.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once for the process.

    Args:
        level: Level name such as "DEBUG" or "INFO" (case-insensitive)
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
