"""Logging setup for command-line entry points."""

import logging
import sys

from galfin_config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(verbose: bool = False) -> None:
    """Configure application logging.

    Log records go to stderr so command output on stdout stays parseable.
    The level comes from settings unless ``verbose`` forces DEBUG.
    """
    settings = get_settings()
    log_level = (
        logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.INFO)
    )

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger("galfin").setLevel(log_level)
