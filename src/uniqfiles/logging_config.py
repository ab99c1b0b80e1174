"""Logging configuration for uniqfiles."""

import logging

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the uniqfiles package logger.
    Skipped-file warnings are shown by default, hidden with quiet.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    root_logger = logging.getLogger("uniqfiles")
    root_logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
