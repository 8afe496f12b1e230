#!/usr/bin/env python3

import logging
import os
import sys


# Disabling redefined-builtin because the native logging also violates this
# pylint: disable=redefined-builtin
def setup(name="retag", level=None, format=None, debug_file=None):
    """Setup a logger for a retag module. Parameters that are not provided
    fall back to environment variables or defaults.

    Args:
        name (str, optional): The name of the logger. Defaults to "retag".
        level (str | int, optional): The level of logging. Defaults to environment
            variable "LOGLEVEL" if set, otherwise to "INFO".
        format (str, optional): The format of the logging messages. If not provided,
            a default format will be used based on the level.
        debug_file (str, optional): A file which receives every debug level record
            of this logger, regardless of the console level. Calling setup again
            for the same logger and file does not add a second handler.

    Returns:
        Logger: A configured logger.
    """
    level = level if level else os.environ.get("LOGLEVEL", "INFO").upper()
    default_format = (
        "| %(levelname)s | [%(filename)s: %(lineno)d]: | %(message)s"
        if level == "DEBUG"
        else "| %(name)-16s | %(levelname)-8s | %(message)s"
    )
    format = format or default_format
    # basicConfig is a no-op once the root logger has a handler, so the first
    # module to call setup decides the console format
    logging.basicConfig(level=level, stream=sys.stdout, format=format)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if debug_file and not any(
        isinstance(handler, logging.FileHandler)
        and handler.baseFilename == os.path.abspath(debug_file)
        for handler in logger.handlers
    ):
        file_handler = logging.FileHandler(debug_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(format))
        logger.addHandler(file_handler)
    return logger
