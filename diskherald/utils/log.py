#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import logging
from typing import IO

# Between INFO and DEBUG: every formatting step, without the raw plugin output
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

logger = logging.getLogger("diskherald")


def get_formatter(
    format_str: str = "%(asctime)s [%(levelno)s] [%(name)s %(process)d] %(message)s",
) -> logging.Formatter:
    return logging.Formatter(format_str)


def clear_console_logging() -> None:
    logger.handlers[:] = []
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.INFO)


# The formatter runs inside the host's notification process. Stay silent
# until the host asks for output.
clear_console_logging()


def setup_logging_handler(stream: IO[str], formatter: logging.Formatter | None = None) -> None:
    if formatter is None:
        formatter = get_formatter("%(asctime)s [%(levelno)s] [%(name)s] %(message)s")

    handler = logging.StreamHandler(stream=stream)
    handler.setFormatter(formatter)

    del logger.handlers[:]
    logger.addHandler(handler)


def verbosity_to_log_level(verbosity: int) -> int:
    """Map the number of -v flags of the host to a log level

    >>> verbosity_to_log_level(0) == logging.INFO
    True
    >>> verbosity_to_log_level(1)
    15
    >>> verbosity_to_log_level(5) == logging.DEBUG
    True
    """
    if verbosity <= 0:
        return logging.INFO
    if verbosity == 1:
        return VERBOSE
    return logging.DEBUG
