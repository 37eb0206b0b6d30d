#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""User-defined exceptions of the formatter."""

__all__ = [
    "ChartToolError",
    "ChartToolTimeout",
    "MKConfigError",
    "MKException",
    "MKFormatterNotFound",
    "MKGeneralException",
    "MKTimeout",
]


# never used directly in the code. Just some wrapper to make all of our
# exceptions handleable with one call
class MKException(Exception):
    pass


class MKGeneralException(MKException):
    pass


class MKConfigError(MKGeneralException):
    """A notification parameter could not be turned into a formatter setting."""


class MKFormatterNotFound(MKGeneralException):
    pass


class ChartToolError(MKGeneralException):
    """The external chart tool could not be started."""


class MKTimeout(MKException):
    """Raise when a timeout is reached."""


class ChartToolTimeout(MKTimeout):
    """The external chart tool did not finish within the configured time.

    Note:
        The chart builder treats this like a failed tool run and continues
        without an image.
    """
