#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import re
from dataclasses import dataclass

from diskherald.utils.escaping import split_literal_lines

THRESHOLDS_MARKER = "THRESHOLDS - "

# Any line mentioning the thresholds is a declaration, never a df row
_THRESHOLDS_KEYWORD = "THRESHOLDS"

# THRESHOLDS - WARNING:50%;CRITICAL:40%;
_THRESHOLDS_REGEX = re.compile(r"WARNING:(?P<warning>\d+)%;CRITICAL:(?P<critical>\d+)%;")


@dataclass(frozen=True)
class ThresholdPair:
    """Percent of free space at or below which a partition is WARN or CRIT"""

    warning_percent: int
    critical_percent: int


def is_threshold_line(line: str) -> bool:
    return _THRESHOLDS_KEYWORD in line


def parse_thresholds(detail_text: str | None) -> ThresholdPair | None:
    """Find the threshold declaration in the long output of check_disk

    >>> parse_thresholds("THRESHOLDS - WARNING:50%;CRITICAL:40%;")
    ThresholdPair(warning_percent=50, critical_percent=40)
    >>> parse_thresholds("WARNING:50%;CRITICAL:40%;") is None
    True
    """
    if not detail_text:
        return None

    for line in split_literal_lines(detail_text):
        if THRESHOLDS_MARKER not in line:
            continue
        if (match := _THRESHOLDS_REGEX.search(line)) is None:
            continue
        warning, critical = int(match["warning"]), int(match["critical"])
        if warning > 100 or critical > 100:
            # A broken declaration disables the coloring altogether
            return None
        return ThresholdPair(warning_percent=warning, critical_percent=critical)

    return None
