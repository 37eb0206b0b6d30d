#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Partition data from the summary line of check_disk

The plugin reports its free space in one of two shapes. The simple one ends
every partition with a colon:

    DISK CRITICAL - free space: / 7002 MB (18% inode=60%): /data 16273093 MB (26% inode=99%):

The long one separates the partitions with semicolons and appends the
performance data after a pipe:

    DISK CRITICAL - free space: / 7051 MB (18% inode=60%); /data 16733467 MB (27% inode=99%);| /=31220MB;36287;2015;0;40319
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["PartitionRecord", "extract"]

FREE_SPACE_MARKER = "free space:"

_PERFDATA_SEPARATOR = "|"

# "/data 16273093 MB (26% inode=99%)" -> partition, free amount, free percent.
# Exactly one "%" has to follow the leading number of the parenthesis.
_PARTITION_REGEX = re.compile(
    r"\s*(?P<partition>\S+)\s+(?P<free_amount>[^(]*?)\s*\((?P<free_percent>\d+)%(?!%)[^)]*\)"
)


@dataclass(frozen=True)
class PartitionRecord:
    partition: str
    free_amount: str
    free_percent: int


def _space_segment(summary_text: str) -> str | None:
    _head, marker, tail = summary_text.partition(FREE_SPACE_MARKER)
    if not marker:
        return None
    return tail.split(_PERFDATA_SEPARATOR, 1)[0]


def _parse_partition(token: str) -> PartitionRecord | None:
    if (match := _PARTITION_REGEX.match(token)) is None:
        return None
    if not match["free_amount"]:
        return None
    free_percent = int(match["free_percent"])
    if free_percent > 100:
        return None
    return PartitionRecord(
        partition=match["partition"],
        free_amount=match["free_amount"],
        free_percent=free_percent,
    )


def extract(summary_text: str | None) -> Sequence[PartitionRecord]:
    """Parse the partitions out of the short output of check_disk

    Tokens which do not look like a partition are dropped, no exception is
    raised for any input.

    >>> [p.partition for p in extract("DISK WARNING - free space: /var 2 GB (9% inode=90%):")]
    ['/var']
    >>> extract("DISK OK")
    []
    """
    if not summary_text:
        return []

    if (segment := _space_segment(summary_text)) is None:
        return []

    delimiter = ";" if ";" in segment else ":"
    return [
        record
        for token in segment.split(delimiter)
        if token.strip() and (record := _parse_partition(token)) is not None
    ]
