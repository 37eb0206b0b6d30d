#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol

from diskherald.disk.partitions import PartitionRecord
from diskherald.exceptions import ChartToolError, ChartToolTimeout

logger = logging.getLogger("diskherald.disk.chart")

DEFAULT_CHART_WIDTH = 500

ChartSeries = Sequence[tuple[str, int]]


class ChartTool(Protocol):
    def __call__(self, width: int, output_path: Path, series: ChartSeries) -> int: ...


def chart_series(partitions: Iterable[PartitionRecord]) -> list[tuple[str, int]]:
    """Utilization per partition, the most full partition first

    >>> chart_series([PartitionRecord("/data", "1 GB", 26), PartitionRecord("/", "2 GB", 18)])
    [('/', 82), ('/data', 74)]
    """
    return [
        (p.partition, 100 - p.free_percent)
        for p in sorted(partitions, key=lambda p: p.free_percent)
    ]


def build_chart(
    partitions: Iterable[PartitionRecord],
    output_path: Path,
    run_chart_tool: ChartTool,
    width: int = DEFAULT_CHART_WIDTH,
) -> Path | None:
    """Draw the stacked bars of all partitions into output_path

    Returns the path of the image or None if no image was drawn. A failing
    chart tool is not an error, the notification simply goes out without it.
    """
    series = chart_series(partitions)
    if not series:
        logger.debug("No partitions found, skipping the chart")
        return None

    try:
        exit_status = run_chart_tool(width, output_path, series)
    except ChartToolTimeout as e:
        logger.warning("Chart tool timed out, continuing without chart: %s", e)
        return None
    except ChartToolError as e:
        logger.warning("Chart tool failed, continuing without chart: %s", e)
        return None

    if exit_status != 0:
        logger.warning(
            "Chart tool exited with status %d, continuing without chart", exit_status
        )
        return None

    logger.debug("Chart of %d partitions written to %s", len(series), output_path)
    return output_path
