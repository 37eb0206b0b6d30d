#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import logging
from pathlib import Path

import pytest

from diskherald.disk.chart import build_chart, chart_series
from diskherald.disk.partitions import extract, PartitionRecord
from diskherald.exceptions import ChartToolError, ChartToolTimeout

PARTITIONS = [
    PartitionRecord("/data", "16273093 MB", 26),
    PartitionRecord("/", "7002 MB", 18),
]


def test_chart_series_most_full_first() -> None:
    assert chart_series(PARTITIONS) == [("/", 82), ("/data", 74)]


def test_chart_series_is_stable() -> None:
    partitions = [
        PartitionRecord("/b", "1 GB", 50),
        PartitionRecord("/a", "1 GB", 10),
        PartitionRecord("/c", "1 GB", 50),
    ]
    assert [name for name, _value in chart_series(partitions)] == ["/a", "/b", "/c"]


def test_utilization_round_trip() -> None:
    partitions = extract(
        "DISK WARNING - free space: / 7002 MB (18% inode=60%): /data 16273093 MB (26% inode=99%):"
    )
    free_by_name = {p.partition: p.free_percent for p in partitions}
    for name, utilization in chart_series(partitions):
        assert 100 - utilization == free_by_name[name]


def test_build_chart(chart_tool, tmp_path: Path) -> None:
    output_path = tmp_path / "host_status.png"

    assert build_chart(PARTITIONS, output_path, chart_tool) == output_path
    assert chart_tool.calls == [(500, output_path, [("/", 82), ("/data", 74)])]


def test_build_chart_width(chart_tool, tmp_path: Path) -> None:
    build_chart(PARTITIONS, tmp_path / "chart.png", chart_tool, width=800)
    assert chart_tool.calls[0][0] == 800


def test_build_chart_without_partitions(chart_tool, tmp_path: Path) -> None:
    assert build_chart([], tmp_path / "chart.png", chart_tool) is None
    assert not chart_tool.calls


def test_build_chart_tool_fails(
    failing_chart_tool, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="diskherald"):
        assert build_chart(PARTITIONS, tmp_path / "chart.png", failing_chart_tool) is None
    assert "exited with status 1" in caplog.text


@pytest.mark.parametrize(
    "exception",
    [
        ChartToolTimeout("took too long"),
        ChartToolError("Cannot run draw_stack_bars: [Errno 13] Permission denied"),
    ],
)
def test_build_chart_degrades(exception: Exception, tmp_path: Path) -> None:
    def chart_tool(width: int, output_path: Path, series: object) -> int:
        raise exception

    assert build_chart(PARTITIONS, tmp_path / "chart.png", chart_tool) is None

