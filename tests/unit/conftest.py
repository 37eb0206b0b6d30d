#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from pathlib import Path

import pytest

from diskherald.content import NotificationContent
from diskherald.disk.chart import ChartSeries


class RecordingChartTool:
    def __init__(self, exit_status: int = 0) -> None:
        self.exit_status = exit_status
        self.calls: list[tuple[int, Path, list[tuple[str, int]]]] = []

    def __call__(self, width: int, output_path: Path, series: ChartSeries) -> int:
        self.calls.append((width, output_path, list(series)))
        return self.exit_status


@pytest.fixture(name="chart_tool")
def fixture_chart_tool() -> RecordingChartTool:
    return RecordingChartTool()


@pytest.fixture(name="failing_chart_tool")
def fixture_failing_chart_tool() -> RecordingChartTool:
    return RecordingChartTool(exit_status=1)


@pytest.fixture(name="content")
def fixture_content() -> NotificationContent:
    return NotificationContent()
