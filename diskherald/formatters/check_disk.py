#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

# Colorizes and bolds the output of the check_disk plugin and adds a chart
# of the used space per partition to the notification.

import logging
from collections.abc import Callable
from pathlib import Path

from diskherald.config import FormatterConfig
from diskherald.content import ContentSink
from diskherald.disk import chart, partitions, report, thresholds
from diskherald.disk.chart import ChartTool, DEFAULT_CHART_WIDTH
from diskherald.formatters import formatter_registry
from diskherald.host import NotificationHost, SubprocessChartTool
from diskherald.utils.escaping import escape, unescape_text
from diskherald.utils.html import bold, COLOR_OK, font, image, LINE_BREAK
from diskherald.utils.log import VERBOSE

logger = logging.getLogger("diskherald.formatters.check_disk")

SECTION_INFO = "additional_info"
SECTION_DETAILS = "additional_details"

INFO_TITLE = "Additional Info"
DISK_OK_MARKER = "DISK OK"
CHART_ALT = "partitions_remaining_space"


def additional_info(
    output: str | None,
    sink: ContentSink,
    chart_tool: ChartTool,
    chart_path: Path,
    width: int = DEFAULT_CHART_WIDTH,
    unescape: Callable[[str], str] = unescape_text,
) -> Path | None:
    """Write the summary section, with a chart of the partitions if possible

    Returns the path of the chart which was attached to the notification.
    """
    if not output:
        return None

    sink.add_text_section(SECTION_INFO, f"{INFO_TITLE}:\n {unescape(output)}\n\n")

    # A recovered check has no partition data, just the OK message
    if DISK_OK_MARKER in output:
        sink.add_html_section(
            SECTION_INFO,
            f"{INFO_TITLE}:{LINE_BREAK}{bold(font(f' {escape(output)}', COLOR_OK))}"
            f"{LINE_BREAK}{LINE_BREAK}",
        )
        return None

    found = partitions.extract(output)
    logger.log(VERBOSE, "Found %d partitions in the check output", len(found))
    chart_file = chart.build_chart(found, chart_path, chart_tool, width=width)

    sink.add_html_section(
        SECTION_INFO,
        f"{bold(INFO_TITLE)}:{LINE_BREAK} {escape(output)}{LINE_BREAK}{LINE_BREAK}",
    )
    if chart_file is None:
        return None

    sink.add_attachment(chart_file)
    sink.add_html_section(
        SECTION_INFO,
        f"{image(str(chart_file), width, CHART_ALT)}{LINE_BREAK}{LINE_BREAK}",
    )
    return chart_file


def additional_details(
    long_output: str | None,
    sink: ContentSink,
    unescape: Callable[[str], str] = unescape_text,
) -> None:
    """Write the df output of the check, colored by the declared thresholds"""
    if not long_output:
        return

    threshold_pair = thresholds.parse_thresholds(long_output)
    if threshold_pair is None:
        logger.log(VERBOSE, "No thresholds in the long output, passing it on unchanged")

    rendered = report.render(long_output, threshold_pair, unescape)
    sink.add_text_section(SECTION_DETAILS, rendered.text)
    sink.add_html_section(SECTION_DETAILS, rendered.html)
    line_break(sink, SECTION_DETAILS)


def line_break(sink: ContentSink, section: str) -> None:
    sink.add_text_section(section, "\n")
    sink.add_html_section(section, LINE_BREAK)


class CheckDiskFormatter:
    name = "check_disk"

    def format(
        self,
        host: NotificationHost,
        sink: ContentSink,
        sandbox: Path,
        config: FormatterConfig,
    ) -> None:
        state_type = config.state_type
        additional_info(
            host.get_variable(f"NAGIOS_{state_type}OUTPUT"),
            sink,
            SubprocessChartTool(config.chart_tool, config.chart_timeout),
            sandbox / config.chart_filename,
            width=config.chart_width,
            unescape=host.unescape,
        )
        additional_details(
            host.get_variable(f"NAGIOS_LONG{state_type}OUTPUT"),
            sink,
            unescape=host.unescape,
        )


formatter_registry.register(CheckDiskFormatter())
