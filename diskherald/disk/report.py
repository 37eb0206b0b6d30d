#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Colorize the df output in the long output of check_disk

Every line which reports a usage above the declared thresholds is made bold,
colored and annotated with the free space. Without a threshold declaration
the long output is passed on as it is.
"""

import enum
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from diskherald.disk.thresholds import is_threshold_line, ThresholdPair
from diskherald.utils.escaping import escape, split_literal_lines, unescape_text
from diskherald.utils.html import bold, COLOR_CRIT, COLOR_WARN, font, LINE_BREAK, preformatted

__all__ = [
    "classify_line",
    "render",
    "RenderedReport",
    "ReportLine",
    "Severity",
]

DETAILS_TITLE = "Additional Details"

# The first number directly followed by a percent sign, e.g. the "Use%"
# column of df. Fractions are kept, "12.5%" must not be read as "5%".
_PERCENT_REGEX = re.compile(r"(?<![\d.])(?P<percent>\d+(?:\.\d+)?)%")


class Severity(enum.Enum):
    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"
    PASSTHROUGH = "passthrough"


Percent = int | float


@dataclass(frozen=True)
class ReportLine:
    text: str
    severity: Severity
    free_percent: Percent | None = None


@dataclass(frozen=True)
class RenderedReport:
    text: str
    html: str


def _used_percent(line: str) -> Percent | None:
    if (match := _PERCENT_REGEX.search(line)) is None:
        return None
    raw = match["percent"]
    used: Percent = float(raw) if "." in raw else int(raw)
    if used > 100:
        return None
    return used


def _format_percent(value: Percent) -> str:
    return f"{value:g}"


def classify_line(line: str, thresholds: ThresholdPair) -> ReportLine:
    """Derive the severity of a single df line

    >>> classify_line("/dev/sda1 40G 26G 14G 65% /", ThresholdPair(50, 40)).severity
    <Severity.CRITICAL: 'critical'>
    >>> classify_line("Filesystem Size Used Avail Use% Mounted on", ThresholdPair(50, 40)).severity
    <Severity.PASSTHROUGH: 'passthrough'>
    """
    if is_threshold_line(line):
        return ReportLine(line, Severity.PASSTHROUGH)

    if (used := _used_percent(line)) is None:
        return ReportLine(line, Severity.PASSTHROUGH)

    free = 100 - used
    if free <= thresholds.critical_percent:
        return ReportLine(line, Severity.CRITICAL, free)
    if free <= thresholds.warning_percent:
        return ReportLine(line, Severity.WARNING, free)
    return ReportLine(line, Severity.NORMAL, free)


def _line_to_html(report_line: ReportLine, thresholds: ThresholdPair) -> str:
    text = escape(report_line.text)
    if report_line.free_percent is None:
        return text

    match report_line.severity:
        case Severity.CRITICAL:
            color, state, threshold = COLOR_CRIT, "CRITICAL", thresholds.critical_percent
        case Severity.WARNING:
            color, state, threshold = COLOR_WARN, "WARNING", thresholds.warning_percent
        case _:
            return text

    free = _format_percent(report_line.free_percent)
    return bold(
        f"{font(text, color)}  Free disk space {font(f'({free}%)', color)}"
        f" is <= {state} threshold ({threshold}%)."
    )


def _render_text(detail_text: str, unescape: Callable[[str], str]) -> str:
    return f"{DETAILS_TITLE}:\n{unescape(detail_text)}\n"


def _render_plain_html(detail_text: str, unescape: Callable[[str], str]) -> str:
    return (
        f"{bold(DETAILS_TITLE)}:{LINE_BREAK}"
        f"<pre>{escape(unescape(detail_text))}</pre>{LINE_BREAK}{LINE_BREAK}"
    )


def report_lines(detail_text: str, thresholds: ThresholdPair) -> Sequence[ReportLine]:
    return [classify_line(line, thresholds) for line in split_literal_lines(detail_text)]


def render(
    detail_text: str,
    thresholds: ThresholdPair | None,
    unescape: Callable[[str], str] = unescape_text,
) -> RenderedReport:
    text = _render_text(detail_text, unescape)
    if thresholds is None:
        return RenderedReport(text=text, html=_render_plain_html(detail_text, unescape))

    html_lines = [_line_to_html(line, thresholds) for line in report_lines(detail_text, thresholds)]
    return RenderedReport(
        text=text,
        html=f"{bold(DETAILS_TITLE)}:{preformatted(html_lines)}",
    )
