#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import os
import shutil
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, TypeVar

from diskherald.disk.chart import DEFAULT_CHART_WIDTH
from diskherald.exceptions import MKConfigError

StateType = Literal["SERVICE", "HOST"]

CHART_TOOL_NAME = "draw_stack_bars"
DEFAULT_CHART_TIMEOUT = 30.0
DEFAULT_CHART_FILENAME = "host_status.png"

_N = TypeVar("_N", int, float)


def default_chart_tool() -> Path:
    if found := shutil.which(CHART_TOOL_NAME):
        return Path(found)
    return Path(os.environ.get("OMD_ROOT", "/")) / "local/bin" / CHART_TOOL_NAME


def _positive_number(
    context: Mapping[str, str], varname: str, convert: type[_N], default: _N
) -> _N:
    if not (raw := context.get(varname)):
        return default
    try:
        value = convert(raw)
    except ValueError as e:
        raise MKConfigError(f"Invalid value for {varname}: {raw!r}") from e
    if value <= 0:
        raise MKConfigError(f"{varname} has to be greater than zero, got {raw!r}")
    return value


def _state_type(context: Mapping[str, str]) -> StateType:
    what = context.get("STATE_TYPE") or context.get("WHAT") or "SERVICE"
    if what == "HOST":
        return "HOST"
    if what == "SERVICE":
        return "SERVICE"
    raise MKConfigError(f"Unknown state type: {what!r}")


@dataclass(frozen=True)
class FormatterConfig:
    chart_tool: Path
    chart_width: int = DEFAULT_CHART_WIDTH
    chart_timeout: float = DEFAULT_CHART_TIMEOUT
    chart_filename: str = DEFAULT_CHART_FILENAME
    state_type: StateType = "SERVICE"

    @classmethod
    def from_context(cls, context: Mapping[str, str]) -> "FormatterConfig":
        """Read the formatter settings from the notification parameters

        >>> FormatterConfig.from_context({"PARAMETER_CHART_TOOL": "/bin/false"}).chart_width
        500
        """
        chart_tool = context.get("PARAMETER_CHART_TOOL")
        return cls(
            chart_tool=Path(chart_tool) if chart_tool else default_chart_tool(),
            chart_width=_positive_number(
                context, "PARAMETER_CHART_WIDTH", int, DEFAULT_CHART_WIDTH
            ),
            chart_timeout=_positive_number(
                context, "PARAMETER_CHART_TIMEOUT", float, DEFAULT_CHART_TIMEOUT
            ),
            chart_filename=context.get("PARAMETER_CHART_FILENAME") or DEFAULT_CHART_FILENAME,
            state_type=_state_type(context),
        )
