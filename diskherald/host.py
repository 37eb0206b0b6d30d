#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""What the formatter needs from the notification host

The host hands over the monitoring macros and draws the chart. The defaults
in here read the macros from the process environment and run the chart tool
as a child process.
"""

import logging
import os
import subprocess
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from diskherald.disk.chart import ChartSeries
from diskherald.exceptions import ChartToolError, ChartToolTimeout
from diskherald.utils.escaping import unescape_text

logger = logging.getLogger("diskherald.host")

NotificationContext = dict[str, str]


class NotificationHost(Protocol):
    def get_variable(self, name: str) -> str | None: ...

    def unescape(self, text: str) -> str: ...


def collect_context(
    environ: Mapping[str, str] = os.environ, prefix: str = "NOTIFY_"
) -> NotificationContext:
    """All notification variables of the environment, without their prefix

    >>> collect_context({"NOTIFY_WHAT": "SERVICE", "PATH": "/bin"})
    {'WHAT': 'SERVICE'}
    """
    return {
        var[len(prefix) :]: value for var, value in environ.items() if var.startswith(prefix)
    }


class EnvironmentHost:
    """Macros as the monitoring core exports them, e.g. NAGIOS_SERVICEOUTPUT"""

    def __init__(self, context: Mapping[str, str] | None = None) -> None:
        self._context = os.environ if context is None else context

    def get_variable(self, name: str) -> str | None:
        return self._context.get(name)

    def unescape(self, text: str) -> str:
        return unescape_text(text)


class SubprocessChartTool:
    """Run the stacked bars tool: <tool> --width=W --output=FILE name=value ..."""

    def __init__(self, executable: Path, timeout: float) -> None:
        self.executable = executable
        self.timeout = timeout

    def command(self, width: int, output_path: Path, series: ChartSeries) -> list[str]:
        return [
            str(self.executable),
            f"--width={width}",
            f"--output={output_path}",
            *(f"{name}={value}" for name, value in series),
        ]

    def __call__(self, width: int, output_path: Path, series: ChartSeries) -> int:
        cmd = self.command(width, output_path, series)
        logger.debug("Running %r", cmd)
        try:
            completed_process = subprocess.run(
                cmd,
                encoding="utf-8",
                errors="replace",
                capture_output=True,
                check=False,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ChartToolTimeout(
                f"{self.executable} did not finish within {self.timeout} seconds"
            ) from e
        except OSError as e:
            raise ChartToolError(f"Cannot run {self.executable}: {e}") from e

        if completed_process.returncode:
            logger.info(
                "%s returned with exit code %d: %s",
                self.executable,
                completed_process.returncode,
                completed_process.stderr.strip(),
            )
        return completed_process.returncode
