#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import subprocess
from pathlib import Path

import pytest

from diskherald.exceptions import ChartToolError, ChartToolTimeout
from diskherald.host import collect_context, EnvironmentHost, SubprocessChartTool


def test_collect_context() -> None:
    assert collect_context(
        {
            "NOTIFY_WHAT": "SERVICE",
            "NOTIFY_PARAMETER_CHART_WIDTH": "600",
            "NAGIOS_SERVICEOUTPUT": "DISK OK",
        }
    ) == {"WHAT": "SERVICE", "PARAMETER_CHART_WIDTH": "600"}


def test_environment_host_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NAGIOS_SERVICEOUTPUT", "DISK OK")
    monkeypatch.delenv("NAGIOS_LONGSERVICEOUTPUT", raising=False)

    host = EnvironmentHost()

    assert host.get_variable("NAGIOS_SERVICEOUTPUT") == "DISK OK"
    assert host.get_variable("NAGIOS_LONGSERVICEOUTPUT") is None


def test_environment_host_unescape() -> None:
    assert EnvironmentHost({}).unescape("a\\nb\\tc") == "a\nb\tc"


def test_chart_tool_command() -> None:
    tool = SubprocessChartTool(Path("/opt/bin/draw_stack_bars"), timeout=5)
    assert tool.command(500, Path("/tmp/sandbox/host_status.png"), [("/", 82), ("/data", 74)]) == [
        "/opt/bin/draw_stack_bars",
        "--width=500",
        "--output=/tmp/sandbox/host_status.png",
        "/=82",
        "/data=74",
    ]


@pytest.mark.parametrize("returncode", [0, 3])
def test_chart_tool_exit_status(monkeypatch: pytest.MonkeyPatch, returncode: int) -> None:
    def fake_run(cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        assert kwargs["timeout"] == 5
        assert kwargs["check"] is False
        return subprocess.CompletedProcess(cmd, returncode, "", "cannot draw")

    monkeypatch.setattr("diskherald.host.subprocess.run", fake_run)
    tool = SubprocessChartTool(Path("draw_stack_bars"), timeout=5)

    assert tool(500, Path("out.png"), [("/", 82)]) == returncode


def test_chart_tool_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        raise subprocess.TimeoutExpired(cmd, 5)

    monkeypatch.setattr("diskherald.host.subprocess.run", fake_run)
    tool = SubprocessChartTool(Path("draw_stack_bars"), timeout=5)

    with pytest.raises(ChartToolTimeout):
        tool(500, Path("out.png"), [("/", 82)])


def _write_tool(path: Path, script: str, mode: int = 0o755) -> Path:
    path.write_text(f"#!/bin/sh\n{script}\n")
    path.chmod(mode)
    return path


def test_chart_tool_missing_executable(tmp_path: Path) -> None:
    tool = SubprocessChartTool(tmp_path / "draw_stack_bars", timeout=5)
    with pytest.raises(ChartToolError):
        tool(500, tmp_path / "out.png", [("/", 82)])


def test_chart_tool_not_executable(tmp_path: Path) -> None:
    executable = _write_tool(tmp_path / "draw_stack_bars", "exit 0", mode=0o644)
    tool = SubprocessChartTool(executable, timeout=5)
    with pytest.raises(ChartToolError):
        tool(500, tmp_path / "out.png", [("/", 82)])


def test_chart_tool_is_a_directory(tmp_path: Path) -> None:
    tool = SubprocessChartTool(tmp_path, timeout=5)
    with pytest.raises(ChartToolError):
        tool(500, tmp_path / "out.png", [("/", 82)])


def test_chart_tool_binary_output(tmp_path: Path) -> None:
    executable = _write_tool(
        tmp_path / "draw_stack_bars",
        "printf '\\211PNG\\377\\376'\nprintf '\\211PNG\\377\\376' >&2\nexit 1",
    )
    tool = SubprocessChartTool(executable, timeout=5)
    assert tool(500, tmp_path / "out.png", [("/", 82)]) == 1
