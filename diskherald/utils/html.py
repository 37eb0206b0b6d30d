#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Iterable

LINE_BREAK = "<br>"

# Colors understood by mail clients which drop style sheets
COLOR_OK = "green"
COLOR_WARN = "orange"
COLOR_CRIT = "red"


def bold(text: str) -> str:
    return f"<b>{text}</b>"


def font(text: str, color: str) -> str:
    """
    >>> font("/ 83%", COLOR_CRIT)
    '<font color="red">/ 83%</font>'
    """
    return f'<font color="{color}">{text}</font>'


def preformatted(lines: Iterable[str]) -> str:
    """Join the lines into a <pre> block, separated by explicit line breaks

    >>> preformatted(["a", "b"])
    '<pre><br>a<br>b<br></pre>'
    """
    return LINE_BREAK.join(["<pre>", *lines, "</pre>"])


def image(src: str, width: int, alt: str) -> str:
    return f'<img src="{src}" width="{width}" alt="{alt}" />'
