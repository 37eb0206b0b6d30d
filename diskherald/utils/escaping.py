#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from html import escape as html_escape

# Monitoring cores hand over multi-line plugin output with the line breaks
# replaced by the two characters "\" and "n".
LITERAL_NEWLINE = "\\n"
LITERAL_TAB = "\\t"


def escape(value: str) -> str:
    """escape text for HTML (e.g. `< -> &lt;`)

    >>> escape('/mnt/<data> & "more"')
    '/mnt/&lt;data&gt; &amp; &quot;more&quot;'
    """
    return html_escape(value, quote=True)


def unescape_text(text: str) -> str:
    """Turn the literal escape tokens of the plugin output into real characters

    >>> unescape_text("DISK OK\\\\n/ 40G 33G 7.0G 83% /")
    'DISK OK\\n/ 40G 33G 7.0G 83% /'
    >>> unescape_text("a\\\\tb")
    'a\\tb'
    """
    return text.replace(LITERAL_NEWLINE, "\n").replace(LITERAL_TAB, "\t")


def split_literal_lines(text: str) -> list[str]:
    """Split plugin output on the literal newline token, not on real line breaks

    >>> split_literal_lines("first\\\\nsecond")
    ['first', 'second']
    >>> split_literal_lines("one\\nline")
    ['one\\nline']
    """
    return text.split(LITERAL_NEWLINE)
