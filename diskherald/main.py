#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

# Formats one notification from the environment of the monitoring core and
# writes the body to stdout. The notification variables (NOTIFY_*) select
# and configure the formatter, the plugin output is read from the NAGIOS_*
# macros.
#
# Options:
#   -v, -vv   more log output on stderr
#   --html    write the HTML document instead of the plain text body

import logging
import os
import re
import sys
import tempfile
from collections.abc import Mapping, Sequence
from pathlib import Path

from diskherald.config import FormatterConfig
from diskherald.content import NotificationContent
from diskherald.exceptions import MKException
from diskherald.formatters import formatter_registry
from diskherald.host import collect_context, EnvironmentHost
from diskherald.utils import log

logger = logging.getLogger("diskherald.main")

DEFAULT_CHECK_COMMAND = "check_disk"


def _verbosity(args: Sequence[str]) -> int:
    return sum(len(arg) - 1 for arg in args if re.fullmatch(r"-v+", arg))


def _sandbox(context: Mapping[str, str]) -> Path:
    if sandbox := context.get("PARAMETER_SANDBOX"):
        return Path(sandbox)
    return Path(tempfile.mkdtemp(prefix="diskherald-"))


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ

    log.setup_logging_handler(sys.stderr)
    log.logger.setLevel(log.verbosity_to_log_level(_verbosity(args)))

    context = collect_context(environ)
    try:
        config = FormatterConfig.from_context(context)
        formatter = formatter_registry.formatter_for(
            context.get(f"{config.state_type}CHECKCOMMAND") or DEFAULT_CHECK_COMMAND
        )
    except MKException as e:
        sys.stderr.write(f"Cannot format notification: {e}\n")
        return 2

    content = NotificationContent()
    formatter.format(EnvironmentHost(environ), content, _sandbox(context), config)

    for attachment in content.attachments:
        logger.info("Attachment: %s", attachment.path)

    if "--html" in args:
        sys.stdout.write(content.render_document(context.get("SUBJECT", "")))
    else:
        sys.stdout.write(content.text())
    return 0


if __name__ == "__main__":
    sys.exit(main())
