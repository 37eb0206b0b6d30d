#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Notification formatter for the output of the check_disk monitoring plugin.

The formatter turns the short and long output of a check_disk service into a
partition chart and a threshold-aware, colorized report. Mail delivery and
the rest of the notification pipeline are left to the host."""
