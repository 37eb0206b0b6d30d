#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from setuptools import find_packages, setup

setup(
    name="diskherald",
    version="1.0.0",
    description="Notification formatter for the output of the check_disk plugin",
    packages=find_packages(include=["diskherald", "diskherald.*"]),
    package_data={"diskherald": ["templates/*.html"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=["jinja2>=3.1"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["diskherald=diskherald.main:main"]},
)
