#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Protocol

from diskherald.config import FormatterConfig
from diskherald.content import ContentSink
from diskherald.exceptions import MKFormatterNotFound
from diskherald.host import NotificationHost


class Formatter(Protocol):
    @property
    def name(self) -> str: ...

    def format(
        self,
        host: NotificationHost,
        sink: ContentSink,
        sandbox: Path,
        config: FormatterConfig,
    ) -> None: ...


class FormatterRegistry(Mapping[str, Formatter]):
    """Formatters by the name of the check command they understand

    >>> class Dummy:
    ...     name = "check_dummy"
    >>> registry = FormatterRegistry()
    >>> _ = registry.register(Dummy())
    >>> registry.formatter_for("check_dummy!80%!90%").name
    'check_dummy'
    """

    def __init__(self) -> None:
        super().__init__()
        self._entries: dict[str, Formatter] = {}

    def register(self, instance: Formatter) -> Formatter:
        self._entries[instance.name] = instance
        return instance

    def unregister(self, name: str) -> None:
        del self._entries[name]

    def formatter_for(self, check_command: str) -> Formatter:
        # Arguments are appended with "!", e.g. "check_disk!20%!10%"
        name = check_command.split("!", 1)[0].strip()
        try:
            return self._entries[name]
        except KeyError:
            raise MKFormatterNotFound(f"No formatter for check command {name!r}") from None

    def __getitem__(self, key: str) -> Formatter:
        return self._entries.__getitem__(key)

    def __len__(self) -> int:
        return self._entries.__len__()

    def __iter__(self) -> Iterator[str]:
        return self._entries.__iter__()


formatter_registry = FormatterRegistry()

# Formatters register themselves on import
from diskherald.formatters import check_disk as check_disk  # noqa: E402
