#!/usr/bin/env python3
# Copyright (C) 2024 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple, Protocol

from jinja2 import Environment, FileSystemLoader

TEMPLATE_DIR = Path(__file__).parent / "templates"


class ContentSink(Protocol):
    def add_text_section(self, section: str, text: str) -> None: ...

    def add_html_section(self, section: str, html: str) -> None: ...

    def add_attachment(self, path: Path) -> None: ...


class Attachment(NamedTuple):
    name: str
    path: Path


@dataclass
class Section:
    name: str
    text: list[str] = field(default_factory=list)
    html: list[str] = field(default_factory=list)


class TemplateRenderer:
    def __init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            autoescape=True,
            keep_trailing_newline=True,
        )

    def render_template(self, template_file: str, data: dict[str, object]) -> str:
        template = self.env.get_template(template_file)
        return template.render(data)


class NotificationContent:
    """Collects the sections and attachments the formatters produce

    Sections keep the order in which they were first written to.
    """

    def __init__(self) -> None:
        self._sections: dict[str, Section] = {}
        self.attachments: list[Attachment] = []

    def _section(self, section: str) -> Section:
        return self._sections.setdefault(section, Section(section))

    def add_text_section(self, section: str, text: str) -> None:
        self._section(section).text.append(text)

    def add_html_section(self, section: str, html: str) -> None:
        self._section(section).html.append(html)

    def add_attachment(self, path: Path) -> None:
        self.attachments.append(Attachment(name=path.name, path=path))

    @property
    def sections(self) -> list[Section]:
        return list(self._sections.values())

    def text(self, section: str | None = None) -> str:
        sections = self.sections if section is None else [self._sections[section]]
        return "".join("".join(s.text) for s in sections)

    def html(self, section: str | None = None) -> str:
        sections = self.sections if section is None else [self._sections[section]]
        return "".join("".join(s.html) for s in sections)

    def render_document(self, subject: str) -> str:
        return TemplateRenderer().render_template(
            "notification.html",
            {
                "subject": subject,
                "sections": [(s.name, "".join(s.html)) for s in self.sections if s.html],
            },
        )
