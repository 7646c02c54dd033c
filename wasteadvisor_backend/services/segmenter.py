"""Split the model's Markdown report into a title and iconified sections.

The model is asked for a ``# Title`` line followed by seven ``## N. Topic``
sections. Nothing here enforces that shape: a report that drifts from it just
yields fewer sections, or sections with the default icon.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

import markdown
from markupsafe import Markup

from wasteadvisor_backend.services.icons import SectionIcon, icon_for

logger = logging.getLogger(__name__)

TITLE_MARKER = "# "
_SECTION_SPLIT = re.compile(r"^## ", re.MULTILINE)
_NUMBER_PREFIX = re.compile(r"^\d+\.\s*")
_WRAPPING_PARAGRAPH = re.compile(r"^<p>|</p>$")


@dataclass(frozen=True, slots=True)
class ReportSection:
    ordinal: str
    title: str
    body_html: str
    icon: SectionIcon

    def to_dict(self) -> dict[str, str]:
        return {
            "ordinal": self.ordinal,
            "title": self.title,
            "html": self.body_html,
            "icon": self.icon.name,
        }


@dataclass(frozen=True, slots=True)
class SegmentedReport:
    title: str | None = None
    sections: tuple[ReportSection, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.sections

    @property
    def title_html(self) -> Markup | None:
        """The title rendered as inline markup, without the paragraph wrapper."""
        if not self.title:
            return None
        rendered = render_markdown(self.title).strip()
        return Markup(_WRAPPING_PARAGRAPH.sub("", rendered))


def render_markdown(source: str) -> str:
    return markdown.markdown(source)


def split_title(raw_report: str) -> tuple[str | None, str]:
    """Return ``(title, body)``; the title is taken only from a leading ``# `` line."""

    trimmed = (raw_report or "").strip()
    first_line, _, rest = trimmed.partition("\n")
    if first_line.startswith(TITLE_MARKER):
        return first_line[len(TITLE_MARKER):].strip(), rest.strip()
    return None, trimmed


def _build_section(fragment: str) -> ReportSection | None:
    heading, _, rest = fragment.partition("\n")
    title = _NUMBER_PREFIX.sub("", heading.strip()).strip()
    body = rest.strip()
    if not title or not body:
        return None

    icon = icon_for(fragment[:1])
    return ReportSection(
        ordinal=icon.key,
        title=title,
        body_html=render_markdown(body),
        icon=icon,
    )


def segment_report(raw_report: str | None) -> SegmentedReport:
    """Turn a raw model report into a ``SegmentedReport``. Never raises on bad shape."""

    title, body = split_title(raw_report or "")
    if not body:
        return SegmentedReport(title=title)

    # Anything before the first heading is preamble, not a section.
    fragments = _SECTION_SPLIT.split(body)[1:]

    sections = []
    dropped = 0
    for fragment in fragments:
        if not fragment.strip():
            continue
        section = _build_section(fragment)
        if section is None:
            dropped += 1
            continue
        sections.append(section)

    if dropped:
        logger.debug(
            "dropped %s report section(s) with an empty title or body", dropped
        )

    return SegmentedReport(title=title, sections=tuple(sections))
