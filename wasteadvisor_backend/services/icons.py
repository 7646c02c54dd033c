"""Decorative section icons, one per report topic."""

from __future__ import annotations

from dataclasses import dataclass

from markupsafe import Markup

DEFAULT_ICON_KEY = "1"

_SVG_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" class="{css_class}" fill="none" '
    'viewBox="0 0 24 24" stroke="currentColor" aria-hidden="true">{paths}</svg>'
)
_PATH_TEMPLATE = (
    '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="{d}" />'
)


@dataclass(frozen=True, slots=True)
class SectionIcon:
    key: str
    name: str
    paths: tuple[str, ...]

    def svg(self, css_class: str = "section-icon") -> Markup:
        paths = "".join(_PATH_TEMPLATE.format(d=d) for d in self.paths)
        return Markup(_SVG_TEMPLATE.format(css_class=css_class, paths=paths))


ICONS: dict[str, SectionIcon] = {
    icon.key: icon
    for icon in (
        SectionIcon(
            "1",
            "composition",
            (
                "M14 10l-2 1m0 0l-2-1m2 1v2.5M20 7l-2 1m2-1l-2-1m2 1v2.5M14 4l-2 1m0 0l-2-1m2 1v2.5"
                "M3 12l2-1m0 0l2 1m-2-1v-2.5M20 12l2-1m0 0l2 1m-2-1v-2.5M4 7l2-1m0 0l2 1m-2-1v-2.5"
                "m6-3l-2-1m0 0l-2 1m2-1V.5M9 12.5l2 1m0 0l2-1m-2 1V15m3-2.5l2 1m0 0l2-1m-2 1V15"
                "m-6 0l2 1m0 0l2-1m-2 1v2.5m-3-2.5l2 1m0 0l2-1m-2 1V15",
            ),
        ),
        SectionIcon(
            "2",
            "properties",
            (
                "M19.428 15.428a2 2 0 00-1.022-.547l-2.387-.477a6 6 0 00-3.86.517l-.318.158"
                "a6 6 0 01-3.86.517L6.05 15.21a2 2 0 00-1.806.547M8 4h8l-1 1v4.512l-1.571.785"
                "a2 2 0 01-1.858 0L8 10.012V5l-1-1z",
            ),
        ),
        SectionIcon(
            "3",
            "uses",
            (
                "M19 21V5a2 2 0 00-2-2H7a2 2 0 00-2 2v16m14 0h2m-2 0h-5m-9 0H3m2 0h5M9 7h1m-1 4h1"
                "m4-4h1m-1 4h1m-5 10v-5a1 1 0 011-1h2a1 1 0 011 1v5m-4 0h4",
            ),
        ),
        SectionIcon(
            "4",
            "environmental-impact",
            (
                "M3.055 11H5a2 2 0 012 2v1a2 2 0 002 2h10a2 2 0 002-2v-1a2 2 0 012-2h1.945"
                "M7.707 4.293l.707-.707a2 2 0 012.828 0l.707.707M12 21a9 9 0 110-18 9 9 0 010 18z",
            ),
        ),
        SectionIcon(
            "5",
            "recycling-methods",
            ("M4 4v5h5V4H4zm0 12v5h5v-5H4zM15 4v5h5V4h-5zm0 12v5h5v-5h-5z",),
        ),
        SectionIcon(
            "6",
            "national-production",
            (
                "M17.657 16.657L13.414 20.9a1.998 1.998 0 01-2.827 0l-4.244-4.243a8 8 0 1111.314 0z",
                "M15 11a3 3 0 11-6 0 3 3 0 016 0z",
            ),
        ),
        SectionIcon(
            "7",
            "costs",
            (
                "M12 8c-1.657 0-3 .895-3 2s1.343 2 3 2 3 .895 3 2-1.343 2-3 2m0-8c1.11 0 2.08.402 2.599 1"
                "M12 8V7m0 1v.01M12 16v-1m0-1c-1.11 0-2.08-.402-2.599-1M12 16h.01M12 16c1.657 0 3-.895 3-2"
                "s-1.343-2-3-2-3-.895-3-2 1.343-2 3-2m0 8c-1.11 0-2.08.402-2.599 1",
            ),
        ),
    )
}


def icon_for(ordinal: str | None) -> SectionIcon:
    """Return the icon for a section ordinal, falling back to the first icon."""

    return ICONS.get(ordinal or "", ICONS[DEFAULT_ICON_KEY])
