"""Extraction and parsing of ``[[WikiLinks]]`` in markdown text."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

WIKILINK = "wikilink"
EMBED = "embed"

# Matches [[Target]], [[Target|Alias]], ![[Embed]] and friends.
_WIKILINK_RE = re.compile(r"(!?)\[\[(.+?)\]\]")

# Splits link content into target, #section and |alias.
_LINK_PARTS_RE = re.compile(r"([^#|]*)(#[^|]+)?(\|(.+))?")


@dataclass(frozen=True)
class WikiLink:
    """A single link found in markdown content."""

    raw: str = ""
    target: str = ""
    display_text: str = ""
    section: str = ""
    link_type: str = ""
    position: int = 0


def extract_wiki_links(content: str) -> list[WikiLink]:
    """Return every wiki link in ``content`` in order of appearance."""
    return [
        parse_wiki_link(match.group(0), match.group(2), bool(match.group(1)), match.start())
        for match in _WIKILINK_RE.finditer(content)
    ]


def parse_wiki_link(raw: str, inner_content: str, is_embed: bool, position: int) -> WikiLink:
    """Build a :class:`WikiLink` from the text between the brackets."""
    link_type = EMBED if is_embed else WIKILINK

    if inner_content in ("", "|"):
        return WikiLink(raw=raw, link_type=link_type, position=position)

    inner = inner_content.strip()

    if inner.startswith("#"):
        return WikiLink(
            raw=raw,
            target="",
            display_text=inner,
            section=inner[1:],
            link_type=link_type,
            position=position,
        )

    section = ""
    display_text = ""
    parts = _LINK_PARTS_RE.fullmatch(inner)
    if parts is not None:
        target = parts.group(1).strip()
        if parts.group(2):
            section = parts.group(2)[1:]
        if parts.group(4):
            display_text = parts.group(4).strip()
    else:
        target = inner

    if not display_text:
        display_text = f"{target}#{section}" if section else target

    return WikiLink(
        raw=raw,
        target=target,
        display_text=display_text,
        section=section,
        link_type=link_type,
        position=position,
    )


def get_unique_targets(links: Iterable[WikiLink]) -> list[str]:
    """Return the distinct link targets, in order of first appearance."""
    return list(dict.fromkeys(link.target for link in links))


def filter_by_type(links: Iterable[WikiLink], link_type: str) -> list[WikiLink]:
    """Return only the links of the given type."""
    return [link for link in links if link.link_type == link_type]


def normalize_target(target: str) -> str:
    """Trim whitespace and lower-case a link target."""
    return target.strip().lower()