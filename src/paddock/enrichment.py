"""Scrape supplementary driver and team details from encyclopedia articles."""

from __future__ import annotations

import logging
import re
from typing import Protocol
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from paddock.config import DEFAULT_ARTICLE_BASE_URL
from paddock.constants import NOT_AVAILABLE
from paddock.models.enrichment import CareerHighlights, Enrichment
from paddock.parsing import parse_html

logger = logging.getLogger(__name__)

TEAM_HISTORY_HEADING = "Formula One career"

_ARTICLE_PATH_RE = re.compile(r"wiki/(.+)")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?\d+(?:\.\d+)?)")

# Plausible pixel bounds (exclusive) for a logo inside an info table
_LOGO_WIDTH = (50, 300)
_LOGO_HEIGHT = (30, 200)


class ArticleFetcher(Protocol):
    async def fetch_article(self, path_segment: str) -> str: ...


def article_path(url: str | None) -> str | None:
    """Return the path segment after ``wiki/`` in an article URL."""
    if not url:
        return None
    match = _ARTICLE_PATH_RE.search(url)
    return match.group(1) if match else None


def parse_int(text: str) -> int:
    """Parse the leading integer of ``text``; 0 when there is none."""
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else 0


def parse_float(text: str) -> float:
    """Parse the leading number of ``text`` (thousands separators allowed); 0 when none."""
    match = _LEADING_FLOAT_RE.match(text.replace(",", ""))
    return float(match.group(1)) if match else 0


def _clean(text: str) -> str:
    return " ".join(text.split())


def infobox_field(soup: BeautifulSoup, label: str) -> str:
    """Return the data cell next to the first info-table header containing ``label``."""
    for infobox in soup.select(".infobox"):
        for header in infobox.find_all("th"):
            if label not in header.get_text():
                continue
            row = header.find_parent("tr")
            cell = row.find("td") if row is not None else None
            if isinstance(cell, Tag):
                value = _clean(cell.get_text())
                if value:
                    return value
    return NOT_AVAILABLE


def _is_section_heading(tag: Tag) -> bool:
    if tag.name == "h2":
        return True
    return tag.name == "div" and "mw-heading2" in (tag.get("class") or [])


def extract_team_history(soup: BeautifulSoup) -> list[str]:
    """Return the team-affiliation lines listed in the F1 career section.

    Only list items mentioning ``"with"`` are kept; the first list in the
    section is used.
    """
    container = soup.select_one(".mw-parser-output") or soup
    for heading in container.find_all("h2"):
        if TEAM_HISTORY_HEADING not in heading.get_text():
            continue
        anchor = heading
        parent = heading.parent
        if isinstance(parent, Tag) and "mw-heading" in (parent.get("class") or []):
            anchor = parent
        for sibling in anchor.find_next_siblings():
            if _is_section_heading(sibling):
                break
            section_list = sibling if sibling.name == "ul" else sibling.find("ul")
            if isinstance(section_list, Tag):
                items = (_clean(li.get_text()) for li in section_list.find_all("li"))
                return [item for item in items if "with" in item]
        break
    return []


def extract_enrichment(html: str, season: int) -> Enrichment:
    """Build an :class:`Enrichment` from a driver article."""
    soup = parse_html(html)

    def field(label: str) -> str:
        return infobox_field(soup, label)

    current_team = field(f"{season} team").split("[")[0].strip() or NOT_AVAILABLE
    return Enrichment(
        height=field("Height"),
        weight=field("Weight"),
        team_history=extract_team_history(soup),
        current_team=current_team,
        career=CareerHighlights(
            championships=parse_int(field("Championships")),
            entries=parse_int(field("Entries")),
            wins=parse_int(field("Wins")),
            podiums=parse_int(field("Podiums")),
            career_points=parse_float(field("Career points")),
            pole_positions=parse_int(field("Pole positions")),
            fastest_laps=parse_int(field("Fastest laps")),
            first_entry=field("First entry"),
            last_entry=field("Last entry"),
            first_win=field("First win"),
            last_win=field("Last win"),
            last_position=field(f"{season} position"),
        ),
    )


async def fetch_enrichment(url: str, articles: ArticleFetcher, season: int) -> Enrichment:
    """Fetch and scrape the article at ``url``.

    Any failure yields :meth:`Enrichment.default` instead of an exception.
    """
    path = article_path(url)
    if path is None:
        logger.warning("No article path in %r, using default enrichment", url)
        return Enrichment.default()
    try:
        html = await articles.fetch_article(path)
        return extract_enrichment(html, season)
    except Exception as exc:
        logger.warning("Error fetching additional details for %s: %s", path, exc)
        return Enrichment.default()


def _absolute(src: str, base_url: str) -> str:
    if src.startswith("//"):
        return f"https:{src}"
    return urljoin(base_url, src)


def _pixels(value: object) -> int | None:
    if value is None:
        return None
    match = _LEADING_INT_RE.match(str(value))
    return int(match.group(1)) if match else None


def extract_team_logo(html: str, base_url: str = DEFAULT_ARTICLE_BASE_URL) -> str | None:
    """Find the most likely team logo in a constructor article.

    Prefers an image marked as a logo by alt text or class, then falls back to
    an info-table image within logo-sized bounds.
    """
    soup = parse_html(html)
    for image in soup.select('img[alt*="logo" i], img.logo, .logo img'):
        src = image.get("src")
        if src:
            return _absolute(str(src), base_url)

    for image in soup.select(".infobox img"):
        width = _pixels(image.get("width"))
        height = _pixels(image.get("height"))
        if width is None or height is None:
            continue
        if (
            _LOGO_WIDTH[0] < width < _LOGO_WIDTH[1]
            and _LOGO_HEIGHT[0] < height < _LOGO_HEIGHT[1]
            and image.get("src")
        ):
            return _absolute(str(image["src"]), base_url)
    return None


async def fetch_team_logo(
    url: str, articles: ArticleFetcher, base_url: str = DEFAULT_ARTICLE_BASE_URL,
) -> str | None:
    """Fetch a constructor article and return its logo URL, or None."""
    path = article_path(url)
    if path is None:
        return None
    try:
        html = await articles.fetch_article(path)
    except Exception as exc:
        logger.warning("Error fetching team logo for %s: %s", path, exc)
        return None
    return extract_team_logo(html, base_url)
