"""
GSMArena phone detail page parsing.

Display fields are read from the "Display" spec table first and, for
anything still missing, from the whole page with looser patterns. A field
nothing matches is reported as NOT_AVAILABLE rather than failing the page.
"""

import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

from displayspec.models import NOT_AVAILABLE, DisplaySpec, brand_of
from displayspec.scrapers.patterns import (
    INCHES, RATIO, RATIO_TILDE, RATIO_LOOSE, RESOLUTION, RESOLUTION_PIXELS,
    PANEL, PANEL_LOOSE, as_inches, as_percent, as_resolution, as_panel,
    first_match, name_from_slug,
)

DISPLAY_HEADING = re.compile(r'^\s*Display\s*$', re.I)

# Joins text nodes so that a pattern never runs across two cells or tags
TEXT_SEPARATOR = ' | '

# Patterns tried inside the Display table
SCOPED_FIELDS = {
    'display_size': [(INCHES, as_inches)],
    'screen_to_body': [(RATIO, as_percent), (RATIO_TILDE, as_percent)],
    'resolution': [(RESOLUTION, as_resolution)],
    'display_type': [(PANEL, as_panel)],
}

# Patterns tried against the full page
GLOBAL_FIELDS = {
    'display_size': [(INCHES, as_inches)],
    'screen_to_body': [(RATIO_LOOSE, as_percent)],
    'resolution': [(RESOLUTION_PIXELS, as_resolution)],
    'display_type': [(PANEL_LOOSE, as_panel)],
}


def find_phone_name(soup: BeautifulSoup) -> Optional[str]:
    title = soup.select_one('h1.specs-phone-name-title') or soup.find('h1')
    if title:
        name = ' '.join(title.get_text(' ', strip=True).split())
        if name:
            return name
    return None


def find_display_table(soup: BeautifulSoup) -> Optional[Tag]:
    """The spec table of the Display section, if the page has one."""
    # GSMArena puts the section name in the table's first <th>
    header = soup.find('th', string=DISPLAY_HEADING)
    if header:
        table = header.find_parent('table')
        if table:
            return table

    heading = soup.find(string=DISPLAY_HEADING)
    if not heading:
        return None
    return heading.find_parent('table') or heading.find_next('table')


def extract_spec(html: str, fallback_identifier: str) -> DisplaySpec:
    """
    Parse a phone detail page into a DisplaySpec.

    Args:
        html: Detail page HTML (may be empty or malformed)
        fallback_identifier: Slug the page was fetched by, used for the name
            when the page has no heading

    Returns:
        DisplaySpec with every field either extracted or NOT_AVAILABLE
    """
    soup = BeautifulSoup(html or '', 'lxml')
    for tag in soup(['script', 'style']):
        tag.decompose()

    name = find_phone_name(soup)
    if not name:
        name = name_from_slug(fallback_identifier or '') or NOT_AVAILABLE
        print(f"[Specs] No title found, using name from slug: {name}")

    table = find_display_table(soup)
    scoped_text = table.get_text(TEXT_SEPARATOR, strip=True) if table else ''
    if not table:
        print("[Specs] No Display table found, searching whole page")
    page_text = soup.get_text(TEXT_SEPARATOR, strip=True)

    fields = {}
    for field, strategies in SCOPED_FIELDS.items():
        value = first_match(strategies, scoped_text)
        if value is None:
            value = first_match(GLOBAL_FIELDS[field], page_text)
        fields[field] = value or NOT_AVAILABLE

    spec = DisplaySpec(name=name, brand=brand_of(name) or NOT_AVAILABLE, **fields)

    missing = spec.missing_fields()
    if missing:
        print(f"[Specs] {name}: no match for {', '.join(missing)}")
    print(f"[Specs] Parsed: {spec.name} {spec.display_size} {spec.screen_to_body} {spec.resolution} {spec.display_type}")
    return spec
