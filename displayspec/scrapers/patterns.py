"""
Text patterns shared by the GSMArena scrapers.

Each field is extracted by an ordered list of (pattern, formatter) pairs;
the first pattern that matches wins and the formatter turns the match into
the display string. Patterns are single-match (re.search), so the first
occurrence in the text is the one used.
"""

import re
from typing import Callable, List, Optional, Tuple

Strategy = Tuple[re.Pattern, Callable[[re.Match], str]]

PANEL_KEYWORDS = r'(?:AMOLED|OLED|LCD|IPS|TFT|LTPO)'

# Display size: "6.1 inches"
INCHES = re.compile(r'(\d+\.?\d*)\s*inches', re.I)

# Screen-to-body ratio: "(~86.4% screen-to-body ratio)"
RATIO = re.compile(r'(\d+\.?\d*)\s*%\s*(?:screen-to-body|ratio)', re.I)
RATIO_TILDE = re.compile(r'~(\d+\.?\d*)\s*%', re.I)
RATIO_LOOSE = re.compile(r'~?(\d{2,3}\.?\d*)\s*%\s*(?:screen|ratio|body)', re.I)

# Resolution: "1179 x 2556 pixels"
RESOLUTION = re.compile(r'(\d{3,4})\s*x\s*(\d{3,4})', re.I)
RESOLUTION_PIXELS = re.compile(r'(\d{3,4})\s*x\s*(\d{3,4})\s*pixels', re.I)

# Panel type: "Super AMOLED", "IPS LCD", "Dynamic LTPO AMOLED 2X"
PANEL = re.compile(r'(Super\s+)?([A-Z]+\s*)?' + PANEL_KEYWORDS, re.I)
PANEL_LOOSE = re.compile(r'(Dynamic\s+)?(Super\s+)?([A-Z]+\s*)?' + PANEL_KEYWORDS, re.I)

# Detail page link: "samsung_galaxy_s24_ultra-12771.php"
PHONE_PAGE = re.compile(r'^[a-z][a-z0-9_]+-\d+\.php$', re.I)
PHP_PAGE = re.compile(r'^[a-z0-9_-]+\.php$', re.I)

# Trailing numeric id on a slug: "apple_iphone_15-12559"
SLUG_ID_SUFFIX = re.compile(r'-\d+$')


def as_inches(match: re.Match) -> str:
    return f'{match.group(1)}"'


def as_percent(match: re.Match) -> str:
    return f'{match.group(1)}%'


def as_resolution(match: re.Match) -> str:
    return f'{match.group(1)} x {match.group(2)}'


def as_panel(match: re.Match) -> str:
    return match.group(0).strip().upper()


def first_match(strategies: List[Strategy], text: str) -> Optional[str]:
    """Run strategies in order and return the first formatted match."""
    if not text:
        return None
    for pattern, formatter in strategies:
        match = pattern.search(text)
        if match:
            return formatter(match)
    return None


def strip_page_suffix(href: str) -> str:
    """Turn a link target into a slug: drop any path prefix and the .php suffix."""
    slug = href.split('?')[0].rstrip('/').rsplit('/', 1)[-1]
    if slug.lower().endswith('.php'):
        slug = slug[:-4]
    return slug


def name_from_slug(slug: str) -> str:
    """Readable device name from a slug: 'apple_iphone_15-12559' -> 'apple iphone 15'."""
    name = SLUG_ID_SUFFIX.sub('', slug)
    return re.sub(r'[_\-]+', ' ', name).strip()
