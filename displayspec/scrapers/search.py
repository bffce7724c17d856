"""
GSMArena search results parsing.

The quick search page lists matches inside <div class="makers"><ul>...</ul>,
one <li><a href="slug.php"><img><strong><span>Maker<br>Model</span></strong></a>
per phone. Markup drifts, so three strategies are tried in order, from the
strict results-list layout down to any link that looks like a phone page.
"""

from typing import List, Optional

from bs4 import BeautifulSoup

from displayspec.models import MAX_RESULTS, SearchCandidate, brand_of
from displayspec.scrapers.patterns import PHONE_PAGE, PHP_PAGE, strip_page_suffix


def _clean_text(text: str) -> str:
    return ' '.join(text.split())


def _make_candidate(href: str, label: str) -> Optional[SearchCandidate]:
    name = _clean_text(label)
    identifier = strip_page_suffix(href)
    if not name or not identifier:
        return None
    return SearchCandidate(name=name, brand=brand_of(name), identifier=identifier)


def parse_results_list(soup: BeautifulSoup) -> List[SearchCandidate]:
    """Strategy 1: entries of the results list container."""
    results = []
    makers = soup.select_one('div.makers')
    listing = makers.find('ul') if makers else None
    if not listing:
        return results

    for item in listing.find_all('li'):
        link = item.find('a', href=True)
        label = link.find('span') if link else None
        if not label:
            continue
        # "Samsung<br>Galaxy S24" reads as "Samsung Galaxy S24"
        candidate = _make_candidate(link['href'], label.get_text(' ', strip=True))
        if candidate:
            results.append(candidate)
        if len(results) >= MAX_RESULTS:
            break

    return results


def parse_labelled_links(soup: BeautifulSoup) -> List[SearchCandidate]:
    """Strategy 2: any page link carrying a <strong><span> label."""
    results = []
    for link in soup.find_all('a', href=PHP_PAGE):
        label = link.select_one('strong span')
        if not label:
            continue
        candidate = _make_candidate(link['href'], label.get_text(' ', strip=True))
        if candidate:
            results.append(candidate)
        if len(results) >= MAX_RESULTS:
            break

    return results


def parse_phone_links(soup: BeautifulSoup) -> List[SearchCandidate]:
    """Strategy 3: any link shaped like a phone page, minus obvious non-phones."""
    results = []
    for link in soup.find_all('a', href=PHONE_PAGE):
        name = _clean_text(link.get_text(' ', strip=True))
        if len(name) <= 2 or 'Compare' in name or 'Pictures' in name:
            continue
        candidate = _make_candidate(link['href'], name)
        if candidate:
            results.append(candidate)
        if len(results) >= MAX_RESULTS:
            break

    return results


STRATEGIES = [
    ('results list', parse_results_list),
    ('labelled links', parse_labelled_links),
    ('phone links', parse_phone_links),
]


def extract_candidates(html: str) -> List[SearchCandidate]:
    """
    Parse GSMArena search results HTML into phone candidates.

    Returns at most MAX_RESULTS candidates in document order, or an empty
    list when no strategy finds anything.
    """
    if not html:
        return []

    soup = BeautifulSoup(html, 'lxml')

    for label, strategy in STRATEGIES:
        results = strategy(soup)
        if results:
            print(f"[Search] Found {len(results)} phones via {label}")
            return results[:MAX_RESULTS]
        print(f"[Search] No phones via {label}")

    return []
