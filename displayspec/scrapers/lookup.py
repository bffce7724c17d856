"""
Phone Display Lookup - on-demand GSMArena scraping.

Two steps, one page fetch each:
1. search_phones: quick search page -> list of candidate phones
2. lookup_phone: a candidate's detail page -> display specs + notch type

Nothing is cached; every call goes to GSMArena.
"""

import os
from typing import Callable, List

import requests

from displayspec.errors import InvalidInput, UpstreamUnavailable
from displayspec.models import PhoneLookup, SearchCandidate
from displayspec.notch import classify
from displayspec.scrapers.fetch import fetch_text, get_headers, REQUEST_TIMEOUT
from displayspec.scrapers.search import extract_candidates
from displayspec.scrapers.specs import extract_spec

GSMARENA_BASE_URL = os.environ.get('GSMARENA_BASE_URL', 'https://www.gsmarena.com')

Fetcher = Callable[..., str]


def lookup_options(config) -> dict:
    """Orchestrator keyword arguments from an app config mapping."""
    return {
        'base_url': config.get('GSMARENA_BASE_URL'),
        'timeout': config.get('LOOKUP_TIMEOUT'),
    }


def get_search_url(query: str, base_url: str = None) -> str:
    base_url = (base_url or GSMARENA_BASE_URL).rstrip('/')
    return f"{base_url}/results.php3?sQuickSearch=yes&sName={requests.utils.quote(query)}"


def get_phone_url(identifier: str, base_url: str = None) -> str:
    base_url = (base_url or GSMARENA_BASE_URL).rstrip('/')
    return f"{base_url}/{requests.utils.quote(identifier, safe='')}.php"


def search_phones(query: str, fetch: Fetcher = fetch_text, base_url: str = None,
                  timeout: int = None) -> List[SearchCandidate]:
    """
    Search GSMArena for phones matching a free-text query.

    Args:
        query: Phone name to search for (e.g., "iPhone 15 Pro", "Galaxy S24")
        fetch: Page fetcher, fetch(url, headers=..., timeout=...) -> html
        base_url: GSMArena root, defaults to GSMARENA_BASE_URL
        timeout: Request timeout in seconds

    Returns:
        Candidates in page order (at most 20). An empty list means no phones
        were found, which is not an error.

    Raises:
        InvalidInput: query is missing or blank
        UpstreamUnavailable: the search page could not be fetched
    """
    query = (query or '').strip()
    if not query:
        raise InvalidInput('No search query provided')

    url = get_search_url(query, base_url)
    print(f"[Lookup] Searching GSMArena for '{query}': {url}")

    try:
        html = fetch(url, headers=get_headers(), timeout=timeout or REQUEST_TIMEOUT)
    except UpstreamUnavailable as e:
        print(f"[Lookup] Search error: {e}")
        raise

    results = extract_candidates(html)
    if not results:
        print(f"[Lookup] No phones found for '{query}'")
    return results


def lookup_phone(identifier: str, fetch: Fetcher = fetch_text, base_url: str = None,
                 timeout: int = None) -> PhoneLookup:
    """
    Fetch a phone's detail page, parse its display specs and detect its notch.

    Args:
        identifier: Slug from a search candidate (e.g., "apple_iphone_15_pro-12557")

    Raises:
        InvalidInput: identifier is missing or blank
        UpstreamUnavailable: the detail page could not be fetched
    """
    identifier = (identifier or '').strip()
    if not identifier:
        raise InvalidInput('No phone slug provided')

    url = get_phone_url(identifier, base_url)
    print(f"[Lookup] Fetching phone page: {url}")

    try:
        html = fetch(url, headers=get_headers(), timeout=timeout or REQUEST_TIMEOUT)
    except UpstreamUnavailable as e:
        print(f"[Lookup] Phone details error: {e}")
        raise

    spec = extract_spec(html, identifier)
    notch = classify(spec.name)
    print(f"[Lookup] {spec.name}: notch detected as {notch.value}")
    return PhoneLookup(spec=spec, notch=notch)
