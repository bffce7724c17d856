import os

import requests

from displayspec.errors import UpstreamUnavailable

# Seconds to wait on GSMArena before giving up
REQUEST_TIMEOUT = int(os.environ.get('LOOKUP_TIMEOUT', '30'))


def get_headers() -> dict:
    """Get request headers."""
    return {
        'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
        'Accept-Language': 'en-US,en;q=0.5',
    }


def fetch_text(url: str, headers: dict = None, timeout: int = None) -> str:
    """
    Fetch a page and return its body text.

    Raises:
        UpstreamUnavailable: on connection errors, timeouts or a non-2xx status
    """
    try:
        response = requests.get(
            url,
            headers=headers or get_headers(),
            timeout=timeout or REQUEST_TIMEOUT,
            allow_redirects=True,
        )
        response.raise_for_status()
    except requests.RequestException as e:
        raise UpstreamUnavailable(f"GET {url} failed: {e}") from e

    return response.text
