import pytest
import requests

from displayspec import create_app


SEARCH_PAGE = """
<html><body>
<div class="general-menu"><a href="compare.php3">Compare</a></div>
<div class="makers">
<ul>
<li><a href="samsung_galaxy_s24-12773.php"><img src="https://fdn2.gsmarena.com/vv/bigpic/samsung-galaxy-s24.jpg" title="Samsung Galaxy S24"><strong><span>Samsung<br>Galaxy S24</span></strong></a></li>
<li><a href="samsung_galaxy_s24_ultra-12771.php"><img src="https://fdn2.gsmarena.com/vv/bigpic/samsung-galaxy-s24-ultra.jpg"><strong><span>Samsung<br>Galaxy S24 Ultra</span></strong></a></li>
<li><a href="samsung_galaxy_s24_fe-13262.php"><img src="https://fdn2.gsmarena.com/vv/bigpic/samsung-galaxy-s24-fe.jpg"><strong><span>Samsung<br>Galaxy S24 FE</span></strong></a></li>
</ul>
</div>
</body></html>
"""

PHONE_PAGE = """
<html><head><title>Samsung Galaxy S24 - Full phone specifications</title>
<script>var display = "4.0 inches";</script></head>
<body>
<h1 class="specs-phone-name-title" data-spec="modelname">Samsung Galaxy S24</h1>
<div id="specs-list">
<table cellspacing="0">
<tr><th rowspan="2" scope="row">Network</th><td class="ttl">Technology</td><td class="nfo">GSM / CDMA / HSPA / EVDO / LTE / 5G</td></tr>
</table>
<table cellspacing="0">
<tr><th rowspan="5" scope="row">Display</th>
<td class="ttl"><a href="glossary.php3?term=display-type">Type</a></td>
<td class="nfo" data-spec="displaytype">Dynamic AMOLED 2X, 120Hz, HDR10+, 2600 nits (peak)</td></tr>
<tr><td class="ttl"><a href="#">Size</a></td>
<td class="nfo" data-spec="displaysize">6.2 inches, 94.4 cm<sup>2</sup> (~90.7% screen-to-body ratio)</td></tr>
<tr><td class="ttl"><a href="#">Resolution</a></td>
<td class="nfo" data-spec="displayresolution">1080 x 2340 pixels, 19.5:9 ratio (~416 ppi density)</td></tr>
<tr><td class="ttl"><a href="#">Protection</a></td>
<td class="nfo" data-spec="displayprotection">Corning Gorilla Glass Victus 2</td></tr>
</table>
<table cellspacing="0">
<tr><th rowspan="3" scope="row">Platform</th><td class="ttl">Chipset</td><td class="nfo">Exynos 2400 (4 nm)</td></tr>
</table>
</div>
</body></html>
"""


class FakeResponse:
    def __init__(self, text: str = '', status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeFetch:
    """Page fetcher that serves canned HTML and records the URLs asked for."""

    def __init__(self, pages=None, error: Exception = None):
        self.pages = pages or {}
        self.error = error
        self.calls = []

    def __call__(self, url, headers=None, timeout=None):
        self.calls.append({'url': url, 'headers': headers, 'timeout': timeout})
        if self.error:
            raise self.error
        for fragment, html in self.pages.items():
            if fragment in url:
                return html
        return ''


@pytest.fixture
def search_page() -> str:
    return SEARCH_PAGE


@pytest.fixture
def phone_page() -> str:
    return PHONE_PAGE


@pytest.fixture
def app():
    app = create_app({
        'TESTING': True,
        'GSMARENA_BASE_URL': 'https://gsmarena.example',
        'LOOKUP_TIMEOUT': 5,
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_get(monkeypatch):
    """Patch requests.get with canned pages keyed by URL fragment."""
    calls = []
    pages = {}
    state = {'status_code': 200, 'error': None}

    def _get(url, headers=None, timeout=None, allow_redirects=True):
        calls.append(url)
        if state['error']:
            raise state['error']
        for fragment, html in pages.items():
            if fragment in url:
                return FakeResponse(html, state['status_code'])
        return FakeResponse('', state['status_code'])

    monkeypatch.setattr(requests, 'get', _get)
    _get.calls = calls
    _get.pages = pages
    _get.state = state
    return _get
