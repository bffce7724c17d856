import pytest
import requests

from displayspec import create_app
from displayspec.errors import InvalidInput, UpstreamUnavailable
from displayspec.models import NotchType, brand_of
from displayspec.scrapers import fetch as fetch_module
from displayspec.scrapers.fetch import fetch_text, get_headers
from displayspec.scrapers.lookup import (
    GSMARENA_BASE_URL, get_phone_url, get_search_url, lookup_options, lookup_phone, search_phones,
)

from conftest import FakeFetch, FakeResponse


def test_search_url_quotes_query() -> None:
    url = get_search_url('Galaxy S24+ Ultra', 'https://gsmarena.example/')

    assert url == 'https://gsmarena.example/results.php3?sQuickSearch=yes&sName=Galaxy%20S24%2B%20Ultra'


def test_phone_url() -> None:
    assert get_phone_url('apple_iphone_15-12559', 'https://gsmarena.example') == \
        'https://gsmarena.example/apple_iphone_15-12559.php'


def test_search_phones(search_page) -> None:
    fetch = FakeFetch({'results.php3': search_page})

    results = search_phones('  galaxy s24 ', fetch=fetch, base_url='https://gsmarena.example', timeout=5)

    assert [r.identifier for r in results] == [
        'samsung_galaxy_s24-12773',
        'samsung_galaxy_s24_ultra-12771',
        'samsung_galaxy_s24_fe-13262',
    ]
    assert len(fetch.calls) == 1
    assert fetch.calls[0]['url'].endswith('sName=galaxy%20s24')
    assert fetch.calls[0]['headers'] == get_headers()
    assert fetch.calls[0]['timeout'] == 5


def test_search_phones_no_results() -> None:
    fetch = FakeFetch({'results.php3': '<html><body>No results</body></html>'})

    assert search_phones('zzzz', fetch=fetch) == []


@pytest.mark.parametrize('query', ['', '   ', '\t\n', None])
def test_blank_query_rejected_before_fetch(query) -> None:
    fetch = FakeFetch()

    with pytest.raises(InvalidInput):
        search_phones(query, fetch=fetch)

    assert fetch.calls == []


def test_search_upstream_failure() -> None:
    fetch = FakeFetch(error=UpstreamUnavailable('GET failed: 503'))

    with pytest.raises(UpstreamUnavailable):
        search_phones('pixel', fetch=fetch)


def test_lookup_phone(phone_page) -> None:
    fetch = FakeFetch({'samsung_galaxy_s24-12773.php': phone_page})

    result = lookup_phone('samsung_galaxy_s24-12773', fetch=fetch, base_url='https://gsmarena.example')

    assert result.spec.name == 'Samsung Galaxy S24'
    assert result.spec.display_size == '6.2"'
    assert result.notch == NotchType.PUNCH_HOLE
    assert fetch.calls[0]['url'] == 'https://gsmarena.example/samsung_galaxy_s24-12773.php'


def test_lookup_phone_blank_identifier() -> None:
    fetch = FakeFetch()

    with pytest.raises(InvalidInput):
        lookup_phone('  ', fetch=fetch)

    assert fetch.calls == []


def test_lookup_upstream_failure() -> None:
    fetch = FakeFetch(error=UpstreamUnavailable('GET failed: 404'))

    with pytest.raises(UpstreamUnavailable):
        lookup_phone('apple_iphone_15-12559', fetch=fetch)


def test_candidate_brand_matches_detail_page(search_page, phone_page) -> None:
    fetch = FakeFetch({
        'results.php3': search_page,
        'samsung_galaxy_s24-12773.php': phone_page,
    })

    candidate = search_phones('galaxy s24', fetch=fetch)[0]
    result = lookup_phone(candidate.identifier, fetch=fetch)

    assert brand_of(result.spec.name) == candidate.brand


def test_fetch_text_returns_body(monkeypatch) -> None:
    calls = {}

    def _get(url, headers=None, timeout=None, allow_redirects=True):
        calls.update(url=url, headers=headers, timeout=timeout)
        return FakeResponse('<html>ok</html>')

    monkeypatch.setattr(fetch_module.requests, 'get', _get)

    assert fetch_text('https://gsmarena.example/x.php', timeout=7) == '<html>ok</html>'
    assert calls['headers']['User-Agent'].startswith('Mozilla/5.0')
    assert set(calls['headers']) == {'User-Agent', 'Accept', 'Accept-Language'}
    assert calls['timeout'] == 7


def test_fetch_text_http_error(monkeypatch) -> None:
    monkeypatch.setattr(fetch_module.requests, 'get', lambda *a, **kw: FakeResponse('', 503))

    with pytest.raises(UpstreamUnavailable) as exc:
        fetch_text('https://gsmarena.example/x.php')

    assert '503' in str(exc.value)


def test_fetch_text_transport_error(monkeypatch) -> None:
    def _get(*args, **kwargs):
        raise requests.ConnectionError('connection refused')

    monkeypatch.setattr(fetch_module.requests, 'get', _get)

    with pytest.raises(UpstreamUnavailable):
        fetch_text('https://gsmarena.example/x.php')


def test_app_config_matches_module_defaults() -> None:
    app = create_app()

    assert app.config['GSMARENA_BASE_URL'] == GSMARENA_BASE_URL
    assert app.config['LOOKUP_TIMEOUT'] == fetch_module.REQUEST_TIMEOUT


def test_lookup_options_from_config() -> None:
    config = {'GSMARENA_BASE_URL': 'https://gsmarena.example', 'LOOKUP_TIMEOUT': 5, 'SECRET_KEY': 'x'}

    assert lookup_options(config) == {'base_url': 'https://gsmarena.example', 'timeout': 5}


def test_lookup_options_feed_the_orchestrator() -> None:
    fetch = FakeFetch({'results.php3': '<html></html>'})
    options = lookup_options({'GSMARENA_BASE_URL': 'https://mirror.example', 'LOOKUP_TIMEOUT': 7})

    search_phones('pixel', fetch=fetch, **options)

    assert fetch.calls[0]['url'].startswith('https://mirror.example/results.php3')
    assert fetch.calls[0]['timeout'] == 7
