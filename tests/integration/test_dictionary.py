"""Integration tests for the dictionary client against a mocked HTTP transport."""

import httpx
import pytest

from wotd.core.errors import ApiFailureError, WordNotFoundError
from wotd.sources import build_lookup_url, fetch_entry, parse_entries


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestBuildLookupUrl:
    """Test endpoint templating."""

    def test_templates_word(self, config) -> None:
        """The word replaces the {word} placeholder."""
        assert build_lookup_url("lucid", config) == "https://dictionary.test/entries/lucid"

    def test_quotes_word(self, config) -> None:
        """Words are URL-quoted, slashes included."""
        assert build_lookup_url("a/b c", config) == "https://dictionary.test/entries/a%2Fb%20c"


class TestFetchEntry:
    """Test fetch_entry behavior."""

    def test_returns_first_entry(self, config, entry_payload) -> None:
        """The first array element is parsed; later ones are ignored."""
        second = dict(entry_payload, word="other")
        client = _client(lambda r: httpx.Response(200, json=[entry_payload, second]))
        assert fetch_entry("serendipity", config, client).word == "serendipity"

    def test_requests_templated_url(self, config, entry_payload) -> None:
        """The request goes to the templated endpoint."""
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json=[entry_payload])

        fetch_entry("serendipity", config, _client(handler))
        assert seen == ["https://dictionary.test/entries/serendipity"]

    def test_404_names_the_word(self, config) -> None:
        """A 404 raises WordNotFoundError mentioning the word."""
        client = _client(lambda r: httpx.Response(404, json={"title": "No Definitions Found"}))
        with pytest.raises(WordNotFoundError, match="zzzqx"):
            fetch_entry("zzzqx", config, client)

    def test_other_status_reports_code(self, config) -> None:
        """Other failures report the status code."""
        client = _client(lambda r: httpx.Response(500))
        with pytest.raises(ApiFailureError, match="API request failed with status: 500"):
            fetch_entry("lucid", config, client)

    def test_transport_error(self, config) -> None:
        """Connection problems surface as ApiFailureError without a status."""

        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(ApiFailureError) as exc_info:
            fetch_entry("lucid", config, _client(handler))
        assert exc_info.value.status_code is None

    def test_invalid_json_body(self, config) -> None:
        """A 200 with a non-JSON body is an API failure."""
        client = _client(lambda r: httpx.Response(200, text="<html>"))
        with pytest.raises(ApiFailureError):
            fetch_entry("lucid", config, client)


class TestParseEntries:
    """Test parse_entries behavior."""

    def test_empty_array(self) -> None:
        """An empty array has no entry to use."""
        with pytest.raises(ApiFailureError):
            parse_entries([])

    def test_not_an_array(self) -> None:
        """An object body is rejected."""
        with pytest.raises(ApiFailureError):
            parse_entries({"word": "lucid"})

    def test_malformed_entry(self) -> None:
        """Entries missing required fields are rejected."""
        with pytest.raises(ApiFailureError):
            parse_entries([{"meanings": []}])
