"""
Tests for utils/http.py — URL detection and JSON fetching.

requests.get is replaced with a fake so no network is touched.
"""
import pytest
import requests

import utils.http as http_mod
from utils.http import USER_AGENT, fetch_json, is_url


class _FakeResponse:
    def __init__(self, payload, status=200):
        self._payload = payload
        self.status_code = status
        self.content = b"[]"

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self._payload


class _FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return self.response


class TestIsUrl:
    @pytest.mark.parametrize("source", [
        "http://example.org/data.json",
        "https://example.org/data.json",
        "HTTPS://EXAMPLE.ORG/x",
    ])
    def test_urls(self, source):
        assert is_url(source)

    @pytest.mark.parametrize("source", [
        "data/graveyard.json",
        "/abs/graveyard.json",
        "ftp://example.org/data.json",
        "",
    ])
    def test_paths(self, source):
        assert not is_url(source)


class TestFetchJson:
    def test_module_level_get(self, monkeypatch):
        seen = {}

        def fake_get(url, **kwargs):
            seen["url"] = url
            seen.update(kwargs)
            return _FakeResponse([{"name": "Zano"}])

        monkeypatch.setattr(http_mod.requests, "get", fake_get)
        assert fetch_json("https://example.org/g.json", timeout=4) == [{"name": "Zano"}]
        assert seen["url"] == "https://example.org/g.json"
        assert seen["timeout"] == 4
        assert seen["headers"]["User-Agent"] == USER_AGENT

    def test_uses_session(self):
        session = _FakeSession(_FakeResponse({"ok": True}))
        assert fetch_json("https://example.org/x", session=session) == {"ok": True}
        assert session.calls[0][1]["timeout"] == 10.0

    def test_http_error_propagates(self):
        session = _FakeSession(_FakeResponse(None, status=404))
        with pytest.raises(requests.HTTPError):
            fetch_json("https://example.org/missing", session=session)
