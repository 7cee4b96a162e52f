"""Tests for CORS origin resolution and headers."""

from __future__ import annotations

from contact_relay.core.config import Settings
from contact_relay.core.cors import build_cors_headers, resolve_allowed_origin


def _allowed(value: str) -> list[str]:
    return Settings(_env_file=None, allowed_origins=value).allowed_origin_list


class TestResolveAllowedOrigin:
    def test_listed_origin_is_echoed(self) -> None:
        assert resolve_allowed_origin("https://b.com", _allowed("https://a.com,https://b.com")) == "https://b.com"

    def test_unlisted_origin_is_dropped(self) -> None:
        assert resolve_allowed_origin("https://c.com", _allowed("https://a.com,https://b.com")) is None

    def test_wildcard_echoes_any_origin(self) -> None:
        assert resolve_allowed_origin("https://anything.example", _allowed("*")) == "https://anything.example"

    def test_entries_are_trimmed(self) -> None:
        assert resolve_allowed_origin("https://b.com", _allowed(" https://a.com , https://b.com ")) == "https://b.com"

    def test_match_is_exact(self) -> None:
        assert resolve_allowed_origin("https://a.com/", _allowed("https://a.com")) is None
        assert resolve_allowed_origin("http://a.com", _allowed("https://a.com")) is None

    def test_missing_origin_or_list(self) -> None:
        assert resolve_allowed_origin(None, _allowed("*")) is None
        assert resolve_allowed_origin("https://a.com", _allowed("")) is None


class TestBuildCorsHeaders:
    def test_with_origin(self) -> None:
        headers = build_cors_headers("https://a.com")

        assert headers["Access-Control-Allow-Origin"] == "https://a.com"
        assert headers["Vary"] == "Origin"
        assert headers["Access-Control-Allow-Methods"] == "POST, OPTIONS"
        assert headers["Access-Control-Allow-Headers"] == "Content-Type"

    def test_without_origin(self) -> None:
        headers = build_cors_headers(None)

        assert "Access-Control-Allow-Origin" not in headers
        assert "Vary" not in headers
        assert headers["Access-Control-Allow-Methods"] == "POST, OPTIONS"
