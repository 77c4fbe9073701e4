"""Tests for HostnameSet and NullHostnameSet."""
from __future__ import annotations

import logging

import pytest

from hostguard.errors import InvalidPatternSyntax, InvalidValueType
from hostguard.hosts.hostname_set import HostnameSet, NullHostnameSet


class TestHostnameSet:
    """Membership-only matching."""

    def test_match_returns_pattern(self):
        s = HostnameSet(["*.ads.example", "Tracker.example:443", "ads.example"])
        assert s.match("x.ads.example") == "*.ads.example"
        assert s.match("ads.example") == "ads.example"
        assert s.match("tracker.example:443") == "tracker.example:443"
        assert s.match("tracker.example") is None
        assert s.match("example.org") is None

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPatternSyntax):
            HostnameSet(["ok.example", "not ok"])

    def test_len_iter_contains(self):
        s = HostnameSet(["A.example", "a.example", "*.b.example"])
        assert len(s) == 2
        assert sorted(s) == ["*.b.example", "a.example"]
        assert "A.EXAMPLE" in s
        assert "c.example" not in s

    def test_case_collision_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="hostguard.hosts.hostname_set"):
            s = HostnameSet(["Ads.example", "ads.EXAMPLE"])
        assert list(s) == ["ads.example"]
        assert "collides" in caplog.text

    def test_repeated_pattern_is_not_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="hostguard.hosts.hostname_set"):
            HostnameSet(["ads.example", "ads.example"])
        assert caplog.text == ""

    def test_equivalent_spelling(self):
        s = HostnameSet(["*.b.example", "*b.example"])
        assert list(s) == ["*b.example"]

    def test_empty(self):
        assert HostnameSet().match("anything") is None


class TestNullHostnameSet:
    """JSON list form."""

    def test_null(self):
        n = NullHostnameSet.from_json("null")
        assert not n.valid
        assert n.match("a.example") is None
        assert n.to_json() == "null"

    def test_list(self):
        n = NullHostnameSet.from_json('["*.Example.com", "b.org"]')
        assert n.valid
        assert n.match("a.example.com") == "*.example.com"
        assert n.to_json() == '["*.example.com","b.org"]'

    def test_not_a_list(self):
        with pytest.raises(InvalidValueType) as exc_info:
            NullHostnameSet.from_json('{"a.com": "1.1.1.1"}')
        assert exc_info.value.key is None

    def test_non_string_item(self):
        with pytest.raises(InvalidValueType) as exc_info:
            NullHostnameSet.from_json('["a.com", 5]')
        assert exc_info.value.key == "[1]"

    def test_roundtrip(self):
        n = NullHostnameSet(HostnameSet(["b.org", "*.a.com"]))
        assert NullHostnameSet.from_json(n.to_json()).patterns == n.patterns

    def test_hashable(self):
        n = NullHostnameSet.from_json('["b.org", "*.a.com"]')
        again = NullHostnameSet.from_json('["*.A.com", "b.org"]')
        assert hash(n) == hash(again)
        assert len({n, again, NullHostnameSet()}) == 2
