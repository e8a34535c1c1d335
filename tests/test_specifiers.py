"""Tests for specifier classification and URI parsing."""

import pytest

from esm_loader.specifiers import ModuleURI
from esm_loader.specifiers import SpecifierKind
from esm_loader.specifiers import classify
from esm_loader.specifiers import is_relative_path
from esm_loader.specifiers import parse_scheme
from esm_loader.specifiers import parse_uri


class TestClassify:
    @pytest.mark.parametrize("specifier", ["./util", "../lib/x.js", "./", "../"])
    def test_relative(self, specifier):
        assert classify(specifier) is SpecifierKind.RELATIVE

    @pytest.mark.parametrize("specifier", ["file:///app/main.js", "resource:///core/x.js", "x://thing"])
    def test_uri(self, specifier):
        assert classify(specifier) is SpecifierKind.URI

    @pytest.mark.parametrize("specifier", ["widgets", "gi", "some/path", ".hidden", "/abs/path.js", "1abc:def", ""])
    def test_bare(self, specifier):
        assert classify(specifier) is SpecifierKind.BARE

    def test_relative_wins_over_scheme_lookalike(self):
        """A relative path containing a colon is still relative."""
        assert classify("./a:b") is SpecifierKind.RELATIVE


class TestParseScheme:
    def test_lowercases_scheme(self):
        assert parse_scheme("FILE:///x.js") == "file"

    def test_scheme_with_symbols(self):
        assert parse_scheme("git+https://example.com") == "git+https"

    def test_no_scheme(self):
        assert parse_scheme("widgets") is None
        assert parse_scheme(":nothing") is None


class TestParseURI:
    def test_parse(self):
        uri = parse_uri("file:///app/main.js")
        assert uri is not None
        assert uri.raw == "file:///app/main.js"
        assert uri.scheme == "file"

    def test_unparseable(self):
        assert parse_uri("widgets") is None
        assert parse_uri("") is None
        assert parse_uri(None) is None

    def test_equality_by_raw_string(self):
        assert parse_uri("file:///a.js") == ModuleURI(raw="file:///a.js", scheme="other")
        assert parse_uri("file:///a.js") != parse_uri("file:///./a.js")

    def test_immutable(self):
        uri = parse_uri("file:///a.js")
        with pytest.raises(AttributeError):
            uri.raw = "file:///b.js"


def test_is_relative_path():
    assert is_relative_path("./x")
    assert is_relative_path("../x")
    assert not is_relative_path(".x")
    assert not is_relative_path("x/./y")
