# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the URL utilities."""

from urllib.parse import urlparse

import pytest

from faviconfinder.utils import (
    compose_candidate_url,
    is_same_url,
    is_valid_url,
    join_candidate_url,
    root_domain_url,
)


class TestRootDomainUrl:
    """Test root_domain_url function."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://sub.example.com",
            "https://sub.example.com/",
            "https://sub.example.com/blog/page",
            "https://sub.sub2.example.com/a/b/c.html",
            "https://a.b.c.d.example.com/?q=1#top",
            "https://www.example.com/index.php",
        ],
    )
    def test_strips_subdomains_and_path(self, url):
        """Test that subdomains are removed and the path is empty."""
        result = root_domain_url(url)

        assert result is not None
        parsed = urlparse(result)
        assert parsed.hostname == "example.com"
        assert parsed.path == ""
        assert parsed.query == ""
        assert parsed.fragment == ""

    def test_bare_domain_keeps_host(self):
        """Test that a URL already at the registrable domain keeps its host."""
        assert root_domain_url("https://example.com/about") == "https://example.com"

    def test_multi_label_suffix(self):
        """Test domains under suffixes such as co.uk."""
        assert root_domain_url("https://blog.example.co.uk/x") == "https://example.co.uk"

    def test_keeps_scheme_and_port(self):
        """Test that scheme and port survive."""
        assert root_domain_url("http://a.example.com:8080/x?y=1#z") == "http://example.com:8080"

    def test_lowercases_host(self):
        """Test that the host is normalized to lower case."""
        assert root_domain_url("https://WWW.Example.COM/") == "https://example.com"

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "not a url",
            "/favicon.ico",
            "http://localhost:8000/page",
            "http://127.0.0.1/",
            "http://[::1]/",
            "ftp://files.example.com/",
            "http://example.com:notaport/",
            "http://[::1",
        ],
        ids=[
            "empty",
            "no_scheme",
            "relative",
            "single_label",
            "ipv4",
            "ipv6",
            "unsupported_scheme",
            "bad_port",
            "bad_ipv6",
        ],
    )
    def test_no_root_domain(self, url):
        """Test URLs without an identifiable registrable domain."""
        assert root_domain_url(url) is None


class TestComposeCandidateUrl:
    """Test compose_candidate_url function."""

    def test_resolves_against_site_root(self):
        """Test that the page path is ignored."""
        result = compose_candidate_url("https://sub.example.com/blog/page", "favicon.ico")
        assert result == "https://sub.example.com/favicon.ico"

    def test_relative_directory_path(self):
        """Test a candidate path with directories."""
        result = compose_candidate_url("https://example.com/a/b/c", "icons/site.ico")
        assert result == "https://example.com/icons/site.ico"

    def test_absolute_path(self):
        """Test a candidate path starting with a slash."""
        result = compose_candidate_url("https://example.com/a/b/", "/static/icon.ico")
        assert result == "https://example.com/static/icon.ico"

    def test_keeps_port_drops_query(self):
        """Test that port is kept and query and fragment are dropped."""
        result = compose_candidate_url("https://example.com:8443/page?q=1#top", "favicon.ico")
        assert result == "https://example.com:8443/favicon.ico"

    def test_absolute_candidate_url(self):
        """Test that an absolute candidate URL is used as is."""
        result = compose_candidate_url("https://example.com/", "https://cdn.example.net/f.ico")
        assert result == "https://cdn.example.net/f.ico"

    @pytest.mark.parametrize(
        ["site_url", "candidate_path"],
        [
            ("https://example.com/", "javascript:alert(1)"),
            ("https://example.com/", "data:image/x-icon;base64,AAAA"),
            ("not a url", "favicon.ico"),
            ("ftp://example.com/", "favicon.ico"),
            ("http://[::1", "favicon.ico"),
        ],
    )
    def test_malformed_composition(self, site_url, candidate_path):
        """Test that malformed compositions return None."""
        assert compose_candidate_url(site_url, candidate_path) is None


class TestJoinCandidateUrl:
    """Test join_candidate_url function."""

    def test_join_onto_root(self):
        """Test joining a file name onto a bare domain URL."""
        assert join_candidate_url("https://example.com", "favicon.ico") == (
            "https://example.com/favicon.ico"
        )

    def test_join_with_port(self):
        """Test joining onto a base with a port."""
        assert join_candidate_url("http://example.com:8080", "a/b.ico") == (
            "http://example.com:8080/a/b.ico"
        )

    def test_join_invalid(self):
        """Test that an invalid result is rejected."""
        assert join_candidate_url("https://example.com", "mailto:me@example.com") is None


class TestIsValidUrl:
    """Test is_valid_url function."""

    @pytest.mark.parametrize(
        ["url", "expected"],
        [
            ("https://example.com/favicon.ico", True),
            ("http://example.com", True),
            ("ftp://example.com/favicon.ico", False),
            ("/favicon.ico", False),
            ("", False),
            ("http://[::1", False),
        ],
    )
    def test_is_valid_url(self, url, expected):
        """Test URL validation."""
        assert is_valid_url(url) is expected


class TestIsSameUrl:
    """Test is_same_url function."""

    @pytest.mark.parametrize(
        ["first", "second"],
        [
            ("https://example.com/favicon.ico", "https://example.com/favicon.ico"),
            ("https://Example.COM/favicon.ico", "https://example.com/favicon.ico"),
            ("HTTPS://example.com:8080/favicon.ico", "https://example.com:8080/favicon.ico"),
        ],
        ids=["identical", "host_case", "scheme_case_with_port"],
    )
    def test_same(self, first, second):
        """Test URLs that name the same resource."""
        assert is_same_url(first, second) is True

    @pytest.mark.parametrize(
        ["first", "second"],
        [
            ("https://blog.example.com/favicon.ico", "https://example.com/favicon.ico"),
            ("http://example.com/favicon.ico", "https://example.com/favicon.ico"),
            ("https://example.com:8080/favicon.ico", "https://example.com/favicon.ico"),
            ("https://example.com/Favicon.ico", "https://example.com/favicon.ico"),
        ],
        ids=["subdomain", "scheme", "port", "path_case"],
    )
    def test_different(self, first, second):
        """Test URLs that name different resources."""
        assert is_same_url(first, second) is False
