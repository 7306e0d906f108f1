"""Tests for URL location splitting."""

import unittest

from url_regex.core.urls import ensure_scheme, split_location, strip_origin
from url_regex.exceptions import UrlParseError


class TestEnsureScheme(unittest.TestCase):

    def test_adds_default_scheme(self):
        self.assertEqual(ensure_scheme("example.com"), "https://example.com")

    def test_keeps_http_prefixed_lines(self):
        self.assertEqual(ensure_scheme("http://a.com"), "http://a.com")
        self.assertEqual(ensure_scheme("httpbin.org/get"), "httpbin.org/get")


class TestSplitLocation(unittest.TestCase):
    """Test path/query/fragment extraction"""

    def test_full_url(self):
        self.assertEqual(split_location("https://a.com/p/q?x=1&y=2#top"),
                         ("/p/q", "?x=1&y=2", "#top"))

    def test_empty_path_is_root(self):
        self.assertEqual(split_location("https://a.com"), ("/", "", ""))
        self.assertEqual(split_location("https://a.com?x=1"), ("/", "?x=1", ""))

    def test_empty_query_and_fragment_are_dropped(self):
        self.assertEqual(split_location("https://a.com/p?#"), ("/p", "", ""))

    def test_dot_segments(self):
        self.assertEqual(split_location("https://a.com/a/./b/../c")[0], "/a/c")
        self.assertEqual(split_location("https://a.com/a/b/..")[0], "/a/")
        self.assertEqual(split_location("https://a.com/../a")[0], "/a")

    def test_percent_encoding(self):
        self.assertEqual(split_location("https://a.com/a b")[0], "/a%20b")
        self.assertEqual(split_location("https://a.com/café")[0], "/caf%C3%A9")
        self.assertEqual(split_location("https://a.com/a%20b")[0], "/a%20b")
        self.assertEqual(split_location("https://a.com/p?q='x'")[1], "?q=%27x%27")

    def test_port_and_userinfo(self):
        self.assertEqual(split_location("https://user:pw@a.com:8080/x")[0], "/x")

    def test_ipv6_host(self):
        self.assertEqual(split_location("https://[::1]:8080/x")[0], "/x")

    def test_missing_scheme(self):
        with self.assertRaises(UrlParseError):
            split_location("a.com/x")

    def test_missing_host(self):
        with self.assertRaises(UrlParseError):
            split_location("https://")

    def test_forbidden_host_characters(self):
        for url in ("https://%%%", "https://a b.com/x", "https://a|b.com", "https://a^b.com"):
            with self.assertRaises(UrlParseError, msg=url):
                split_location(url)

    def test_invalid_port(self):
        with self.assertRaises(UrlParseError):
            split_location("https://a.com:99999/x")
        with self.assertRaises(UrlParseError):
            split_location("https://a.com:80a/x")

    def test_non_ascii_digit_port(self):
        with self.assertRaises(UrlParseError):
            split_location("https://example.com:\u00b2/x")

    def test_unencodable_path(self):
        with self.assertRaises(UrlParseError) as ctx:
            split_location("https://example.com/\udcff")
        self.assertIsInstance(ctx.exception.original_error, UnicodeEncodeError)

    def test_scheme_without_slashes(self):
        self.assertEqual(split_location("http:example.com/x"), ("/x", "", ""))

    def test_extra_slashes_after_scheme(self):
        self.assertEqual(split_location("https:///x/y")[0], "/y")
        self.assertEqual(split_location("https:////a.com/y")[0], "/y")

    def test_backslashes_count_as_slashes(self):
        self.assertEqual(split_location("https:\\\\a.com\\p\\q?x=\\")[0:2], ("/p/q", "?x=\\"))

    def test_broken_ipv6_keeps_cause(self):
        with self.assertRaises(UrlParseError) as ctx:
            split_location("https://[::1/x")
        self.assertIsNotNone(ctx.exception.original_error)


class TestStripOrigin(unittest.TestCase):

    def test_strips_everything_before_path(self):
        self.assertEqual(strip_origin("http://www.example.com/category/product"),
                         "/category/product")

    def test_default_scheme_never_leaks(self):
        result = strip_origin("example.com/a?b=c")
        self.assertEqual(result, "/a?b=c")
        self.assertNotIn("https", result)


if __name__ == '__main__':
    unittest.main()
