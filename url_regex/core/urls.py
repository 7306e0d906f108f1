"""Best-effort URL parsing for the domain-stripping cleanup modes.

The split follows what a browser's URL parser reports as
``pathname + search + hash`` for http(s) URLs: an empty path reads as ``/``,
``?`` and ``#`` are only kept when something follows them, dot segments are
resolved and unsafe characters are percent-encoded. Anything that a browser
would refuse as a host raises :class:`UrlParseError`.
"""

import re
import string
from typing import Tuple
from urllib.parse import quote, urlsplit

from url_regex.exceptions import UrlParseError

DEFAULT_SCHEME = "https://"
SPECIAL_SCHEMES = {"http", "https"}
FORBIDDEN_HOST_CHARS = set(" #%/:<>?@[\\]^|")

_PRINTABLE = set(string.printable[:94])  # 0x21-0x7E
PATH_SAFE = "".join(sorted(_PRINTABLE - set('"#<>?`{}')))
QUERY_SAFE = "".join(sorted(_PRINTABLE - set("\"#<>'")))
FRAGMENT_SAFE = "".join(sorted(_PRINTABLE - set('"<>`')))

_SINGLE_DOT = {".", "%2e"}
_DOUBLE_DOT = {"..", ".%2e", "%2e.", "%2e%2e"}
_SPECIAL_PREFIX = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*):([^?#]*)(.*)$", re.DOTALL)


def ensure_scheme(url: str) -> str:
    """Prefix the default scheme unless the line already starts with ``http``."""
    return url if url.startswith("http") else DEFAULT_SCHEME + url


def _normalize_special(url: str) -> str:
    """Read http(s) URLs the lenient way browsers do.

    Backslashes before the query count as slashes and any run of slashes
    after the scheme is collapsed, so ``http:a.com/x`` and ``https:///x``
    both get an authority.
    """
    match = _SPECIAL_PREFIX.match(url)
    if not match or match.group(1).lower() not in SPECIAL_SCHEMES:
        return url
    scheme, head, tail = match.groups()
    head = head.replace("\\", "/").lstrip("/")
    return f"{scheme}://{head}{tail}"


def _check_host(netloc: str) -> str:
    """Validate the authority part and return its host"""
    host_port = netloc.rpartition("@")[2]
    if host_port.startswith("["):
        host, bracket, port = host_port[1:].partition("]")
        if not bracket or not host:
            raise UrlParseError(f"Invalid IPv6 host: {netloc!r}")
        port = port[1:] if port.startswith(":") else port
    else:
        host, _, port = host_port.partition(":")
        if not host:
            raise UrlParseError(f"Missing host: {netloc!r}")
        bad = FORBIDDEN_HOST_CHARS.intersection(host)
        if bad:
            raise UrlParseError(f"Forbidden host characters {sorted(bad)} in {host!r}")
    if port and (not (port.isascii() and port.isdigit()) or int(port) > 65535):
        raise UrlParseError(f"Invalid port {port!r}")
    return host


def _resolve_dot_segments(path: str) -> str:
    segments = path.split("/")[1:]
    output = []
    for index, segment in enumerate(segments):
        last = index == len(segments) - 1
        lowered = segment.lower()
        if lowered in _DOUBLE_DOT:
            if output:
                output.pop()
            if last:
                output.append("")
        elif lowered in _SINGLE_DOT:
            if last:
                output.append("")
        else:
            output.append(segment)
    return "/" + "/".join(output)


def split_location(url: str) -> Tuple[str, str, str]:
    """Parse an absolute URL into its (path, query, fragment) parts.

    ``query`` and ``fragment`` include their leading ``?`` and ``#`` when
    non-empty, so the three parts can simply be concatenated.

    Raises:
        UrlParseError: If the URL has no scheme, no usable host or an
            invalid port.
    """
    try:
        parts = urlsplit(_normalize_special(url))
    except ValueError as e:
        raise UrlParseError(f"Cannot parse {url!r}", original_error=e) from e

    if not parts.scheme:
        raise UrlParseError(f"Missing scheme: {url!r}")
    path = parts.path
    if parts.scheme.lower() in SPECIAL_SCHEMES:
        _check_host(parts.netloc)
        path = _resolve_dot_segments(path or "/")
    try:
        path = quote(path, safe=PATH_SAFE)
        query = "?" + quote(parts.query, safe=QUERY_SAFE) if parts.query else ""
        fragment = "#" + quote(parts.fragment, safe=FRAGMENT_SAFE) if parts.fragment else ""
    except UnicodeEncodeError as e:
        raise UrlParseError(f"Cannot encode {url!r}", original_error=e) from e
    return path, query, fragment


def strip_origin(url: str) -> str:
    """Return everything after the host of ``url``.

    A default scheme is added first when the line has none; it never shows up
    in the result.
    """
    path, query, fragment = split_location(ensure_scheme(url))
    return path + query + fragment
