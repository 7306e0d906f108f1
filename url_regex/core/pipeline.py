"""URL list to alternation regex pipeline.

split_lines -> clean_url -> apply_suffix -> join_patterns, tied together by
compute_pattern. Every function here is pure; the clipboard side effect lives
in :mod:`url_regex.core.clipboard`.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from url_regex.core.clipboard import ClipboardOutcome, write_clipboard
from url_regex.core.modes import CleanupMode, MatchingMode, PatternConfig
from url_regex.core.urls import strip_origin
from url_regex.exceptions import UrlParseError

logger = logging.getLogger(__name__)

ALTERNATION = "|"
SCHEME_PREFIX = re.compile(r"^https?://")
SUBDOMAIN_PREFIX = re.compile(r"^www\.")


@dataclass(frozen=True)
class PatternResult:
    """Outcome of one processing run"""
    pattern: str
    line_count: int
    clipboard: ClipboardOutcome


def split_lines(raw_input: str) -> Iterator[str]:
    """Yield the trimmed, non-blank lines of ``raw_input`` in order."""
    for line in raw_input.split("\n"):
        line = line.strip()
        if line:
            yield line


def _strip_domain(url: str, drop_slash: bool) -> str:
    try:
        cleaned = strip_origin(url)
    except UrlParseError as e:
        logger.debug(f"Keeping unparseable line as-is: {e}")
        return url
    if drop_slash and cleaned.startswith("/"):
        cleaned = cleaned[1:]
    return cleaned


def clean_url(url: str, cleanup_mode: CleanupMode) -> str:
    """Apply one cleanup mode to a single candidate line.

    Parse failures in the domain-stripping modes leave the line unchanged.
    """
    if cleanup_mode is CleanupMode.KEEP_FULL:
        return url
    if cleanup_mode is CleanupMode.REMOVE_SCHEME:
        return SCHEME_PREFIX.sub("", url)
    if cleanup_mode is CleanupMode.REMOVE_SCHEME_SUBDOMAIN:
        return SUBDOMAIN_PREFIX.sub("", SCHEME_PREFIX.sub("", url))
    if cleanup_mode is CleanupMode.REMOVE_SCHEME_SUBDOMAIN_DOMAIN:
        return _strip_domain(url, drop_slash=False)
    if cleanup_mode is CleanupMode.REMOVE_SCHEME_SUBDOMAIN_DOMAIN_SLASH:
        return _strip_domain(url, drop_slash=True)
    raise ValueError(f"Unknown cleanup mode: {cleanup_mode!r}")


def apply_suffix(cleaned: str, matching_mode: MatchingMode) -> str:
    """Append the wildcard or end-anchor suffix"""
    return cleaned + matching_mode.suffix


def join_patterns(pattern_lines: Iterable[str]) -> str:
    return ALTERNATION.join(pattern_lines)


def compute_pattern_for(raw_input: str, config: PatternConfig) -> str:
    """Run the whole pipeline with one fixed mode selection."""
    return join_patterns(
        apply_suffix(clean_url(line, config.cleanup), config.matching)
        for line in split_lines(raw_input)
    )


def compute_pattern(raw_input: str,
                    cleanup_mode: CleanupMode = CleanupMode.KEEP_FULL,
                    matching_mode: MatchingMode = MatchingMode.STRICT) -> str:
    """Turn a pasted list of URLs into one alternation regex.

    Args:
        raw_input: Multi-line text, one URL per line.
        cleanup_mode: Which URL prefix to strip from every line.
        matching_mode: Suffix appended to every line.

    Returns:
        str: The ``|``-joined pattern, empty when there are no lines.

    Example:
        >>> compute_pattern("a\\nb")
        'a$|b$'
    """
    return compute_pattern_for(raw_input, PatternConfig(cleanup_mode, matching_mode))


def process_and_copy(raw_input: str, config: PatternConfig,
                     writer: Callable[[str], None] = None) -> PatternResult:
    """Compute the pattern and hand it to the clipboard synchronously"""
    pattern = compute_pattern_for(raw_input, config)
    line_count = sum(1 for _ in split_lines(raw_input))
    logger.info(f"Built pattern from {line_count} URL(s) "
                f"({config.cleanup.value}/{config.matching.value})")
    return PatternResult(pattern, line_count, write_clipboard(pattern, writer))
