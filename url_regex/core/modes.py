"""Cleanup and matching modes."""

from dataclasses import dataclass
from enum import Enum


class CleanupMode(Enum):
    """Which leading portion of a URL is stripped before suffixing"""
    KEEP_FULL = "keep"
    REMOVE_SCHEME = "scheme"
    REMOVE_SCHEME_SUBDOMAIN = "subdomain"
    REMOVE_SCHEME_SUBDOMAIN_DOMAIN = "domain"
    REMOVE_SCHEME_SUBDOMAIN_DOMAIN_SLASH = "slash"


class MatchingMode(Enum):
    """Regex suffix appended to every cleaned line"""
    WILDCARD = "wildcard"
    STRICT = "strict"

    @property
    def suffix(self):
        return SUFFIXES[self]


SUFFIXES = {
    MatchingMode.WILDCARD: ".*",
    MatchingMode.STRICT: "$",
}


@dataclass(frozen=True)
class PatternConfig:
    """Mode selection used for one whole pipeline run."""
    cleanup: CleanupMode = CleanupMode.KEEP_FULL
    matching: MatchingMode = MatchingMode.STRICT
