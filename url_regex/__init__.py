"""Turn lists of URLs into a single alternation regex."""

from url_regex.core.modes import CleanupMode, MatchingMode, PatternConfig
from url_regex.core.pipeline import compute_pattern, compute_pattern_for

__version__ = "0.1.0"

__all__ = [
    "CleanupMode",
    "MatchingMode",
    "PatternConfig",
    "compute_pattern",
    "compute_pattern_for",
]
