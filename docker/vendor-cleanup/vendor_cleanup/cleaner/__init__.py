from .base import (
    SKIP_DIRECTORY_MISSING,
    SKIP_NO_RULES,
    SKIP_NOT_DIST,
    STATUS_CLEANED,
    STATUS_SKIPPED,
    CleanupOutcome,
    PatternResult,
)
from .engine import Cleaner
from .utils import InvalidPatternError, split_patterns, validate_pattern


__all__ = [
    "Cleaner",
    "CleanupOutcome",
    "PatternResult",
    "InvalidPatternError",
    "split_patterns",
    "validate_pattern",
    "STATUS_CLEANED",
    "STATUS_SKIPPED",
    "SKIP_NOT_DIST",
    "SKIP_NO_RULES",
    "SKIP_DIRECTORY_MISSING",
]
