from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


STATUS_CLEANED = "cleaned"
STATUS_SKIPPED = "skipped"

SKIP_NOT_DIST = "not a dist package"
SKIP_NO_RULES = "no rules for package"
SKIP_DIRECTORY_MISSING = "directory missing"


@dataclass
class PatternResult:
    pattern: str
    removed: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass
class CleanupOutcome:
    package_name: str
    package_dir: str
    status: str
    reason: str | None = None
    pattern_results: list[PatternResult] = field(default_factory=list)

    @classmethod
    def skipped(cls, package_name: str, package_dir: str, reason: str) -> "CleanupOutcome":
        return cls(package_name=package_name, package_dir=package_dir, status=STATUS_SKIPPED, reason=reason)

    @property
    def cleaned(self) -> bool:
        return self.status == STATUS_CLEANED

    @property
    def files_removed(self) -> int:
        return sum(len(result.removed) for result in self.pattern_results)

    @property
    def removed_paths(self) -> list[str]:
        return [path for result in self.pattern_results for path in result.removed]

    @property
    def failures(self) -> list[PatternResult]:
        return [result for result in self.pattern_results if result.failed]

    def to_dict(self) -> dict[str, Any]:
        return {
            "package": self.package_name,
            "package_dir": self.package_dir,
            "status": self.status,
            "reason": self.reason,
            "files_removed": self.files_removed,
            "removed": self.removed_paths,
            "failures": [{"pattern": item.pattern, "error": item.error} for item in self.failures],
        }
