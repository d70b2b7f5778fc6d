from __future__ import annotations

import glob
import logging
import os
import threading
from typing import Iterable

from ..models import PackageDescriptor
from ..rules import RuleTable
from .base import (
    SKIP_DIRECTORY_MISSING,
    SKIP_NO_RULES,
    SKIP_NOT_DIST,
    STATUS_CLEANED,
    CleanupOutcome,
    PatternResult,
)
from .utils import remove_path, split_patterns, validate_pattern


LOGGER = logging.getLogger("vendor_cleanup")


class Cleaner:
    """Deletes rule-matched clutter from installed packages.

    Cleanup is best effort: nothing raised while expanding or deleting a
    pattern leaves ``clean_package``. Failures are logged and recorded on the
    returned outcome instead.

    Calls are serialized: one package is processed fully before the next
    begins, even when a sweep thread and a request thread share the cleaner.
    """

    def __init__(self, *, rule_table: RuleTable, base_install_dir: str | os.PathLike[str]):
        self._rule_table = rule_table
        self._base_install_dir = os.fspath(base_install_dir)
        self._lock = threading.RLock()

    @property
    def rule_table(self) -> RuleTable:
        return self._rule_table

    @property
    def base_install_dir(self) -> str:
        return self._base_install_dir

    def clean_package(self, package: PackageDescriptor) -> CleanupOutcome:
        with self._lock:
            return self._clean_package(package)

    def _clean_package(self, package: PackageDescriptor) -> CleanupOutcome:
        package_dir = package.package_dir

        if not package.is_dist:
            return self._skip(package, package_dir, SKIP_NOT_DIST)

        rules = self._rule_table.rules_for(package.name)
        if not rules:
            return self._skip(package, package_dir, SKIP_NO_RULES)

        target_dir = self._resolve_package_dir(package_dir)
        if target_dir is None:
            return self._skip(package, package_dir, SKIP_DIRECTORY_MISSING)

        outcome = CleanupOutcome(package_name=package.name, package_dir=package_dir, status=STATUS_CLEANED)
        for group in rules:
            for pattern in split_patterns(group):
                outcome.pattern_results.append(self._apply_pattern(target_dir, package_dir, pattern))
        return outcome

    def clean_all(self, packages: Iterable[PackageDescriptor]) -> list[CleanupOutcome]:
        with self._lock:
            outcomes = [self.clean_package(package) for package in packages]

        cleaned = [item for item in outcomes if item.cleaned]
        LOGGER.info(
            "[CleanupPlugin] Cleaned %d of %d packages, %d files removed, %d pattern failures",
            len(cleaned),
            len(outcomes),
            sum(item.files_removed for item in cleaned),
            sum(len(item.failures) for item in cleaned),
        )
        return outcomes

    def _apply_pattern(self, target_dir: str, package_dir: str, pattern: str) -> PatternResult:
        result = PatternResult(pattern=pattern)
        try:
            validate_pattern(pattern)
            for path in sorted(glob.glob(os.path.join(glob.escape(target_dir), pattern))):
                if remove_path(path):
                    result.removed.append(path)
                    LOGGER.info("[CleanupPlugin] Removing file: %s", path)
        except Exception as exc:
            result.error = str(exc) or exc.__class__.__name__
            LOGGER.warning("[CleanupPlugin] Could not parse %s (%s): %s", package_dir, pattern, result.error)
        return result

    def _resolve_package_dir(self, package_dir: str) -> str | None:
        try:
            base = os.path.normpath(os.path.realpath(self._base_install_dir))
            resolved = os.path.normpath(os.path.realpath(os.path.join(base, package_dir)))
            inside = resolved != base and os.path.commonpath([base, resolved]) == base
        except (OSError, ValueError):
            return None
        if not inside or not os.path.isdir(resolved):
            return None
        return resolved

    def _skip(self, package: PackageDescriptor, package_dir: str, reason: str) -> CleanupOutcome:
        LOGGER.debug("[CleanupPlugin] Skipping %s: %s", package_dir, reason)
        return CleanupOutcome.skipped(package.name, package_dir, reason)
