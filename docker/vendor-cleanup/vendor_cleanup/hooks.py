from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .cleaner import Cleaner, CleanupOutcome
from .models import PackageDescriptor
from .repository import InstalledRepository


class CleanupHooks(ABC):
    @abstractmethod
    def on_package_installed(self, package: PackageDescriptor) -> CleanupOutcome:
        """Handle a package that was just installed."""

    @abstractmethod
    def on_package_updated(self, package: PackageDescriptor) -> CleanupOutcome:
        """Handle a package that was just updated to a new version."""

    @abstractmethod
    def on_workflow_completed(
        self, packages: Sequence[PackageDescriptor] | None = None
    ) -> list[CleanupOutcome]:
        """Handle the end of a full install or update run."""


class CleanerHooks(CleanupHooks):
    def __init__(self, cleaner: Cleaner, repository: InstalledRepository | None = None):
        self._cleaner = cleaner
        self._repository = repository

    @property
    def cleaner(self) -> Cleaner:
        return self._cleaner

    def on_package_installed(self, package: PackageDescriptor) -> CleanupOutcome:
        return self._cleaner.clean_package(package)

    def on_package_updated(self, package: PackageDescriptor) -> CleanupOutcome:
        return self._cleaner.clean_package(package)

    def on_workflow_completed(
        self, packages: Sequence[PackageDescriptor] | None = None
    ) -> list[CleanupOutcome]:
        if packages is None:
            packages = self._repository.get_packages() if self._repository is not None else []
        return self._cleaner.clean_all(packages)
