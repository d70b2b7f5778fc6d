from __future__ import annotations

import logging

from apscheduler.schedulers.background import BackgroundScheduler

from .cleaner import Cleaner, CleanupOutcome
from .repository import InstalledRepository


LOGGER = logging.getLogger("vendor_cleanup")


class CleanupScheduler:
    """Periodically re-cleans every package listed in the installed repository."""

    def __init__(
        self,
        *,
        cleaner: Cleaner,
        repository: InstalledRepository,
        sweep_interval_seconds: int = 3600,
    ):
        self._cleaner = cleaner
        self._repository = repository
        self._sweep_interval_seconds = int(sweep_interval_seconds)
        self._scheduler = BackgroundScheduler()
        self._running = False
        self._scheduler.add_job(
            self.run_once,
            "interval",
            seconds=self._sweep_interval_seconds,
            max_instances=1,
            coalesce=True,
        )

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._scheduler.start()
        self._running = True

    def stop(self) -> None:
        if not self._running:
            return
        self._scheduler.shutdown(wait=False)
        self._running = False

    def run_once(self) -> list[CleanupOutcome]:
        try:
            packages = self._repository.get_packages()
        except Exception:
            LOGGER.warning(
                "[CleanupPlugin]: Sweep skipped, cannot list installed packages in %s",
                self._repository.manifest_path,
                exc_info=True,
            )
            return []
        return self._cleaner.clean_all(packages)
