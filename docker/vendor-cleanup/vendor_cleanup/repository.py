from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .models import CleanupError, InstallationSource, PackageDescriptor, normalize_target_dir


MANIFEST_RELATIVE_PATH = Path("composer") / "installed.json"


class RepositoryError(CleanupError):
    """Raised when the installed packages manifest cannot be read."""


def parse_installed_packages(data: Any) -> list[PackageDescriptor]:
    if isinstance(data, dict):
        entries = data.get("packages") or []
    else:
        entries = data or []

    if not isinstance(entries, list):
        raise RepositoryError("installed packages manifest must contain a list of packages")

    out: list[PackageDescriptor] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        name = str(entry.get("name") or "").strip()
        if not name or ".." in name.split("/"):
            continue
        try:
            target_dir = normalize_target_dir(entry.get("target-dir"))
        except ValueError:
            continue
        out.append(
            PackageDescriptor(
                name=name,
                installation_source=InstallationSource.parse(entry.get("installation-source")),
                target_dir=target_dir,
            )
        )
    return out


class InstalledRepository:
    """Packages recorded in the vendor dir's installed.json, in manifest order."""

    def __init__(self, vendor_dir: str | Path):
        self._vendor_dir = Path(vendor_dir)

    @property
    def manifest_path(self) -> Path:
        return self._vendor_dir / MANIFEST_RELATIVE_PATH

    def get_packages(self) -> list[PackageDescriptor]:
        manifest = self.manifest_path
        if not manifest.is_file():
            return []

        try:
            data = json.loads(manifest.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise RepositoryError(f"Cannot read {manifest}: {exc}") from exc

        return parse_installed_packages(data)
