from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CleanupError(Exception):
    """Base class for errors raised by the adapters around the cleaner."""


def normalize_target_dir(value: str | None) -> str | None:
    normalized = str(value or "").strip().strip("/")
    if ".." in normalized.replace("\\", "/").split("/"):
        raise ValueError("target_dir must be a relative path inside the package")
    return normalized or None


class InstallationSource(str, Enum):
    DIST = "dist"
    SOURCE = "source"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Any) -> "InstallationSource":
        """A missing source means DIST, like the dataclass default; unknown ones are OTHER."""
        normalized = str(value or "").strip().lower()
        if not normalized:
            return cls.DIST
        for member in cls:
            if member.value == normalized:
                return member
        return cls.OTHER


@dataclass(frozen=True)
class PackageDescriptor:
    name: str
    installation_source: InstallationSource = InstallationSource.DIST
    target_dir: str | None = None

    @property
    def is_dist(self) -> bool:
        return self.installation_source is InstallationSource.DIST

    @property
    def package_dir(self) -> str:
        """Install path of the package relative to the vendor dir."""
        if self.target_dir:
            return f"{self.name}/{self.target_dir}"
        return self.name

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "PackageDescriptor":
        name = str(payload.get("name") or "").strip()
        if not name:
            raise ValueError("name is required")
        if ".." in name.split("/"):
            raise ValueError("name must not contain parent directory references")

        target_dir = payload.get("target_dir")
        if target_dir is not None and not isinstance(target_dir, str):
            raise ValueError("target_dir must be a string")

        return cls(
            name=name,
            installation_source=InstallationSource.parse(payload.get("installation_source")),
            target_dir=normalize_target_dir(target_dir),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "installation_source": self.installation_source.value,
            "target_dir": self.target_dir,
        }
