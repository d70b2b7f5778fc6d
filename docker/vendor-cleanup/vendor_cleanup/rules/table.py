from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Sequence

from ..models import CleanupError
from .defaults import DEFAULT_RULES


class RulesFileError(CleanupError, ValueError):
    """Raised when a user rules file cannot be used."""


def _freeze_groups(groups: Sequence[str] | str) -> tuple[str, ...]:
    if isinstance(groups, str):
        groups = [groups]
    return tuple(str(group) for group in groups)


class RuleTable:
    """Read-only mapping of package name to its ordered rule groups."""

    def __init__(self, rules: Mapping[str, Sequence[str] | str]):
        self._rules: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {str(name): _freeze_groups(groups) for name, groups in rules.items()}
        )

    @classmethod
    def default(cls) -> "RuleTable":
        return _default_table()

    def get_rules(self) -> Mapping[str, tuple[str, ...]]:
        return self._rules

    def rules_for(self, package_name: str) -> tuple[str, ...] | None:
        return self._rules.get(package_name)

    def merged(self, overrides: Mapping[str, Sequence[str] | str]) -> "RuleTable":
        """Return a new table where each override replaces the entry of the same package.

        An override with no groups removes the package from the table.
        """
        combined: dict[str, Sequence[str] | str] = dict(self._rules)
        for name, groups in overrides.items():
            frozen = _freeze_groups(groups)
            if frozen:
                combined[str(name)] = frozen
            else:
                combined.pop(str(name), None)
        return RuleTable(combined)

    def __contains__(self, package_name: object) -> bool:
        return package_name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleTable(packages={len(self._rules)})"


@lru_cache(maxsize=1)
def _default_table() -> RuleTable:
    return RuleTable(DEFAULT_RULES)


def load_rules_file(path: str | Path) -> dict[str, list[str]]:
    rules_path = Path(path)
    try:
        payload = json.loads(rules_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RulesFileError(f"Cannot read rules file {rules_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RulesFileError(f"Invalid JSON in rules file {rules_path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise RulesFileError("rules file must contain a JSON object")

    out: dict[str, list[str]] = {}
    for name, groups in payload.items():
        if isinstance(groups, str):
            groups = [groups]
        if not isinstance(groups, list) or not all(isinstance(item, str) for item in groups):
            raise RulesFileError(f"rules for '{name}' must be a string or a list of strings")
        out[str(name)] = list(groups)
    return out
