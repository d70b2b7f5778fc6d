from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).parents[2]
VENDOR_CLEANUP_ROOT = REPO_ROOT / "docker" / "vendor-cleanup"
if str(VENDOR_CLEANUP_ROOT) not in sys.path:
    sys.path.append(str(VENDOR_CLEANUP_ROOT))

rules = importlib.import_module("vendor_cleanup.rules")
cleaner_utils = importlib.import_module("vendor_cleanup.cleaner.utils")

RuleTable = rules.RuleTable


def test_default_table_is_loaded_once_and_read_only() -> None:
    first = RuleTable.default()
    second = RuleTable.default()

    assert first is second
    assert first.get_rules() is first.get_rules()
    assert "symfony/console" in first
    assert first.rules_for("symfony/console") == (rules.DOCS, rules.TESTS)

    with pytest.raises(TypeError):
        first.get_rules()["acme/widget"] = ("docs",)


def test_table_accepts_bare_string_groups_and_preserves_order() -> None:
    table = RuleTable({"acme/widget": "docs", "acme/gadget": ["b a", "c"]})

    assert table.rules_for("acme/widget") == ("docs",)
    assert table.rules_for("acme/gadget") == ("b a", "c")
    assert table.rules_for("acme/unknown") is None
    assert len(table) == 2


def test_merged_replaces_and_removes_entries_without_touching_source() -> None:
    base = RuleTable({"acme/widget": ["docs"], "acme/gadget": ["tests"]})

    merged = base.merged({"acme/widget": ["*.md"], "acme/gadget": [], "acme/new": "build"})

    assert merged.rules_for("acme/widget") == ("*.md",)
    assert "acme/gadget" not in merged
    assert merged.rules_for("acme/new") == ("build",)
    assert base.rules_for("acme/gadget") == ("tests",)


def test_load_rules_file_reads_json_object(tmp_path: Path) -> None:
    rules_file = tmp_path / "rules.json"
    rules_file.write_text(json.dumps({"acme/widget": "docs *.md", "acme/gadget": ["tests", "build"]}))

    loaded = rules.load_rules_file(rules_file)

    assert loaded == {"acme/widget": ["docs *.md"], "acme/gadget": ["tests", "build"]}


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        json.dumps(["docs"]),
        json.dumps({"acme/widget": [1, 2]}),
    ],
)
def test_load_rules_file_rejects_invalid_content(tmp_path: Path, content: str) -> None:
    rules_file = tmp_path / "rules.json"
    rules_file.write_text(content)

    with pytest.raises(rules.RulesFileError):
        rules.load_rules_file(rules_file)


def test_load_rules_file_missing_file(tmp_path: Path) -> None:
    with pytest.raises(rules.RulesFileError):
        rules.load_rules_file(tmp_path / "missing.json")


def test_split_patterns_discards_empty_tokens() -> None:
    assert cleaner_utils.split_patterns("  docs   tests\t*.md \n") == ["docs", "tests", "*.md"]
    assert cleaner_utils.split_patterns("") == []


@pytest.mark.parametrize("pattern", ["docs/*", "[!a]*.md", "[]]x", "README*", "a/b?c"])
def test_validate_pattern_accepts_shell_globs(pattern: str) -> None:
    assert cleaner_utils.validate_pattern(pattern) == pattern


@pytest.mark.parametrize("pattern", ["[abc", "docs/[!", "../vendor", "/etc/*", "a/../../b"])
def test_validate_pattern_rejects_invalid_patterns(pattern: str) -> None:
    with pytest.raises(cleaner_utils.InvalidPatternError):
        cleaner_utils.validate_pattern(pattern)


def test_default_rules_contain_only_valid_patterns() -> None:
    for groups in RuleTable.default().get_rules().values():
        for group in groups:
            for pattern in cleaner_utils.split_patterns(group):
                cleaner_utils.validate_pattern(pattern)
