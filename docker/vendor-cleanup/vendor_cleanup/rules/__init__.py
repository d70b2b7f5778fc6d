from .defaults import DEFAULT_RULES, DOCS, TESTS
from .table import RuleTable, RulesFileError, load_rules_file


__all__ = [
    "DEFAULT_RULES",
    "DOCS",
    "TESTS",
    "RuleTable",
    "RulesFileError",
    "load_rules_file",
]
