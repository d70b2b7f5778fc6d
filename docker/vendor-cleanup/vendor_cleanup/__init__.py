from .cleaner import Cleaner, CleanupOutcome, PatternResult
from .hooks import CleanerHooks, CleanupHooks
from .models import CleanupError, InstallationSource, PackageDescriptor
from .repository import InstalledRepository, RepositoryError
from .rules import RuleTable, RulesFileError


__all__ = [
    "Cleaner",
    "CleanupOutcome",
    "PatternResult",
    "CleanupHooks",
    "CleanerHooks",
    "CleanupError",
    "InstallationSource",
    "PackageDescriptor",
    "InstalledRepository",
    "RepositoryError",
    "RuleTable",
    "RulesFileError",
]
