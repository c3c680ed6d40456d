"""Feature ledger handling for WRINKL.

This package contains:
- names: Feature name validation and normalization
- suggest: Edit distance and "did you mean" suggestions
- store: Ledger directory scanning, parsing and mutation
- templates: Placeholder substitution for project files and ledgers
"""

from wrinkl.ledgers.names import MAX_NAME_LENGTH, normalize_feature_name, validate_feature_name
from wrinkl.ledgers.store import (
    ActiveListUpdate,
    LedgerStore,
    LedgerSummary,
    ProjectInfo,
    mark_archived,
    parse_ledger,
)
from wrinkl.ledgers.suggest import MAX_SUGGESTION_DISTANCE, levenshtein_distance, suggest_similar
from wrinkl.ledgers.templates import copy_template, current_date, render_ledger, render_template

__all__ = [
    # Names
    "MAX_NAME_LENGTH",
    "normalize_feature_name",
    "validate_feature_name",
    # Suggestions
    "MAX_SUGGESTION_DISTANCE",
    "levenshtein_distance",
    "suggest_similar",
    # Store
    "ActiveListUpdate",
    "LedgerStore",
    "LedgerSummary",
    "ProjectInfo",
    "mark_archived",
    "parse_ledger",
    # Templates
    "copy_template",
    "current_date",
    "render_ledger",
    "render_template",
]
