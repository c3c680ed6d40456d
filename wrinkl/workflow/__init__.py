"""Command workflows for WRINKL.

Each module implements one CLI command on top of the ledger store. The
workflows receive settings, project paths and a user interaction
implementation explicitly; none of them reads global state.
"""

from wrinkl.workflow.archive import archive_feature, build_not_found_error, render_suggestions
from wrinkl.workflow.feature import FeatureResult, create_feature, resolve_feature_id
from wrinkl.workflow.init_project import (
    InitAnswers,
    InitResult,
    create_structure,
    gather_answers,
    run_init,
)
from wrinkl.workflow.listing import (
    list_active_features,
    list_archived_features,
    list_features,
    status_style,
)

__all__ = [
    # Init
    "InitAnswers",
    "InitResult",
    "gather_answers",
    "create_structure",
    "run_init",
    # Feature
    "FeatureResult",
    "resolve_feature_id",
    "create_feature",
    # List
    "status_style",
    "list_active_features",
    "list_archived_features",
    "list_features",
    # Archive
    "archive_feature",
    "build_not_found_error",
    "render_suggestions",
]
