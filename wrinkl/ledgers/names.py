"""Feature name validation and normalization.

A feature name typed by the user is turned into a canonical identifier that
names the ledger file (`<id>.md`) and appears in `_active.md` links.

Normalization deletes underscores and punctuation rather than converting
them to hyphens, so "My_Feature" becomes "myfeature". Existing ledgers are
keyed by this behaviour; changing it would orphan them.
"""

import re
import string

from wrinkl.utils.errors import NameValidationError, ValidationKind

MAX_NAME_LENGTH = 50

_ALLOWED_NAME = re.compile(r"[a-zA-Z0-9 _-]+")
_WHITESPACE_RUN = re.compile(r"\s+")
_NOT_CANONICAL = re.compile(r"[^a-z0-9-]")
# Only A-Z is folded; other letters must survive to be dropped as non-canonical
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def validate_feature_name(raw: str) -> NameValidationError | None:
    """Check a raw feature name before it is normalized.

    Args:
        raw: Name as entered by the user

    Returns:
        The validation error for the first broken rule, or None if valid
    """
    if not raw or not raw.strip():
        return NameValidationError("Feature name is required", ValidationKind.EMPTY)

    if len(raw) > MAX_NAME_LENGTH:
        return NameValidationError(
            f"Feature name must be {MAX_NAME_LENGTH} characters or less",
            ValidationKind.TOO_LONG,
        )

    if not _ALLOWED_NAME.fullmatch(raw):
        return NameValidationError(
            "Feature name can only contain letters, numbers, spaces, hyphens, and underscores",
            ValidationKind.INVALID_CHARACTERS,
        )

    return None


def normalize_feature_name(raw: str) -> str:
    """Convert a free-form name into a canonical ledger identifier.

    Lowercases ASCII letters, trims, collapses whitespace runs into single hyphens and
    drops every character outside [a-z0-9-]. The result may be empty.

    Args:
        raw: Any string

    Returns:
        The canonical identifier
    """
    name = raw.translate(_ASCII_LOWER).strip()
    name = _WHITESPACE_RUN.sub("-", name)
    return _NOT_CANONICAL.sub("", name)


__all__ = [
    "MAX_NAME_LENGTH",
    "validate_feature_name",
    "normalize_feature_name",
]
