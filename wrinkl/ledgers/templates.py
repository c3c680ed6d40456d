"""Template rendering for the AI context files and feature ledgers.

Project templates use `[KEY]` placeholders (e.g. `[PROJECT_NAME]`). The
ledger template uses the literal example values a human would read
(`[Feature Name]`, `feat/feature-name`, `YYYY-MM-DD`) so that it stays
readable when opened directly.
"""

from datetime import datetime, timezone
from pathlib import Path

from wrinkl.utils.errors import TemplateNotFoundError
from wrinkl.utils.logging import log_file_write

# Ledger template placeholders
FEATURE_NAME_PLACEHOLDER = "[Feature Name]"
BRANCH_PLACEHOLDER = "feat/feature-name"
SUMMARY_PLACEHOLDER = "[1-2 sentences: what this does and why it's needed]"
OWNER_PLACEHOLDER = "[Human | AI | Pair]"
DATE_PLACEHOLDER = "YYYY-MM-DD"


def current_date() -> str:
    """Get the current UTC date in YYYY-MM-DD format."""
    return datetime.now(timezone.utc).date().isoformat()


def render_template(content: str, variables: dict[str, str] | None = None) -> str:
    """Replace every `[KEY]` occurrence with its value.

    Args:
        content: Template text
        variables: Mapping of placeholder key to replacement

    Returns:
        Rendered text
    """
    for key, value in (variables or {}).items():
        content = content.replace(f"[{key}]", value)
    return content


def copy_template(src: Path, dest: Path, variables: dict[str, str] | None = None) -> Path:
    """Render a template file into its destination.

    Parent directories of the destination are created as needed and an
    existing destination file is overwritten.

    Args:
        src: Template file
        dest: Output file
        variables: Placeholder values

    Returns:
        The destination path

    Raises:
        TemplateNotFoundError: If the template file does not exist
    """
    if not src.is_file():
        raise TemplateNotFoundError(str(src))

    content = render_template(src.read_text(encoding="utf-8"), variables)

    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(content, encoding="utf-8")
    log_file_write(dest)
    return dest


def render_ledger(
    template: str,
    *,
    name: str,
    feature_id: str,
    summary: str,
    owner: str,
    date: str,
) -> str:
    """Fill the ledger template for a new feature.

    The branch and summary placeholders are replaced once; the name, owner
    and date placeholders everywhere they appear.

    Args:
        template: Contents of `_template.md`
        name: Feature name as the user typed it
        feature_id: Canonical identifier
        summary: One or two sentence summary
        owner: Who drives the feature
        date: Creation date

    Returns:
        Ledger markdown
    """
    content = template.replace(FEATURE_NAME_PLACEHOLDER, name)
    content = content.replace(BRANCH_PLACEHOLDER, f"feat/{feature_id}", 1)
    content = content.replace(SUMMARY_PLACEHOLDER, summary, 1)
    content = content.replace(OWNER_PLACEHOLDER, owner)
    return content.replace(DATE_PLACEHOLDER, date)


__all__ = [
    "FEATURE_NAME_PLACEHOLDER",
    "BRANCH_PLACEHOLDER",
    "SUMMARY_PLACEHOLDER",
    "OWNER_PLACEHOLDER",
    "DATE_PLACEHOLDER",
    "current_date",
    "render_template",
    "copy_template",
    "render_ledger",
]
