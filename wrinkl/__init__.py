"""WRINKL - AI context management with ledger-based feature tracking.

This package provides a Python CLI application that scaffolds an `.ai/`
context directory for AI coding assistants and manages markdown feature
ledgers inside it.
"""

__version__ = "1.2.0"
SCRIPT_NAME = "WRINKL"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
]
