"""Entry point for running wrinkl as a module.

This allows running the application with:
    python -m wrinkl [COMMAND] [OPTIONS]
"""

from wrinkl.cli import app

if __name__ == "__main__":
    app()
