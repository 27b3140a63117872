"""
Convenience entry point for running timeonly directly.

Usage: python -m timeonly [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app()
