"""
Main entry point for the pattern catalog.

Allows invoking the CLI via:
    python -m pattern_catalog list
    python -m pattern_catalog run state
    python -m pattern_catalog run-all --category structural
"""

from pattern_catalog.cli import main

if __name__ == "__main__":
    main()
