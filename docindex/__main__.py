"""
Entry point for running docindex as a module.

Usage: python -m docindex [args]
"""

from docindex.cli import main

if __name__ == "__main__":
    main()
