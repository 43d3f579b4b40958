#!/usr/bin/env python3
"""CLI entry point for python -m clipscript."""

from .cli import main


if __name__ == "__main__":
    main()
