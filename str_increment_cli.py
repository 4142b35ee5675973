#!/usr/bin/env python3
"""str_increment_cli.py - thin CLI wrapper around the str_increment package."""
import sys

from str_increment.cli import main


if __name__ == "__main__":
    sys.exit(main())
