"""CLI entry-point for findjar.

Usage:
    python -m findjar <search-root> [-n <name>] [-p <path> | -a <apath>] [-g <grep>] [...]
    python -m findjar --examples
"""
from findjar.cli import main

if __name__ == "__main__":
    main()
