#src/signspeak/__main__.py
"""Entry point for signspeak package.

Usage:
    python -m signspeak [--lang es] [--console]
"""
import sys

from signspeak.app import main

if __name__ == '__main__':
    sys.exit(main())
