"""
Katas package entry point.

Allows running katas as a module:
    python -m katas
"""

from katas.cli import main

if __name__ == "__main__":
    main()
