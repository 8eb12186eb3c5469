# src/curconv/__main__.py
"""Module entry point: ``python -m curconv``."""

from curconv.app import main

if __name__ == "__main__":
    main()
