# src/curconv/__init__.py
"""
curconv - Command-line Currency Converter

Loads a snapshot of central bank exchange rates from a local JSON file or a
remote endpoint, converts amounts between any two listed currencies and
prints the results as formatted tables.
"""

__version__ = "1.0.0"
