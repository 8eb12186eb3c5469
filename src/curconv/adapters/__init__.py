# src/curconv/adapters/__init__.py
"""
Adapters Layer - Infrastructure Implementations

This package contains adapters for external systems:
- Rate sources (local JSON file, HTTP endpoint)
- Terminal formatting (tables and colors)
"""
