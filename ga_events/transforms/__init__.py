"""
Transforms sub-package for ga-events.

Contains the row-level steps applied between parsing and document
building:
  - keying.py: Pair raw rows with the header, dropping empty cells.
"""
