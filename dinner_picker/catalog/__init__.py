"""
Menu catalog package.

Responsibilities:
- Split delimited catalog text into fields (quoted fields supported).
- Validate genre and carb values against their closed vocabularies.
- Build immutable MenuRecord values with content-derived ids.
- Load the catalog file and expose a tabular summary of it.
"""
