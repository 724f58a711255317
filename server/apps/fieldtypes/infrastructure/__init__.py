"""Infrastructure layer for fieldtypes app.

This package contains integrations with external systems:
- Local file system lookups (existence, base name, size)

Keep infrastructure concerns separate from field type logic.
"""
