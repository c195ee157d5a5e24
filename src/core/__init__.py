"""
Core text and number helpers.

Pure functions with no external state; the only shared resource is the
lazily created markup parser in src.core.text.markup.
"""
