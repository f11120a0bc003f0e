"""
Map feature styling.

Resolves a feature and a view resolution to the ordered list of Style
descriptors a rendering backend paints.
"""

__version__ = "0.1.0"
