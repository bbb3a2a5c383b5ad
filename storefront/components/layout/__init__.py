"""
Layout component - Home page section editor.
"""

from ._impl import Direction, LayoutEditor, SectionIdFactory

__all__ = [
    "Direction",
    "LayoutEditor",
    "SectionIdFactory",
]
