"""
ufo-subset: reduce a UFO font source to a small, self-consistent glyph subset.
"""

__version__ = "0.1.0"
