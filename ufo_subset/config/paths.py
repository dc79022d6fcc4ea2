"""
Filesystem constants for UFO sources.
"""

UFO_SUFFIX = ".ufo"
METAINFO_FILENAME = "metainfo.plist"
