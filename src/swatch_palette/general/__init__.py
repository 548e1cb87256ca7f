"""
general.
=======

Does: Group project-wide helpers (config loading, debug logging) that are not
      tied to color math or palette selection.
"""

__all__: list[str] = []
__docformat__ = "google"
