"""Suffix-based file cleaner (e.g. Maven ``*.lastUpdated`` markers)."""

from validstring_utils.cleaner.cleaner import DirectoryCleaner, EntryCallback, clean_directory

__all__ = ["DirectoryCleaner", "EntryCallback", "clean_directory"]
