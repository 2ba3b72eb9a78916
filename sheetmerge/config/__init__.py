"""Bundled configuration files for SheetMerge (merge option profiles)."""
