"""Bundled data files for remove-folders."""
