"""Bundled data files for layoutctl."""
