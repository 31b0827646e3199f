"""Bundled data files for scrub."""
