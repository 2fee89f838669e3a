"""Bundled data files for modprune."""
