"""modprune - prune non-essential files from node_modules trees."""

__version__ = "0.3.0"
