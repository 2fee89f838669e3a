"""Core configuration, path, and theme handling for modprune."""
