"""Allow running modprune as ``python -m modprune``."""

from modprune.cli.main import entrypoint

if __name__ == "__main__":
    entrypoint()
