"""apizza — command-line pizza ordering, built on a Builder/Runner core."""

__version__ = "0.1.0"

__all__ = ["__version__"]
