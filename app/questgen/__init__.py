"""Interview question PDF generator."""

__version__ = "0.1.0"
