"""Classic algorithm and data-structure solutions."""

__version__ = "0.1.0"