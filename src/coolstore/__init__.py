"""Request/command handler pipeline for adding items to a cart."""

__version__ = "0.1.0"
