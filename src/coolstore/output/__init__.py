"""Rendering of handler results for humans and machines."""
