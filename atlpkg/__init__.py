"""Debian packaging helpers for Atlassian products."""

__version__ = "0.3.0"
