"""Flatten a remote repository into a single markdown document."""

__version__ = "0.1.0"
