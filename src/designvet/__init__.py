"""Matching, lifecycle and ranking engine for designer vetting."""

__version__ = "0.1.0"
