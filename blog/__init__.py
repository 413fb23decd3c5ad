"""Hiking Trail Blog: a small server-rendered blog."""

__version__ = "1.0.0"
