"""Data models and helpers for browsing heap allocation profiles."""

__version__ = "0.1.0"