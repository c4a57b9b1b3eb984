"""
Database models for the URL store.

A single table maps aliases to target URLs.
"""

from .url import URL

__all__ = ["URL"]
