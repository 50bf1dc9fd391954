"""Harvest PDF links from HTML index pages and download them once."""

__version__ = "1.0.0"
