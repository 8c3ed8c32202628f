"""Tutorials service: REST API over a MongoDB collection of tutorial records."""

__version__ = "0.1.0"
