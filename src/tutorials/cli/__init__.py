"""Command-line interface for the tutorials service."""
