"""Web API for the tutorials service."""
