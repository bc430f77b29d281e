"""Service monitoring."""
