"""API-side services."""
