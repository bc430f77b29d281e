"""User profile reads and updates."""
