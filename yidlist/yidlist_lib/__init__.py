"""Date and formatting helpers."""
