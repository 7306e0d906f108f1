"""URL to pattern transformation core."""
