"""Feature Vote backend."""
