"""Domain layer for Feature Vote."""
