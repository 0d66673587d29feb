"""Route finder services."""
