"""HTTP API for the route finder."""
