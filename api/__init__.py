"""API package - routes, dependencies, middleware and response shaping."""
