"""HTTP API: routes, middleware and response schemas."""
