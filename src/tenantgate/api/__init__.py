"""HTTP API - root router, page routes and shared dependencies."""
