"""HTTP layer: app factory, routers, dependencies and exception handlers."""
