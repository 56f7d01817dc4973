"""Web layer: routers, handlers and templates."""
