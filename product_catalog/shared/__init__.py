"""Cross-cutting concerns shared by every layer: config, errors, logging, middleware."""
