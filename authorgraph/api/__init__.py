"""Request-handling helpers shared by the HTTP blueprints."""
