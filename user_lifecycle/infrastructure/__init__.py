"""Infrastructure layer: DB pool and user store adapters."""
