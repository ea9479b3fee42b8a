"""Infrastructure layer: persistence, HTTP and external service adapters."""
