"""lexiboard catalog service."""
