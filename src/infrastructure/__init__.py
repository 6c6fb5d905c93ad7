"""Infrastructure adapters and composition helpers."""
