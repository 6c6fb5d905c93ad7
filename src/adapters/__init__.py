"""Entry point adapters."""
