"""Command-line interface for vuegen."""
