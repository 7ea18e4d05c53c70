"""Helpers shared by the CLI: settings loading, names, terminal output."""
