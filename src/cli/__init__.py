"""Command-line interface for uid-index."""
