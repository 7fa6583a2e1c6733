"""Command-line interface for swimlog."""
